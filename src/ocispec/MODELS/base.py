# Copyright 2024 Michael Maillet, Damien Davison, Sacha Davison
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""
Base model carrying the wire conventions shared by every OCI document.
"""
import json
from typing import Annotated, Any, Dict, Optional, Type, TypeVar

from pydantic import BaseModel, Field, Strict, ValidationError, ValidationInfo
from pydantic_core import PydanticSerializationError

from ..errors import OciSerializationError

# Integers and booleans are the only wire types pydantic would coerce from
# JSON (e.g. "42" or "yes"), so they are declared strict.
Int32 = Annotated[int, Strict(), Field(ge=-(2**31), le=2**31 - 1)]
Uint32 = Annotated[int, Strict(), Field(ge=0, le=2**32 - 1)]

T = TypeVar("T", bound="OciModel")

# Passed as validation context when input comes from a wire document rather
# than from keyword construction in code.
DOCUMENT_CONTEXT = {"source": "document"}


class OciModel(BaseModel):
    """
    Common base for runtime spec entities.

    Fields are declared under their Python names and carry the wire name as
    an alias. Optional fields holding None are left out of the output.
    Integer and boolean fields are strict, so a wrong-typed wire value is
    rejected rather than coerced.
    """

    model_config = {"populate_by_name": True}

    @staticmethod
    def is_document(info: ValidationInfo) -> bool:
        """True when validating input that came from from_dict or from_json."""
        return bool(info.context) and info.context.get("source") == "document"

    @classmethod
    def require_in_document(cls, data: Any, info: ValidationInfo, *keys: str) -> None:
        """Rejects a parsed document that lacks one of the given wire keys."""
        if isinstance(data, dict) and cls.is_document(info):
            missing = [k for k in keys if k not in data]
            if missing:
                raise ValueError(f"{cls.__name__} document is missing {', '.join(missing)}")

    @classmethod
    def from_dict(cls: Type[T], data: Dict[str, Any]) -> T:
        """
        Builds an instance from an already decoded JSON object.

        The data is checked exactly as if it had been read as JSON text.

        Raises:
            OciSerializationError: If the data does not match the schema.
            OciValidationError: If the data breaks a semantic rule.
        """
        try:
            content = json.dumps(data)
        except (TypeError, ValueError) as e:
            raise OciSerializationError(str(e)) from e
        return cls.from_json(content)

    @classmethod
    def from_json(cls: Type[T], content: str) -> T:
        """
        Builds an instance from JSON text.

        Raises:
            OciSerializationError: If the text is not valid JSON or does not
                match the schema.
            OciValidationError: If the document breaks a semantic rule.
        """
        try:
            return cls.model_validate_json(content, context=DOCUMENT_CONTEXT)
        except ValidationError as e:
            raise OciSerializationError(str(e)) from e

    def to_dict(self) -> Dict[str, Any]:
        """Returns the JSON-compatible wire representation."""
        try:
            return self.model_dump(mode="json", by_alias=True, exclude_none=True)
        except PydanticSerializationError as e:
            raise OciSerializationError(str(e)) from e

    def to_json(self, indent: Optional[int] = None) -> str:
        """Returns the wire representation as JSON text, compact by default."""
        try:
            return self.model_dump_json(by_alias=True, exclude_none=True, indent=indent)
        except PydanticSerializationError as e:
            raise OciSerializationError(str(e)) from e
