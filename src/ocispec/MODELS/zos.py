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
z/OS platform section of the container configuration.
"""
from enum import Enum
from typing import Any, List, Optional

from pydantic import Field, ValidationInfo, field_validator, model_validator

from ..errors import OciValidationError
from .base import OciModel


class ZOSNamespaceType(str, Enum):
    """Namespaces available on z/OS."""

    PID = "pid"  # process IDs
    MOUNT = "mount"  # mount points
    IPC = "ipc"  # System V IPC, POSIX message queues
    UTS = "uts"  # hostname and NIS domain name

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_str(cls, token: str) -> "ZOSNamespaceType":
        """
        Converts a lowercase namespace token to its type.

        Raises:
            OciValidationError: If the token names no known namespace.
        """
        for ns_type in cls:
            if ns_type.value == token:
                return ns_type
        raise OciValidationError(f"unknown z/OS namespace {token}, could not convert")


class ZOSNamespace(OciModel):
    """
    A namespace to create, or to join when ``path`` points at an existing one.

    ``typ`` defaults to pid in code, but a parsed document must carry ``type``.
    """

    model_config = {"frozen": True}

    typ: ZOSNamespaceType = Field(default=ZOSNamespaceType.PID, alias="type")
    path: Optional[str] = None

    @model_validator(mode="before")
    @classmethod
    def _require_type(cls, data: Any, info: ValidationInfo) -> Any:
        cls.require_in_document(data, info, "type")
        return data

    @field_validator("typ", mode="before")
    @classmethod
    def _parse_type(cls, value: Any) -> Any:
        if isinstance(value, str) and not isinstance(value, ZOSNamespaceType):
            return ZOSNamespaceType.from_str(value)
        return value


class ZOS(OciModel):
    """Information for z/OS based containers."""

    namespaces: Optional[List[ZOSNamespace]] = None
