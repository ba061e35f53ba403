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
Model for the container root filesystem.
"""
from typing import Any, Optional

from pydantic import StrictBool, ValidationInfo, model_validator

from .base import OciModel

DEFAULT_ROOTFS = "rootfs"


class Root(OciModel):
    """
    Location of the container's root filesystem on the host.

    Constructing ``Root()`` in code gives the documented default
    (``rootfs``, read-only). A parsed document keeps exactly what it
    contains: a missing ``path`` is ``""`` and a missing ``readonly`` is None.
    """

    model_config = {"frozen": True}

    path: str = DEFAULT_ROOTFS
    readonly: Optional[StrictBool] = True

    @model_validator(mode="before")
    @classmethod
    def _document_defaults(cls, data: Any, info: ValidationInfo) -> Any:
        if isinstance(data, dict) and cls.is_document(info):
            return {"path": "", "readonly": None, **data}
        return data
