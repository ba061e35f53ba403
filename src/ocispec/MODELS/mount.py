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
Model for a single container mount, including ID-mapped mounts.
"""
import logging
from typing import Any, List, Optional

from pydantic import Field, ValidationInfo, model_validator

from ..errors import OciValidationError
from .base import OciModel
from .id_mapping import LinuxIdMapping

logger = logging.getLogger(__name__)

IDMAP_OPTIONS = ("idmap", "ridmap")


class Mount(OciModel):
    """
    A mount to place inside the container.

    ``uid_mappings`` and ``gid_mappings`` describe an ID-mapped mount and
    must be given together. An empty list counts as not given.
    A parsed document must carry ``destination``.
    """

    destination: str = ""
    typ: Optional[str] = Field(default=None, alias="type")
    source: Optional[str] = None
    options: Optional[List[str]] = None
    uid_mappings: Optional[List[LinuxIdMapping]] = Field(default=None, alias="uidMappings")
    gid_mappings: Optional[List[LinuxIdMapping]] = Field(default=None, alias="gidMappings")

    @model_validator(mode="before")
    @classmethod
    def _require_destination(cls, data: Any, info: ValidationInfo) -> Any:
        cls.require_in_document(data, info, "destination")
        return data

    @model_validator(mode="after")
    def _validate_id_mappings(self) -> "Mount":
        self.check_id_mappings()
        return self

    @property
    def is_idmapped(self) -> bool:
        """True when both mapping lists are present and non-empty."""
        return bool(self.uid_mappings) and bool(self.gid_mappings)

    def check_id_mappings(self) -> None:
        """
        Checks that the UID and GID mappings are specified together.

        Attribute assignment does not re-run this check, so call it after
        changing either mapping list on an existing mount.

        Raises:
            OciValidationError: If exactly one of the two lists is non-empty.
        """
        uid_specified = bool(self.uid_mappings)
        gid_specified = bool(self.gid_mappings)

        if uid_specified != gid_specified:
            raise OciValidationError(
                "Mount.uidMappings and Mount.gidMappings must be specified together"
            )

        if uid_specified and not any(o in IDMAP_OPTIONS for o in self.options or []):
            logger.warning(
                "Mount %s has ID mappings but no idmap or ridmap option",
                self.destination,
            )
