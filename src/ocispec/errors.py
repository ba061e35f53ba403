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
Error types shared by every OCI runtime entity.
"""

import os
from typing import Union


class OciSpecError(Exception):
    """Base error for all OCI runtime spec failures."""


class OciIoError(OciSpecError):
    """A file backing a document could not be opened, read or written."""

    def __init__(self, path: Union[str, "os.PathLike[str]"], reason: str = "") -> None:
        self.path = os.fspath(path)
        self.reason = reason
        msg = f"I/O error on {self.path}"
        if reason:
            msg += f": {reason}"
        super().__init__(msg)


class OciSerializationError(OciSpecError):
    """A document could not be decoded from, or encoded to, JSON."""

    def __init__(self, detail: str = "") -> None:
        self.detail = detail
        super().__init__("Serialization error" + (f": {detail}" if detail else ""))


class OciValidationError(OciSpecError):
    """A combination of field values violates a runtime spec rule."""

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(detail)
