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
User and group ID mappings used by ID-mapped mounts.
"""
from pydantic import Field

from .base import OciModel, Uint32


class LinuxIdMapping(OciModel):
    """
    Maps a contiguous range of IDs inside the container onto the host.
    """

    host_id: Uint32 = Field(default=0, alias="hostID")
    container_id: Uint32 = Field(default=0, alias="containerID")
    size: Uint32 = 0
