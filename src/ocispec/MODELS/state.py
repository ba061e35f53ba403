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
Runtime state of a container, as persisted by the runtime and reported
to external listeners.
"""
import logging
import os
from enum import Enum
from typing import Dict, List, Optional, Union

from pydantic import Field

from ..errors import OciIoError
from .base import Int32, OciModel

logger = logging.getLogger(__name__)

# Name of the seccomp notify file descriptor in ContainerProcessState.fds.
SECCOMP_FD_NAME = "seccompFd"

PathLike = Union[str, "os.PathLike[str]"]


class ContainerState(str, Enum):
    """
    Lifecycle phase of a container.
    """

    CREATING = "creating"  # being created
    CREATED = "created"  # create finished, user program not started
    RUNNING = "running"  # user program executing
    STOPPED = "stopped"  # process exited

    def __str__(self) -> str:
        return self.value


class State(OciModel):
    """
    Snapshot of a container's runtime state.

    A None ``pid`` means the container process has not started yet.
    """

    version: str = Field(default="", alias="ociVersion")
    id: str = ""
    status: ContainerState = ContainerState.STOPPED
    pid: Optional[Int32] = None
    bundle: str = ""
    annotations: Optional[Dict[str, str]] = None

    @classmethod
    def load(cls, path: PathLike) -> "State":
        """
        Loads a state document from a JSON file.

        Args:
            path: File to read.

        Returns:
            The parsed State.

        Raises:
            OciIoError: If the file cannot be opened or read as UTF-8 text.
            OciSerializationError: If the content is not a valid state document.
        """
        try:
            with open(path, "r", encoding="utf-8") as f:
                content = f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise OciIoError(path, str(e)) from e

        state = cls.from_json(content)
        logger.debug("Loaded state of container %r from %s", state.id, os.fspath(path))
        return state

    def save(self, path: PathLike) -> None:
        """
        Writes this state to a JSON file, creating or truncating it.

        The document is fully encoded before the file is touched and flushed
        before returning, so a reader opening the path afterwards sees the
        whole document.

        Args:
            path: File to write.

        Raises:
            OciIoError: If the file cannot be created or written.
            OciSerializationError: If the state cannot be encoded.
        """
        payload = self.to_json()
        try:
            with open(path, "w", encoding="utf-8") as f:
                f.write(payload)
                f.flush()
        except OSError as e:
            raise OciIoError(path, str(e)) from e
        logger.debug("Saved state of container %r to %s", self.id, os.fspath(path))


class ContainerProcessState(OciModel):
    """
    Process details sent to a listener together with file descriptors.

    The name at index i of ``fds`` identifies the i-th descriptor passed
    alongside this message (SCM_RIGHTS).
    """

    version: str = Field(default="", alias="ociVersion")
    fds: List[str] = Field(default_factory=list)
    pid: Int32 = 0
    metadata: Optional[str] = None
    state: State = Field(default_factory=State)

    def seccomp_fd_index(self) -> Optional[int]:
        """Position of the seccomp notify descriptor in ``fds``, if any."""
        try:
            return self.fds.index(SECCOMP_FD_NAME)
        except ValueError:
            return None
