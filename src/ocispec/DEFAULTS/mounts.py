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
Standard mounts for a new container and their rootless variant.
"""
from typing import List

from ..MODELS.mount import Mount


def get_default_mounts() -> List[Mount]:
    """
    Returns the standard container mounts in the order they are applied.

    Every call builds fresh objects, so callers may modify the result.
    """
    return [
        Mount(destination="/proc", typ="proc", source="proc"),
        Mount(
            destination="/dev",
            typ="tmpfs",
            source="tmpfs",
            options=["nosuid", "strictatime", "mode=755", "size=65536k"],
        ),
        Mount(
            destination="/dev/pts",
            typ="devpts",
            source="devpts",
            options=[
                "nosuid",
                "noexec",
                "newinstance",
                "ptmxmode=0666",
                "mode=0620",
                "gid=5",
            ],
        ),
        Mount(
            destination="/dev/shm",
            typ="tmpfs",
            source="shm",
            options=["nosuid", "noexec", "nodev", "mode=1777", "size=65536k"],
        ),
        Mount(
            destination="/dev/mqueue",
            typ="mqueue",
            source="mqueue",
            options=["nosuid", "noexec", "nodev"],
        ),
        Mount(
            destination="/sys",
            typ="sysfs",
            source="sysfs",
            options=["nosuid", "noexec", "nodev", "ro"],
        ),
        Mount(
            destination="/sys/fs/cgroup",
            typ="cgroup",
            source="cgroup",
            options=["nosuid", "noexec", "nodev", "relatime", "ro"],
        ),
    ]


def get_rootless_mounts() -> List[Mount]:
    """
    Returns the default mounts adjusted for a container without root.

    /dev/pts drops ``gid=5`` since the host group cannot be referenced, and
    /sys becomes a recursive bind of the host /sys since sysfs cannot be
    mounted directly.
    """
    mounts = get_default_mounts()
    for mount in mounts:
        if mount.destination == "/dev/pts":
            if mount.options is not None:
                mount.options = [o for o in mount.options if o != "gid=5"]
        elif mount.destination == "/sys":
            mount.typ = "none"
            mount.source = "/sys"
            if mount.options is not None:
                mount.options.append("rbind")
    return mounts
