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
Unit tests for the default mount catalog.
"""
from ocispec.DEFAULTS.mounts import get_default_mounts, get_rootless_mounts

DESTINATIONS = [
    "/proc",
    "/dev",
    "/dev/pts",
    "/dev/shm",
    "/dev/mqueue",
    "/sys",
    "/sys/fs/cgroup",
]


def _by_destination(mounts, destination):
    return next(m for m in mounts if m.destination == destination)


class TestDefaultMounts:
    """Tests for get_default_mounts."""

    def test_order(self):
        """Test that the seven mounts come in a fixed order."""
        mounts = get_default_mounts()
        assert len(mounts) == 7
        assert [m.destination for m in mounts] == DESTINATIONS

    def test_types_and_sources(self):
        """Test the filesystem type and source of each mount."""
        mounts = get_default_mounts()
        assert [(m.typ, m.source) for m in mounts] == [
            ("proc", "proc"),
            ("tmpfs", "tmpfs"),
            ("devpts", "devpts"),
            ("tmpfs", "shm"),
            ("mqueue", "mqueue"),
            ("sysfs", "sysfs"),
            ("cgroup", "cgroup"),
        ]

    def test_proc_has_no_options(self):
        """Test that /proc is mounted without options."""
        proc = _by_destination(get_default_mounts(), "/proc")
        assert proc.options is None
        assert proc.to_dict() == {"destination": "/proc", "type": "proc", "source": "proc"}

    def test_devpts_options(self):
        """Test the devpts option list."""
        devpts = _by_destination(get_default_mounts(), "/dev/pts")
        assert devpts.options == [
            "nosuid",
            "noexec",
            "newinstance",
            "ptmxmode=0666",
            "mode=0620",
            "gid=5",
        ]

    def test_sys_is_readonly_sysfs(self):
        """Test that /sys is a read-only sysfs mount."""
        sys_mount = _by_destination(get_default_mounts(), "/sys")
        assert sys_mount.typ == "sysfs"
        assert "ro" in sys_mount.options

    def test_cgroup_is_readonly(self):
        """Test the cgroup option list."""
        cgroup = _by_destination(get_default_mounts(), "/sys/fs/cgroup")
        assert cgroup.options == ["nosuid", "noexec", "nodev", "relatime", "ro"]

    def test_no_id_mappings(self):
        """Test that default mounts are not ID-mapped."""
        for mount in get_default_mounts():
            assert mount.uid_mappings is None
            assert mount.gid_mappings is None

    def test_calls_are_independent(self):
        """Test that changing one result does not affect the next call."""
        first = get_default_mounts()
        first[1].options.append("exec")
        second = get_default_mounts()
        assert "exec" not in second[1].options
        assert get_default_mounts() == second


class TestRootlessMounts:
    """Tests for get_rootless_mounts."""

    def test_same_destinations(self):
        """Test that the rootless variant keeps all destinations."""
        assert [m.destination for m in get_rootless_mounts()] == DESTINATIONS

    def test_devpts_drops_gid(self):
        """Test that gid=5 is removed from /dev/pts."""
        devpts = _by_destination(get_rootless_mounts(), "/dev/pts")
        assert "gid=5" not in devpts.options
        assert devpts.options == [
            "nosuid",
            "noexec",
            "newinstance",
            "ptmxmode=0666",
            "mode=0620",
        ]

    def test_sys_is_recursive_bind(self):
        """Test that /sys becomes a bind of the host /sys."""
        sys_mount = _by_destination(get_rootless_mounts(), "/sys")
        assert sys_mount.typ == "none"
        assert sys_mount.source == "/sys"
        assert sys_mount.options == ["nosuid", "noexec", "nodev", "ro", "rbind"]

    def test_other_mounts_unchanged(self):
        """Test that only /dev/pts and /sys differ from the defaults."""
        defaults = get_default_mounts()
        rootless = get_rootless_mounts()
        changed = [
            d.destination for d, r in zip(defaults, rootless) if d != r
        ]
        assert changed == ["/dev/pts", "/sys"]

    def test_does_not_touch_defaults(self):
        """Test that building the rootless list leaves defaults intact."""
        get_rootless_mounts()
        devpts = _by_destination(get_default_mounts(), "/dev/pts")
        assert "gid=5" in devpts.options
