"""
Tests for gdenv.types module.
"""

from unittest.mock import patch

import pytest

from gdenv.types import HostPlatform, PlatformSuffix


class TestPlatformSuffix:
    """Tests for PlatformSuffix enum."""

    def test_member_count(self):
        assert len(PlatformSuffix) == 7

    def test_values(self):
        assert PlatformSuffix.WIN64.value == "win64.exe"
        assert PlatformSuffix.WIN32.value == "win32.exe"
        assert PlatformSuffix.MACOS_UNIVERSAL.value == "macos.universal"
        assert PlatformSuffix.LINUX_X86_64.value == "linux.x86_64"
        assert PlatformSuffix.LINUX_X86_32.value == "linux.x86_32"
        assert PlatformSuffix.LINUX_ARM32.value == "linux.arm32"
        assert PlatformSuffix.LINUX_ARM64.value == "linux.arm64"

    def test_string_enum(self):
        assert str(PlatformSuffix.LINUX_ARM64) == "linux.arm64"
        assert PlatformSuffix.LINUX_ARM64 == "linux.arm64"


class TestHostPlatform:
    """Tests for HostPlatform dataclass."""

    @pytest.mark.parametrize(
        "system, machine, expected",
        [
            ("Linux", "x86_64", ("linux", "x86_64")),
            ("Linux", "i686", ("linux", "x86")),
            ("Linux", "armv7l", ("linux", "arm")),
            ("Linux", "aarch64", ("linux", "aarch64")),
            ("Windows", "AMD64", ("windows", "x86_64")),
            ("Windows", "x86", ("windows", "x86")),
            ("Darwin", "arm64", ("macos", "aarch64")),
            ("Darwin", "x86_64", ("macos", "x86_64")),
            ("FreeBSD", "amd64", ("freebsd", "x86_64")),
            ("Linux", "riscv64", ("linux", "riscv64")),
        ],
    )
    def test_from_identifiers(self, system, machine, expected):
        """Raw platform identifiers are normalized."""
        host = HostPlatform.from_identifiers(system, machine)
        assert (host.os_name, host.arch) == expected

    def test_direct_construction_normalizes(self):
        """Raw identifiers passed to the constructor are normalized too."""
        host = HostPlatform("Windows", "AMD64")
        assert host == HostPlatform("windows", "x86_64")
        assert host.is_windows
        assert HostPlatform(" Darwin ", "ARM64") == HostPlatform("macos", "aarch64")

    def test_from_identifiers_handles_empty(self):
        host = HostPlatform.from_identifiers("", None)
        assert host == HostPlatform("", "")

    @patch("platform.system")
    @patch("platform.machine")
    def test_current(self, mock_machine, mock_system):
        """current() reads the running host."""
        mock_system.return_value = "Darwin"
        mock_machine.return_value = "arm64"

        assert HostPlatform.current() == HostPlatform("macos", "aarch64")

    def test_flags(self):
        assert HostPlatform("windows", "x86_64").is_windows
        assert not HostPlatform("windows", "x86_64").is_macos
        assert HostPlatform("macos", "aarch64").is_macos
        assert not HostPlatform("linux", "x86_64").is_windows

    def test_hashable_and_frozen(self):
        host = HostPlatform("linux", "x86_64")
        assert {host, HostPlatform("linux", "x86_64")} == {host}
        with pytest.raises(AttributeError):
            host.os_name = "windows"

    def test_str(self):
        assert str(HostPlatform("linux", "aarch64")) == "linux/aarch64"
