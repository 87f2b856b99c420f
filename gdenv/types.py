"""
Type definitions for gdenv.

Defines the enums and dataclasses shared by the version and platform layers:
- PlatformSuffix: the platform tokens used in Godot release artifact names
- HostPlatform: a normalized (os, arch) pair describing a machine
"""

from __future__ import annotations

import platform
from dataclasses import dataclass
from enum import Enum


# =============================================================================
# Platform Tokens
# =============================================================================


class PlatformSuffix(str, Enum):
    """
    Platform token used in Godot archive and executable names.

    Godot publishes one archive per token, e.g.
    ``Godot_v4.2.1-stable_linux.x86_64.zip``.
    """
    WIN64 = "win64.exe"
    WIN32 = "win32.exe"
    MACOS_UNIVERSAL = "macos.universal"  # Intel and Apple Silicon
    LINUX_X86_64 = "linux.x86_64"
    LINUX_X86_32 = "linux.x86_32"
    LINUX_ARM32 = "linux.arm32"
    LINUX_ARM64 = "linux.arm64"

    def __str__(self) -> str:
        return self.value


# =============================================================================
# Host Description
# =============================================================================


# platform.system() / platform.machine() spellings -> normalized identifiers
_OS_ALIASES = {
    "darwin": "macos",
    "macos": "macos",
    "windows": "windows",
    "win32": "windows",
    "linux": "linux",
}

_ARCH_ALIASES = {
    "x86_64": "x86_64",
    "amd64": "x86_64",
    "x64": "x86_64",
    "x86": "x86",
    "i386": "x86",
    "i486": "x86",
    "i586": "x86",
    "i686": "x86",
    "arm": "arm",
    "armv6l": "arm",
    "armv7l": "arm",
    "armv7": "arm",
    "aarch64": "aarch64",
    "arm64": "aarch64",
}


@dataclass(frozen=True)
class HostPlatform:
    """
    Normalized operating system and CPU architecture.

    ``os_name`` is one of "windows", "macos", "linux" or the lower-cased
    value reported by the host; ``arch`` is one of "x86_64", "x86", "arm",
    "aarch64" or the lower-cased reported value.

    Raw spellings are normalized on construction, so
    ``HostPlatform("Windows", "AMD64") == HostPlatform("windows", "x86_64")``.

    Everything that depends on the host takes a HostPlatform argument, so
    callers (and tests) can describe any machine, not only the running one.
    """
    os_name: str
    arch: str

    def __post_init__(self) -> None:
        os_name = (self.os_name or "").strip().lower()
        arch = (self.arch or "").strip().lower()
        object.__setattr__(self, "os_name", _OS_ALIASES.get(os_name, os_name))
        object.__setattr__(self, "arch", _ARCH_ALIASES.get(arch, arch))

    @classmethod
    def from_identifiers(cls, system: str, machine: str) -> "HostPlatform":
        """Build a HostPlatform from raw ``platform.system()``/``machine()`` values."""
        return cls(os_name=system, arch=machine)

    @classmethod
    def current(cls) -> "HostPlatform":
        """Describe the running host."""
        return cls.from_identifiers(platform.system(), platform.machine())

    @property
    def is_windows(self) -> bool:
        return self.os_name == "windows"

    @property
    def is_macos(self) -> bool:
        return self.os_name == "macos"

    def __str__(self) -> str:
        return f"{self.os_name}/{self.arch}"
