"""
Platform detection for Godot release artifacts.

Maps a HostPlatform to the suffix Godot uses in its archive and executable
names. The mapping is a static table with fixed fallbacks.
"""

from __future__ import annotations

import logging
from typing import Dict, Optional, Tuple

from gdenv.types import HostPlatform, PlatformSuffix

logger = logging.getLogger(__name__)


_SUFFIXES: Dict[Tuple[str, str], PlatformSuffix] = {
    ("windows", "x86_64"): PlatformSuffix.WIN64,
    ("windows", "x86"): PlatformSuffix.WIN32,
    ("linux", "x86_64"): PlatformSuffix.LINUX_X86_64,
    ("linux", "x86"): PlatformSuffix.LINUX_X86_32,
    ("linux", "arm"): PlatformSuffix.LINUX_ARM32,
    ("linux", "aarch64"): PlatformSuffix.LINUX_ARM64,
}

# Unknown architecture on a known OS
_OS_FALLBACKS: Dict[str, PlatformSuffix] = {
    "windows": PlatformSuffix.WIN64,
    "linux": PlatformSuffix.LINUX_X86_64,
}

_DEFAULT_SUFFIX = PlatformSuffix.LINUX_X86_64

# Systems whose Godot builds follow the Linux naming scheme
POSIX_LIKE = frozenset({"linux", "freebsd", "openbsd", "netbsd", "dragonfly"})


def get_platform_suffix(platform: Optional[HostPlatform] = None) -> PlatformSuffix:
    """
    Get the Godot platform suffix for a host.

    Args:
        platform: Host to describe (default: the running host)

    Returns:
        One of the seven PlatformSuffix tokens. Never fails: unknown
        Windows architectures map to win64, everything else unknown maps
        to linux.x86_64.
    """
    platform = platform or HostPlatform.current()

    # Universal binaries work on both Intel and Apple Silicon
    if platform.os_name == "macos":
        return PlatformSuffix.MACOS_UNIVERSAL

    suffix = _SUFFIXES.get((platform.os_name, platform.arch))
    if suffix is not None:
        return suffix

    suffix = _OS_FALLBACKS.get(platform.os_name, _DEFAULT_SUFFIX)
    logger.debug(f"No exact platform suffix for {platform}, falling back to {suffix.value}")
    return suffix


def is_posix_like(platform: HostPlatform) -> bool:
    """Check whether a host uses the Linux-style executable layout."""
    return platform.os_name in POSIX_LIKE
