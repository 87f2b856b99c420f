"""
Version constants and release locations for gdenv.

- GDENV_VERSION: gdenv's own version
- GODOT_BUILDS_REPO: GitHub repository publishing official Godot builds
- get_download_url: where a given Godot archive is published
"""

from __future__ import annotations

import os
from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from gdenv.types import HostPlatform
    from gdenv.version import GodotVersion

# gdenv version (user-facing semver)
GDENV_VERSION = "0.1.0"

# Official builds, including prereleases, are published here
GITHUB_URL = "https://github.com"
GODOT_BUILDS_REPO = "godotengine/godot-builds"

# Environment override for the release download base (mirrors, CI caches)
DOWNLOAD_BASE_URL_ENV = "GDENV_DOWNLOAD_BASE_URL"


def get_download_base_url() -> str:
    """
    Get the base URL that release tags are resolved against.

    Environment Variables:
        GDENV_DOWNLOAD_BASE_URL: Replaces the GitHub releases download base

    Returns:
        Base URL without trailing slash
    """
    override = os.environ.get(DOWNLOAD_BASE_URL_ENV)
    if override:
        return override.rstrip("/")
    return f"{GITHUB_URL}/{GODOT_BUILDS_REPO}/releases/download"


def get_download_url(
    version: "GodotVersion",
    platform: Optional["HostPlatform"] = None,
) -> str:
    """
    Get the download URL for a Godot release archive.

    Args:
        version: Godot version (variant included)
        platform: Target host (default: the running host)

    Returns:
        Release download URL, e.g. ``.../download/4.2.1-stable/Godot_v4.2.1-stable_linux.x86_64.zip``
    """
    base = get_download_base_url()
    return f"{base}/{version.release_tag()}/{version.archive_name(platform)}"
