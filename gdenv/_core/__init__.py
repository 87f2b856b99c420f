"""
Installation management for gdenv.

This module handles:
- Release locations and download URLs
- Archive download and extraction
- Installation directory layout
"""

from gdenv._core.version import (
    GDENV_VERSION,
    GODOT_BUILDS_REPO,
    get_download_url,
)
from gdenv._core.lifecycle import (
    get_data_dir,
    get_installation_path,
    get_executable,
    is_installed,
    list_installed,
    download_archive,
    extract_archive,
    install,
    ensure_installed,
    uninstall,
)

__all__ = [
    # Version
    "GDENV_VERSION",
    "GODOT_BUILDS_REPO",
    "get_download_url",
    # Lifecycle
    "get_data_dir",
    "get_installation_path",
    "get_executable",
    "is_installed",
    "list_installed",
    "download_archive",
    "extract_archive",
    "install",
    "ensure_installed",
    "uninstall",
]
