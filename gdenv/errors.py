"""
Exception types for gdenv.

Provides typed exceptions for:
- Version string parsing errors
- Installation (download / extraction) errors
"""

from __future__ import annotations

from typing import Optional


class GdenvError(Exception):
    """Base exception for all gdenv errors."""
    pass


# =============================================================================
# Version Errors
# =============================================================================


class InvalidVersionFormat(GdenvError, ValueError):
    """
    Raised when a version string cannot be parsed as a Godot version.

    Normalization is lenient (it only rewrites upstream quirks such as
    "4.3" or "4.3.0-beta2"), so this error is raised by the strict parse
    that follows it.

    Example:
        try:
            version = GodotVersion.parse("four.two")
        except InvalidVersionFormat as e:
            logger.warning(f"Bad version {e.version_str!r}")
    """

    def __init__(self, version_str: object, normalized: Optional[str] = None):
        self.version_str = version_str
        self.normalized = normalized

        message = f"Invalid Godot version: {version_str!r}"
        if normalized is not None and normalized != version_str:
            message += f" (normalized to {normalized!r})"

        super().__init__(message)

    def __repr__(self) -> str:
        return (
            f"InvalidVersionFormat(version_str={self.version_str!r}, "
            f"normalized={self.normalized!r})"
        )


# =============================================================================
# Installation Errors
# =============================================================================


class InstallError(GdenvError):
    """
    Raised when a Godot installation cannot be completed.

    This includes:
    - Archive download failures
    - Corrupt or unreadable archives
    - Filesystem errors while laying out the installation
    """
    pass


class ExecutableNotFoundError(InstallError):
    """Raised when an extracted archive does not contain the expected executable."""

    def __init__(self, message: str, path: Optional[str] = None):
        self.path = path
        super().__init__(message)
