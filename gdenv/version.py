"""
Godot version identifiers.

Godot release names are close to, but not quite, semantic versions:

- "4.3" and "4.5-beta1" omit the patch component
- "4.3.0-beta2" has no separator between the tag and its counter
- "4.2.1-stable" spells out the stable channel

Parsing is two-phase: ``normalize_version_string`` rewrites these quirks
into strict semver ("4.3.0-beta.2"), then ``semver.Version.parse`` does the
actual validation. Rendering goes the other way and produces the names used
by Godot release artifacts.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Any, Dict, Optional

import semver

from gdenv.errors import InvalidVersionFormat
from gdenv.platform import get_platform_suffix, is_posix_like
from gdenv.types import HostPlatform

logger = logging.getLogger(__name__)


STABLE_SUFFIX = "-stable"
DOTNET_LABEL = " (.NET)"
INSTALLATION_PREFIX = "godot-"
DOTNET_INSTALLATION_SUFFIX = "-dotnet"

# Applied in this order; the first rewrite wins
PRERELEASE_TAGS = ("beta", "rc", "alpha")

_DIGITS = re.compile(r"[0-9]*")


def _is_digits(value: str) -> bool:
    # True for the empty string
    return _DIGITS.fullmatch(value) is not None


def _pad_short_version(version_str: str) -> str:
    """Add a zero patch component to "4.3" and "4.5-beta1" style versions."""
    parts = version_str.split(".")
    if len(parts) != 2:
        return version_str

    major, rest = parts
    if _is_digits(rest):
        return f"{version_str}.0"

    if _is_digits(rest[:1]):
        minor, dash, prerelease = rest.partition("-")
        if dash and _is_digits(minor):
            return f"{major}.{minor}.0-{prerelease}"

    return version_str


def _separate_prerelease_counter(version_str: str) -> str:
    """Rewrite "-beta2" as "-beta.2" so semver compares counters numerically."""
    for tag in PRERELEASE_TAGS:
        introducer = f"-{tag}"
        if introducer not in version_str or f"{introducer}." in version_str:
            continue

        base, _, counter = version_str.partition(introducer)
        if counter and _is_digits(counter):
            return f"{base}{introducer}.{int(counter)}"
        if not counter:
            return f"{base}{introducer}"

    return version_str


def normalize_version_string(version_str: str) -> str:
    """
    Normalize a Godot version string to be semver compatible.

    Examples:
        "4.2.1"        -> "4.2.1"
        "4.2.1-stable" -> "4.2.1"
        "4.3"          -> "4.3.0"
        "4.5-beta1"    -> "4.5.0-beta.1"
        "4.3.0-beta2"  -> "4.3.0-beta.2"
        "4.1.0-rc.1"   -> "4.1.0-rc.1"

    Normalization never fails and does not validate; strings it cannot
    make sense of are returned as-is for the strict parser to reject.

    Args:
        version_str: Upstream-style version string

    Returns:
        The rewritten version string
    """
    cleaned = version_str.strip()

    if cleaned.endswith(STABLE_SUFFIX):
        cleaned = cleaned[: -len(STABLE_SUFFIX)]

    cleaned = _pad_short_version(cleaned)
    normalized = _separate_prerelease_counter(cleaned)

    if normalized != version_str:
        logger.debug(f"Normalized Godot version {version_str!r} -> {normalized!r}")
    return normalized


@dataclass(frozen=True, order=True)
class GodotVersion:
    """
    A Godot release: semantic version plus the .NET build flag.

    Values are immutable, hashable and ordered by semver precedence (a
    stable release ranks above its prereleases). Two values that differ
    only in ``is_dotnet`` are distinct; at equal precedence the standard
    build sorts first.

    Example:
        version = GodotVersion.parse("4.3-beta2", is_dotnet=True)
        version.installation_name()   # "godot-4.3.0-beta2-dotnet"
        version.archive_name()        # "Godot_v4.3.0-beta2_mono_linux.x86_64.zip"
    """
    version: semver.Version
    is_dotnet: bool = False

    def __post_init__(self) -> None:
        if not isinstance(self.version, semver.Version):
            raise TypeError(
                f"version must be a semver.Version, got {type(self.version).__name__}"
            )

    # -------------------------------------------------------------------------
    # Construction
    # -------------------------------------------------------------------------

    @classmethod
    def parse(cls, version_str: str, is_dotnet: bool = False) -> "GodotVersion":
        """
        Parse an upstream-style Godot version string.

        Args:
            version_str: Version like "4.2.1", "4.2.1-stable", "4.3-beta2"
            is_dotnet: Whether this is the .NET (mono) build

        Returns:
            GodotVersion

        Raises:
            InvalidVersionFormat: If the string is not a valid version
                after normalization
        """
        if not isinstance(version_str, str):
            raise InvalidVersionFormat(version_str)

        normalized = normalize_version_string(version_str)
        try:
            version = semver.Version.parse(normalized)
        except ValueError as e:
            raise InvalidVersionFormat(version_str, normalized) from e

        return cls(version=version, is_dotnet=bool(is_dotnet))

    @classmethod
    def from_string(cls, version_str: str) -> "GodotVersion":
        """Parse a version string as a standard (non-.NET) build."""
        return cls.parse(version_str, is_dotnet=False)

    @classmethod
    def from_installation_name(cls, name: str) -> "GodotVersion":
        """
        Recover a version from a directory name made by ``installation_name``.

        Raises:
            InvalidVersionFormat: If the name is not an installation name
        """
        if not name.startswith(INSTALLATION_PREFIX):
            raise InvalidVersionFormat(name)

        version_str = name[len(INSTALLATION_PREFIX):]
        is_dotnet = version_str.endswith(DOTNET_INSTALLATION_SUFFIX)
        if is_dotnet:
            version_str = version_str[: -len(DOTNET_INSTALLATION_SUFFIX)]
        return cls.parse(version_str, is_dotnet=is_dotnet)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GodotVersion":
        """Inverse of ``to_dict``."""
        try:
            version_str = data["version"]
        except (KeyError, TypeError) as e:
            raise InvalidVersionFormat(data) from e
        return cls.parse(version_str, is_dotnet=bool(data.get("is_dotnet", False)))

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to a JSON-friendly dict (semver form of the version)."""
        return {"version": str(self.version), "is_dotnet": self.is_dotnet}

    # -------------------------------------------------------------------------
    # Rendering
    # -------------------------------------------------------------------------

    @property
    def is_prerelease(self) -> bool:
        return self.version.prerelease is not None

    def godot_version_string(self) -> str:
        """Render in Godot's own format ("4.3.0-beta2", not "4.3.0-beta.2")."""
        rendered = str(self.version)
        for tag in PRERELEASE_TAGS:
            rendered = rendered.replace(f"-{tag}.", f"-{tag}")
        return rendered

    def display_label(self) -> str:
        """Human readable label, e.g. "4.2.1 (.NET)"."""
        label = self.godot_version_string()
        if self.is_dotnet:
            label += DOTNET_LABEL
        return label

    def installation_name(self) -> str:
        """Directory name for this installation, e.g. "godot-4.2.1-dotnet"."""
        name = f"{INSTALLATION_PREFIX}{self.godot_version_string()}"
        if self.is_dotnet:
            name += DOTNET_INSTALLATION_SUFFIX
        return name

    def release_tag(self) -> str:
        """
        Version as spelled in release artifact names.

        Stable releases carry an explicit "-stable" here even though the
        display label never shows it.
        """
        if self.is_prerelease:
            return self.godot_version_string()
        return f"{self.version}{STABLE_SUFFIX}"

    def archive_name(self, platform: Optional[HostPlatform] = None) -> str:
        """
        Release archive file name for a platform.

        Args:
            platform: Target host (default: the running host)

        Returns:
            e.g. "Godot_v4.2.1-stable_linux.x86_64.zip" or
            "Godot_v4.3.0-beta2_mono_win64.exe.zip"
        """
        suffix = get_platform_suffix(platform).value
        variant = "mono_" if self.is_dotnet else ""
        return f"Godot_v{self.release_tag()}_{variant}{suffix}.zip"

    def executable_path(self, platform: Optional[HostPlatform] = None) -> str:
        """
        Expected executable path, relative to the extracted archive root.

        Only computes the name; nothing is checked on disk.

        Args:
            platform: Target host (default: the running host)
        """
        platform = platform or HostPlatform.current()
        release = self.release_tag()

        if platform.is_macos:
            app = "Godot_mono.app" if self.is_dotnet else "Godot.app"
            return f"{app}/Contents/MacOS/Godot"

        if platform.is_windows:
            if self.is_dotnet:
                # .NET builds extract into a subdirectory
                folder = f"Godot_v{release}_mono_win64"
                return f"{folder}/{folder}.exe"
            return f"Godot_v{release}_win64.exe"

        if is_posix_like(platform):
            suffix = get_platform_suffix(platform).value
            if self.is_dotnet:
                name = f"Godot_v{release}_mono_{suffix}"
                return f"{name}/{name}"
            return f"Godot_v{release}_{suffix}"

        return "Godot"

    def __str__(self) -> str:
        return self.display_label()


# =============================================================================
# Functional API
# =============================================================================


def parse_godot_version(version_str: str, is_dotnet: bool = False) -> GodotVersion:
    """Shorthand for ``GodotVersion.parse``."""
    return GodotVersion.parse(version_str, is_dotnet)


def is_prerelease(version: GodotVersion) -> bool:
    return version.is_prerelease


def display_label(version: GodotVersion) -> str:
    return version.display_label()


def installation_name(version: GodotVersion) -> str:
    return version.installation_name()


def archive_name(version: GodotVersion, platform: Optional[HostPlatform] = None) -> str:
    return version.archive_name(platform)


def executable_path(version: GodotVersion, platform: Optional[HostPlatform] = None) -> str:
    return version.executable_path(platform)
