"""
gdenv: Godot Engine version identifiers and installations.

This package provides:
- Lenient parsing of Godot release names ("4.3", "4.5-beta1", "4.2.1-stable")
- Semver ordering of Godot versions, standard and .NET builds
- Release artifact naming per platform (archive names, executable paths)
- Download and installation of official Godot builds

Quickstart:
    from gdenv import GodotVersion, HostPlatform

    version = GodotVersion.parse("4.3-beta2", is_dotnet=True)
    print(version)                       # 4.3.0-beta2 (.NET)
    print(version.installation_name())   # godot-4.3.0-beta2-dotnet
    print(version.archive_name(HostPlatform("windows", "x86_64")))
    # Godot_v4.3.0-beta2_mono_win64.exe.zip

Installing:
    from gdenv import GodotVersion, install

    executable = install(GodotVersion.from_string("4.2.1"))
"""

from gdenv.types import (
    HostPlatform,
    PlatformSuffix,
)
from gdenv.errors import (
    GdenvError,
    InvalidVersionFormat,
    InstallError,
    ExecutableNotFoundError,
)
from gdenv.platform import get_platform_suffix
from gdenv.version import (
    GodotVersion,
    normalize_version_string,
    parse_godot_version,
    is_prerelease,
    display_label,
    installation_name,
    archive_name,
    executable_path,
)
from gdenv._core.version import (
    GDENV_VERSION,
    get_download_url,
)
from gdenv._core.lifecycle import (
    install,
    ensure_installed,
    uninstall,
    list_installed,
    is_installed,
)

__version__ = GDENV_VERSION

__all__ = [
    # Version
    "__version__",
    "GDENV_VERSION",
    # Types
    "HostPlatform",
    "PlatformSuffix",
    # Errors
    "GdenvError",
    "InvalidVersionFormat",
    "InstallError",
    "ExecutableNotFoundError",
    # Platform
    "get_platform_suffix",
    # Godot versions
    "GodotVersion",
    "normalize_version_string",
    "parse_godot_version",
    "is_prerelease",
    "display_label",
    "installation_name",
    "archive_name",
    "executable_path",
    # Installation
    "get_download_url",
    "install",
    "ensure_installed",
    "uninstall",
    "list_installed",
    "is_installed",
]
