"""
Godot installation lifecycle for gdenv.

Handles:
- Data and cache directory layout
- Archive download from Godot releases
- Extraction into per-version installation directories
"""

from __future__ import annotations

import asyncio
import logging
import os
import shutil
import stat
import zipfile
from pathlib import Path
from typing import List, Optional

import requests
from platformdirs import user_cache_dir, user_data_dir

from gdenv._core.version import get_download_url
from gdenv.errors import ExecutableNotFoundError, InstallError, InvalidVersionFormat
from gdenv.types import HostPlatform
from gdenv.version import GodotVersion

logger = logging.getLogger(__name__)

APP_NAME = "gdenv"
HOME_ENV = "GDENV_HOME"

DOWNLOAD_TIMEOUT = 60
CHUNK_SIZE = 8192


def get_data_dir() -> Path:
    """
    Get the root directory for gdenv data.

    Environment Variables:
        GDENV_HOME: Use this directory instead of the platform default

    Returns:
        Existing directory path
    """
    override = os.environ.get(HOME_ENV)
    if override:
        data_dir = Path(override).expanduser()
        if data_dir.exists() and not data_dir.is_dir():
            logger.warning(f"{HOME_ENV} is not a directory, ignoring: {data_dir}")
        else:
            data_dir.mkdir(parents=True, exist_ok=True)
            return data_dir

    data_dir = Path(user_data_dir(APP_NAME, APP_NAME))
    data_dir.mkdir(parents=True, exist_ok=True)
    return data_dir


def get_installations_dir() -> Path:
    """Get the directory holding one subdirectory per installed version."""
    installations_dir = get_data_dir() / "installations"
    installations_dir.mkdir(parents=True, exist_ok=True)
    return installations_dir


def get_cache_dir() -> Path:
    """Get the directory where downloaded archives are cached."""
    if os.environ.get(HOME_ENV):
        cache_dir = get_data_dir() / "cache" / "downloads"
    else:
        cache_dir = Path(user_cache_dir(APP_NAME, APP_NAME)) / "downloads"
    cache_dir.mkdir(parents=True, exist_ok=True)
    return cache_dir


def get_installation_path(version: GodotVersion) -> Path:
    """Get the installation directory for a version (it may not exist yet)."""
    return get_installations_dir() / version.installation_name()


def get_executable(version: GodotVersion, platform: Optional[HostPlatform] = None) -> Path:
    """Get the full path of an installed version's executable."""
    return get_installation_path(version) / version.executable_path(platform)


def is_installed(version: GodotVersion, platform: Optional[HostPlatform] = None) -> bool:
    """Check if a version is installed, judged by its executable."""
    return get_executable(version, platform).exists()


def list_installed() -> List[GodotVersion]:
    """
    List installed versions, sorted by version precedence.

    Directories whose names are not installation names are skipped.
    """
    versions = []
    for entry in get_installations_dir().iterdir():
        if not entry.is_dir():
            continue
        try:
            versions.append(GodotVersion.from_installation_name(entry.name))
        except InvalidVersionFormat:
            logger.debug(f"Skipping unrecognized installation directory {entry}")
    return sorted(versions)


def download_archive(version: GodotVersion, platform: Optional[HostPlatform] = None) -> Path:
    """
    Download the release archive for a version.

    Args:
        version: Godot version to download
        platform: Target host (default: the running host)

    Returns:
        Path to the downloaded archive

    Raises:
        InstallError: If download fails
    """
    target_path = get_cache_dir() / version.archive_name(platform)

    if target_path.exists():
        logger.debug(f"Archive already exists at {target_path}")
        return target_path

    url = get_download_url(version, platform)

    logger.info(f"Downloading Godot {version} from {url}...")

    # Only complete downloads ever appear at target_path
    part_path = target_path.with_name(target_path.name + ".part")

    try:
        response = requests.get(url, stream=True, timeout=DOWNLOAD_TIMEOUT)
        response.raise_for_status()

        target_path.parent.mkdir(parents=True, exist_ok=True)

        with open(part_path, "wb") as f:
            for chunk in response.iter_content(chunk_size=CHUNK_SIZE):
                f.write(chunk)

        os.replace(part_path, target_path)

        logger.info(f"Downloaded {target_path.name}")
        return target_path

    except requests.exceptions.RequestException as e:
        raise InstallError(f"Failed to download Godot {version} from {url}: {e}") from e
    except OSError as e:
        raise InstallError(f"Failed to save archive {target_path}: {e}") from e
    finally:
        if part_path.exists():
            part_path.unlink()


def _make_executable(path: Path) -> None:
    st = os.stat(path)
    os.chmod(path, st.st_mode | stat.S_IEXEC)


def extract_archive(
    archive_path: Path,
    version: GodotVersion,
    platform: Optional[HostPlatform] = None,
) -> Path:
    """
    Extract a release archive into the version's installation directory.

    Args:
        archive_path: Downloaded archive
        version: Version the archive belongs to
        platform: Target host (default: the running host)

    Returns:
        Path to the installed executable

    Raises:
        InstallError: If the archive cannot be extracted
        ExecutableNotFoundError: If the expected executable is missing
    """
    platform = platform or HostPlatform.current()
    install_path = get_installation_path(version)

    try:
        with zipfile.ZipFile(archive_path) as archive:
            archive.extractall(install_path)
    except zipfile.BadZipFile as e:
        shutil.rmtree(install_path, ignore_errors=True)
        # Drop the corrupt download so the next install fetches it again
        archive_path.unlink(missing_ok=True)
        raise InstallError(f"Corrupt archive {archive_path}: {e}") from e
    except OSError as e:
        shutil.rmtree(install_path, ignore_errors=True)
        raise InstallError(f"Failed to extract {archive_path}: {e}") from e

    # Paths always name win64, so 32-bit Windows (win32.exe archives) fails this check
    executable = install_path / version.executable_path(platform)
    if not executable.is_file():
        shutil.rmtree(install_path, ignore_errors=True)
        raise ExecutableNotFoundError(
            f"Godot {version} archive does not contain {version.executable_path(platform)}",
            path=str(executable),
        )

    # zipfile does not restore permission bits
    if not platform.is_windows:
        _make_executable(executable)

    logger.info(f"Installed Godot {version} to {install_path}")
    return executable


def install(version: GodotVersion, platform: Optional[HostPlatform] = None) -> Path:
    """
    Install a version unless it is already installed.

    Returns:
        Path to the installed executable

    Raises:
        InstallError: If download or extraction fails
    """
    executable = get_executable(version, platform)
    if executable.exists():
        logger.debug(f"Godot {version} already installed at {executable}")
        return executable

    archive_path = download_archive(version, platform)
    return extract_archive(archive_path, version, platform)


async def ensure_installed(
    version: GodotVersion,
    platform: Optional[HostPlatform] = None,
) -> Path:
    """
    Ensure a version is installed (async wrapper around ``install``).

    Returns:
        Path to the installed executable
    """
    # Run download in thread pool to avoid blocking
    loop = asyncio.get_event_loop()
    return await loop.run_in_executor(None, install, version, platform)


def uninstall(version: GodotVersion) -> bool:
    """
    Remove an installed version.

    Returns:
        True if an installation was removed, False if none existed
    """
    install_path = get_installation_path(version)
    if not install_path.exists():
        return False

    shutil.rmtree(install_path)
    logger.info(f"Removed Godot {version} from {install_path}")
    return True
