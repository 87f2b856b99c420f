"""
Pytest configuration for gdenv tests.
"""

import pytest

from gdenv.types import HostPlatform

# Note: With pytest-asyncio in auto mode, no event_loop fixture needed


@pytest.fixture
def linux_x86_64():
    """64-bit Linux host."""
    return HostPlatform("linux", "x86_64")


@pytest.fixture
def linux_arm64():
    """ARM64 Linux host (e.g. Raspberry Pi 4)."""
    return HostPlatform("linux", "aarch64")


@pytest.fixture
def windows_x86_64():
    """64-bit Windows host."""
    return HostPlatform("windows", "x86_64")


@pytest.fixture
def macos_arm64():
    """Apple Silicon macOS host."""
    return HostPlatform("macos", "aarch64")


@pytest.fixture
def gdenv_home(tmp_path, monkeypatch):
    """Point gdenv at a throwaway data directory."""
    home = tmp_path / "gdenv-home"
    monkeypatch.setenv("GDENV_HOME", str(home))
    monkeypatch.delenv("GDENV_DOWNLOAD_BASE_URL", raising=False)
    return home
