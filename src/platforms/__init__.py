"""Platform layer: base + Windows/macOS/Linux; factory by OS identifier."""
from __future__ import annotations

import functools
import platform as _platform

from src.errors import UnsupportedPlatformError
from src.models import PlatformOptions
from src.platforms.base import Platform
from src.platforms.darwin import DarwinPlatform
from src.platforms.linux import LinuxPlatform
from src.platforms.windows import WindowsPlatform

_PLATFORMS: dict[str, type[Platform]] = {
    "windows": WindowsPlatform,
    "darwin": DarwinPlatform,
    "linux": LinuxPlatform,
}


def host_os() -> str:
    """Host OS identifier: 'windows', 'darwin', 'linux', ..."""
    return _platform.system().lower()


def get_platform_class(os_name: str) -> type[Platform]:
    """Return platform class for os_name; raises UnsupportedPlatformError if unknown."""
    cls = _PLATFORMS.get(os_name.lower())
    if cls is None:
        raise UnsupportedPlatformError(os_name)
    return cls


def select_platform(
    os_name: str | None = None, options: PlatformOptions | None = None
) -> Platform:
    """Build the platform for os_name (default: the host)."""
    if os_name is None:
        os_name = host_os()
    return get_platform_class(os_name)(options)


@functools.lru_cache(maxsize=None)
def current_platform() -> Platform:
    """Platform of the running host, selected once per process."""
    return select_platform()


__all__ = [
    "DarwinPlatform",
    "LinuxPlatform",
    "Platform",
    "WindowsPlatform",
    "current_platform",
    "get_platform_class",
    "host_os",
    "select_platform",
]
