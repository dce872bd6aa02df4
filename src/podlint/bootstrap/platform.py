"""Platform detection for podlint.

``pod lib lint`` only runs on macOS; everything else is skipped.
"""

from __future__ import annotations

import platform
from dataclasses import dataclass
from typing import Optional

MACOS = "darwin"

# Architecture normalization map
_ARCH_MAP = {
    "x86_64": "amd64",
    "amd64": "amd64",
    "arm64": "arm64",
    "aarch64": "arm64",
}


def normalize_arch(machine: str) -> Optional[str]:
    """Normalize architecture string to standard form.

    Args:
        machine: Raw architecture string from platform.machine()

    Returns:
        Normalized architecture string or None if unknown.
    """
    return _ARCH_MAP.get(machine.lower())


def detect_os() -> str:
    """Return the lowercase operating system name (darwin, linux, windows, ...)."""
    return platform.system().lower()


def detect_arch() -> str:
    """Return the normalized CPU architecture, or the raw value if unknown."""
    machine = platform.machine()
    return normalize_arch(machine) or machine.lower()


@dataclass(frozen=True)
class PlatformInfo:
    """Information about the current platform.

    Attributes:
        os: Operating system (darwin, linux, windows).
        arch: CPU architecture (amd64, arm64).
    """

    os: str
    arch: str

    @property
    def is_macos(self) -> bool:
        return self.os == MACOS

    def __str__(self) -> str:
        return f"{self.os}-{self.arch}"


def get_platform_info() -> PlatformInfo:
    """Detect and return current platform information."""
    return PlatformInfo(os=detect_os(), arch=detect_arch())


class LocalPlatform:
    """Platform query for the machine podlint is running on.

    Detection is deferred to each call so tests can patch ``platform.system``.
    """

    @property
    def info(self) -> PlatformInfo:
        return get_platform_info()

    @property
    def is_macos(self) -> bool:
        return detect_os() == MACOS
