"""Host environment detection for podlint."""

from podlint.bootstrap.platform import LocalPlatform, PlatformInfo, get_platform_info

__all__ = [
    "LocalPlatform",
    "PlatformInfo",
    "get_platform_info",
]
