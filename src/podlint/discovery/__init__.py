"""Candidate file discovery for the packages tree."""

from podlint.discovery.plugins import PluginDiscovery, is_plugin_dir, shard_bounds

__all__ = [
    "PluginDiscovery",
    "is_plugin_dir",
    "shard_bounds",
]
