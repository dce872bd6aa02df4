"""Bridge between CLI arguments and configuration overrides."""

from __future__ import annotations

import argparse
from typing import Any, Dict

from podlint.core.logging import get_logger
from podlint.discovery.plugins import split_names

LOGGER = get_logger(__name__)


class ConfigBridge:
    """Translates CLI arguments to configuration overrides."""

    @staticmethod
    def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
        """Convert CLI arguments to a config override dict.

        Only options given on the command line are included, so config file
        values survive when a flag is absent. Lists replace the config file's
        lists rather than extending them.

        Args:
            args: Parsed CLI arguments.

        Returns:
            Dictionary of config overrides.
        """
        overrides: Dict[str, Any] = {}

        # Use getattr with defaults for subcommand compatibility
        plugins = getattr(args, "plugins", None)
        if plugins:
            overrides["plugins"] = split_names(plugins)

        exclude = getattr(args, "exclude", None)
        if exclude:
            overrides["exclude"] = split_names(exclude)

        shard: Dict[str, int] = {}
        shard_index = getattr(args, "shard_index", None)
        if shard_index is not None:
            shard["index"] = shard_index
        shard_count = getattr(args, "shard_count", None)
        if shard_count is not None:
            shard["count"] = shard_count
        if shard:
            overrides["shard"] = shard

        podspecs: Dict[str, Any] = {}
        skip = getattr(args, "skip", None)
        if skip:
            podspecs["skip"] = split_names(skip)
        no_analyze = getattr(args, "no_analyze", None)
        if no_analyze:
            podspecs["no_analyze"] = split_names(no_analyze)
        timeout = getattr(args, "timeout", None)
        if timeout is not None:
            podspecs["timeout"] = timeout
        if podspecs:
            overrides["podspecs"] = podspecs

        if overrides:
            LOGGER.debug(f"CLI overrides: {overrides}")
        return overrides
