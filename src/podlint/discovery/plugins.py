"""Plugin discovery and sharding over a packages directory.

A plugin is a directory containing ``pubspec.yaml``. Direct children of the
packages directory are plugins; a child without a pubspec is a federated
plugin container whose own plugin subdirectories are discovered instead.

Plugins are sorted by path and split into ``shard_count`` contiguous
shards. Sharding 10 plugins into 3 shards yields sizes 4, 4, 2; 2 plugins
into 3 shards yields 1, 1, 0.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable, Iterator, List, Optional

from podlint.config.ignore import IgnorePatterns
from podlint.core.errors import UsageError
from podlint.core.logging import get_logger

LOGGER = get_logger(__name__)

PUBSPEC_NAME = "pubspec.yaml"


def is_plugin_dir(path: Path) -> bool:
    """Return True if ``path`` is a Dart package directory."""
    return path.is_dir() and (path / PUBSPEC_NAME).is_file()


def split_names(values: Optional[Iterable[str]]) -> List[str]:
    """Flatten repeated and comma-separated name options."""
    names: List[str] = []
    for value in values or ():
        names.extend(part.strip() for part in value.split(",") if part.strip())
    return names


def shard_bounds(total: int, shard_index: int, shard_count: int) -> tuple[int, int]:
    """Return the [start, end) slice of ``total`` items owned by a shard."""
    shard_size = total // shard_count + (0 if total % shard_count == 0 else 1)
    start = min(shard_index * shard_size, total)
    end = min(start + shard_size, total)
    return start, end


class PluginDiscovery:
    """Finds the plugins and files this invocation is responsible for."""

    def __init__(
        self,
        packages_dir: Path,
        plugins: Optional[Iterable[str]] = None,
        exclude: Optional[Iterable[str]] = None,
        shard_index: int = 0,
        shard_count: int = 1,
        ignore: Optional[IgnorePatterns] = None,
    ) -> None:
        """Initialize discovery.

        Args:
            packages_dir: Root directory holding the plugins.
            plugins: Plugin names to restrict to; empty means all plugins.
            exclude: Plugin names to leave out.
            shard_index: Zero-based index of this shard.
            shard_count: Total number of shards.
            ignore: Patterns for files to leave out of ``iter_files``.
        """
        self.packages_dir = packages_dir
        self._plugins = frozenset(split_names(plugins))
        self._exclude = frozenset(split_names(exclude))
        self.shard_index = shard_index
        self.shard_count = shard_count
        self._ignore = ignore

    def check_sharding(self) -> None:
        """Validate shard arguments.

        Raises:
            UsageError: If the shard count or index is out of range.
        """
        if self.shard_count < 1:
            raise UsageError("--shard-count must be positive")
        if self.shard_index < 0 or self.shard_index >= self.shard_count:
            raise UsageError(
                f"--shard-index must be in the half-open range [0..{self.shard_count}["
            )

    def should_run_shard(self) -> bool:
        """Return True if this shard has any plugins assigned to it.

        Raises:
            UsageError: If the shard arguments are invalid.
        """
        self.check_sharding()
        plugins = self.sharded_plugins()
        if not plugins:
            LOGGER.info(
                f"Shard {self.shard_index + 1}/{self.shard_count} has no plugins to check"
            )
            return False
        return True

    def _is_selected(self, plugin: Path, container: Optional[Path] = None) -> bool:
        names = {plugin.name}
        if container is not None:
            names.add(container.name)
        if self._plugins and not names & self._plugins:
            return False
        return not names & self._exclude

    def all_plugins(self) -> List[Path]:
        """Return every selected plugin directory, sorted by path."""
        if not self.packages_dir.is_dir():
            raise UsageError(f"Packages directory not found: {self.packages_dir}")

        found: List[Path] = []
        for entry in sorted(self.packages_dir.iterdir()):
            if not entry.is_dir():
                continue
            if is_plugin_dir(entry):
                if self._is_selected(entry):
                    found.append(entry)
                continue
            for child in sorted(entry.iterdir()):
                if is_plugin_dir(child) and self._is_selected(child, container=entry):
                    found.append(child)

        found.sort(key=lambda p: str(p))
        return found

    def sharded_plugins(self) -> List[Path]:
        """Return the plugins assigned to this shard."""
        plugins = self.all_plugins()
        start, end = shard_bounds(len(plugins), self.shard_index, self.shard_count)
        LOGGER.debug(
            f"Shard {self.shard_index + 1}/{self.shard_count}: "
            f"plugins {start}..{end} of {len(plugins)}"
        )
        return plugins[start:end]

    def iter_files(self) -> Iterator[Path]:
        """Yield every file inside this shard's plugins."""
        for plugin in self.sharded_plugins():
            for dirpath, dirnames, filenames in os.walk(plugin):
                dirnames.sort()
                for filename in sorted(filenames):
                    path = Path(dirpath) / filename
                    if self._ignore and self._ignore.matches(path, self.packages_dir):
                        LOGGER.debug(f"Ignoring {path}")
                        continue
                    yield path
