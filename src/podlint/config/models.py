"""Typed configuration for podlint."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from podlint.core.models import ExclusionSet


@dataclass
class PodspecsConfig:
    """Settings for the ``podspecs`` command.

    Attributes:
        skip: Podspec names (without extension) excluded from linting.
        no_analyze: Podspec names linted without ``--analyze``.
        timeout: Optional per-invocation timeout for ``pod lib lint``, in seconds.
    """

    skip: List[str] = field(default_factory=list)
    no_analyze: List[str] = field(default_factory=list)
    timeout: Optional[float] = None

    def exclusions(self) -> ExclusionSet:
        return ExclusionSet.from_lists(skip=self.skip, no_analyze=self.no_analyze)


@dataclass
class ShardConfig:
    """Which slice of the plugin list this invocation handles."""

    index: int = 0
    count: int = 1


@dataclass
class PodlintConfig:
    """Effective podlint configuration after merging all sources."""

    plugins: List[str] = field(default_factory=list)
    exclude: List[str] = field(default_factory=list)
    ignore: List[str] = field(default_factory=list)
    shard: ShardConfig = field(default_factory=ShardConfig)
    podspecs: PodspecsConfig = field(default_factory=PodspecsConfig)

    # Where the configuration was loaded from, most general first.
    _config_sources: List[str] = field(default_factory=list, repr=False)

    @property
    def sources(self) -> List[str]:
        return list(self._config_sources)
