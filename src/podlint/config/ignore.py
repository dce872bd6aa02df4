"""Gitignore-style path exclusion for plugin file discovery.

Patterns come from:
- the .podlintignore file in the packages root
- the config ``ignore`` list

Matching uses pathspec for full gitignore compliance (``**``, ``!``
negation, ``#`` comments).
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional

import pathspec

from podlint.core.logging import get_logger

LOGGER = get_logger(__name__)

PODLINTIGNORE_NAME = ".podlintignore"


class IgnorePatterns:
    """Compiled ignore patterns from one or more sources."""

    def __init__(self, patterns: List[str], source: str = "config") -> None:
        self._source = source
        self._patterns = [
            p.strip() for p in patterns if p.strip() and not p.strip().startswith("#")
        ]
        self._spec = pathspec.PathSpec.from_lines("gitwildmatch", self._patterns)

        if self._patterns:
            LOGGER.debug(f"Loaded {len(self._patterns)} ignore patterns from {source}")

    @property
    def patterns(self) -> List[str]:
        return list(self._patterns)

    @property
    def source(self) -> str:
        return self._source

    def __bool__(self) -> bool:
        return bool(self._patterns)

    def matches(self, path: Path, root: Path) -> bool:
        """Check if a path matches any ignore pattern.

        Args:
            path: Path to check (absolute or relative to root).
            root: Packages root for relative path calculation.
        """
        if not self._patterns:
            return False
        try:
            rel_path = path.relative_to(root) if path.is_absolute() else path
        except ValueError:
            rel_path = path

        # pathspec expects forward-slash paths
        return self._spec.match_file(rel_path.as_posix())

    @classmethod
    def from_file(cls, file_path: Path) -> Optional["IgnorePatterns"]:
        """Load patterns from a file, or None if it doesn't exist."""
        if not file_path.is_file():
            return None
        content = file_path.read_text(encoding="utf-8")
        return cls(content.splitlines(), source=str(file_path))

    @classmethod
    def merge(cls, *pattern_sets: Optional["IgnorePatterns"]) -> "IgnorePatterns":
        all_patterns: List[str] = []
        sources: List[str] = []

        for ps in pattern_sets:
            if ps is not None:
                all_patterns.extend(ps._patterns)
                sources.append(ps._source)

        return cls(all_patterns, source="+".join(sources) if sources else "empty")


def load_ignore_patterns(packages_dir: Path, config_patterns: List[str]) -> IgnorePatterns:
    """Load and merge ignore patterns from .podlintignore and the config."""
    file_patterns = IgnorePatterns.from_file(packages_dir / PODLINTIGNORE_NAME)
    config_ignore = (
        IgnorePatterns(config_patterns, source="config.ignore")
        if config_patterns
        else None
    )
    return IgnorePatterns.merge(file_patterns, config_ignore)
