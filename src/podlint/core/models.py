from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Iterable, List, Tuple

PODSPEC_SUFFIX = ".podspec"


class LintMode(str, Enum):
    """How a consuming app links the plugin's native code."""

    FRAMEWORK = "framework"
    LIBRARY = "library"


# Invocation and output order for every podspec.
LINT_MODES: Tuple[LintMode, ...] = (LintMode.FRAMEWORK, LintMode.LIBRARY)


@dataclass(frozen=True)
class SpecFile:
    """A single podspec file found in the packages tree."""

    path: Path

    @property
    def basename(self) -> str:
        return self.path.name

    @property
    def stem(self) -> str:
        """Basename without extension, used for exclusion matching and reporting."""
        return self.path.stem

    @property
    def suffix(self) -> str:
        return self.path.suffix


@dataclass(frozen=True)
class ExclusionSet:
    """Podspec names excluded from linting or from the static analyzer.

    Attributes:
        skip: Names whose podspecs are not linted at all.
        no_analyze: Names linted without ``--analyze``.
    """

    skip: frozenset[str] = frozenset()
    no_analyze: frozenset[str] = frozenset()

    @classmethod
    def from_lists(
        cls,
        skip: Iterable[str] = (),
        no_analyze: Iterable[str] = (),
    ) -> "ExclusionSet":
        return cls(skip=frozenset(skip), no_analyze=frozenset(no_analyze))

    def is_skipped(self, spec_file: SpecFile) -> bool:
        return spec_file.stem in self.skip

    def should_analyze(self, spec_file: SpecFile) -> bool:
        return spec_file.stem not in self.no_analyze


@dataclass(frozen=True)
class LintInvocationResult:
    """Outcome of one external process run."""

    args: Tuple[str, ...]
    exit_code: int
    stdout: str = ""
    stderr: str = ""

    @property
    def succeeded(self) -> bool:
        return self.exit_code == 0


@dataclass(frozen=True)
class LintOutcome:
    """Verdict for one podspec across both lint modes."""

    spec_file: SpecFile
    results: Tuple[LintInvocationResult, ...]

    @property
    def name(self) -> str:
        return self.spec_file.stem

    @property
    def passed(self) -> bool:
        return all(result.succeeded for result in self.results)


@dataclass
class RunReport:
    """Failing podspec names, in the order they were linted."""

    failures: List[str] = field(default_factory=list)
    linted: int = 0

    @property
    def has_failures(self) -> bool:
        return bool(self.failures)
