"""Sequential podspec lint pipeline."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import List, Sequence

from podlint.core.logging import get_logger
from podlint.core.models import RunReport, SpecFile
from podlint.linting.runner import PodspecLinter

LOGGER = get_logger(__name__)


class PodspecLintExecutor:
    """Lints podspecs one at a time and collects the failures.

    Files never overlap: each file's two ``pod`` invocations finish and are
    printed before the next file starts.
    """

    def __init__(self, linter: PodspecLinter) -> None:
        self._linter = linter

    def execute(self, spec_files: Sequence[SpecFile]) -> RunReport:
        """Lint every file in the given order.

        Args:
            spec_files: Podspecs to lint, already filtered and sorted.

        Returns:
            RunReport listing failing podspec names in lint order.
        """
        start_time = datetime.now(timezone.utc)
        failures: List[str] = []

        for spec_file in spec_files:
            outcome = self._linter.lint_one(spec_file)
            if not outcome.passed:
                failures.append(outcome.name)

        duration = (datetime.now(timezone.utc) - start_time).total_seconds()
        LOGGER.info(
            f"Linted {len(spec_files)} podspecs in {duration:.1f}s, {len(failures)} failed"
        )
        return RunReport(failures=failures, linted=len(spec_files))
