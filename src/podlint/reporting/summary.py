"""End-of-run summary for podspec linting."""

from __future__ import annotations

from typing import Callable, List

from podlint.core.models import RunReport

FAILURE_HEADER = "The following plugins have podspec errors (see above):"


class SummaryReporter:
    """Prints the failure roster once all podspecs have been linted."""

    def __init__(self, printer: Callable[[str], None] = print) -> None:
        self._print = printer

    def report(self, report: RunReport) -> None:
        for line in self.format_summary(report):
            self._print(line)

    def format_summary(self, report: RunReport) -> List[str]:
        """Return the summary lines for a run, separator first."""
        lines: List[str] = ["\n\n"]
        if report.has_failures:
            lines.append(FAILURE_HEADER)
            lines.extend(f" * {name}" for name in report.failures)
        return lines
