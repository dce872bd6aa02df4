"""Tests for the summary reporter."""

from __future__ import annotations

from podlint.core.models import RunReport
from podlint.reporting.summary import FAILURE_HEADER, SummaryReporter
from tests.unit.conftest import OutputCollector


class TestSummaryReporter:
    """Tests for SummaryReporter."""

    def test_clean_run_prints_separator_only(self, output: OutputCollector) -> None:
        SummaryReporter(printer=output).report(RunReport(linted=3))
        assert output.lines == ["\n\n"]

    def test_failures_listed_in_order(self, output: OutputCollector) -> None:
        SummaryReporter(printer=output).report(RunReport(failures=["b", "a"], linted=2))
        assert output.lines == ["\n\n", FAILURE_HEADER, " * b", " * a"]

    def test_header_text(self) -> None:
        assert FAILURE_HEADER == "The following plugins have podspec errors (see above):"

    def test_format_summary(self) -> None:
        lines = SummaryReporter().format_summary(RunReport(failures=["y"]))
        assert lines[-1] == " * y"
