"""Tests for the sequential podspec lint pipeline."""

from __future__ import annotations

import threading
from pathlib import Path
from typing import Dict, List, Set

from podlint.core.models import ExclusionSet, SpecFile
from podlint.linting.runner import PodspecLinter
from podlint.pipeline.executor import PodspecLintExecutor
from tests.unit.conftest import FakeProcessRunner, OutputCollector


def _executor(runner: FakeProcessRunner, output: OutputCollector) -> PodspecLintExecutor:
    linter = PodspecLinter(
        Path("/repo/packages"),
        ExclusionSet(),
        process_runner=runner,  # type: ignore[arg-type]
        printer=output,
    )
    return PodspecLintExecutor(linter)


def _spec_files(*names: str) -> List[SpecFile]:
    return [SpecFile(Path(f"/repo/packages/{n}/ios/{n}.podspec")) for n in names]


class TestPodspecLintExecutor:
    """Tests for PodspecLintExecutor.execute."""

    def test_empty_run(self, output: OutputCollector) -> None:
        runner = FakeProcessRunner()
        report = _executor(runner, output).execute([])
        assert report.failures == []
        assert report.linted == 0
        assert runner.calls == []

    def test_all_pass(self, output: OutputCollector) -> None:
        report = _executor(FakeProcessRunner(), output).execute(_spec_files("a", "b"))
        assert not report.has_failures
        assert report.linted == 2

    def test_failures_in_lint_order(self, output: OutputCollector) -> None:
        failing = {"c", "a"}

        def handler(command: str, args: List[str]) -> int:
            return 1 if Path(args[2]).stem in failing else 0

        report = _executor(FakeProcessRunner(handler), output).execute(
            _spec_files("a", "b", "c")
        )
        assert report.failures == ["a", "c"]

    def test_failing_file_reported_once(self, output: OutputCollector) -> None:
        """Both modes failing still records the file a single time."""
        report = _executor(FakeProcessRunner(lambda c, a: 1), output).execute(_spec_files("y"))
        assert report.failures == ["y"]

    def test_files_are_sequential(self, output: OutputCollector) -> None:
        """A file's invocations all finish before the next file starts."""
        # Each call blocks until its partner arrives, so a file's two modes
        # are held in flight together while the set of active files is read.
        barrier = threading.Barrier(2, timeout=5)
        lock = threading.Lock()
        in_flight: Dict[str, int] = {}
        snapshots: List[Set[str]] = []

        def handler(command: str, args: List[str]) -> int:
            name = Path(args[2]).stem
            with lock:
                in_flight[name] = in_flight.get(name, 0) + 1
            barrier.wait()
            with lock:
                snapshots.append({n for n, count in in_flight.items() if count})
            barrier.wait()
            with lock:
                in_flight[name] -= 1
            return 0

        runner = FakeProcessRunner(handler)
        report = _executor(runner, output).execute(_spec_files("a", "b", "c"))

        assert report.linted == 3
        assert len(snapshots) == 6
        assert all(len(names) == 1 for names in snapshots)
        stems = [Path(p).stem for p in runner.linted_paths()]
        assert stems == ["a", "a", "b", "b", "c", "c"]
