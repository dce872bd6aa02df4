"""Tests for the podspecs command."""

from __future__ import annotations

from argparse import Namespace
from pathlib import Path
from typing import List

import pytest

from podlint.cli.commands.podspecs import PodspecsCommand
from podlint.cli.exit_codes import EXIT_ISSUES_FOUND, EXIT_SUCCESS
from podlint.config.models import PodlintConfig, PodspecsConfig, ShardConfig
from podlint.core.errors import ToolExit, UsageError
from tests.unit.conftest import (
    FakePlatform,
    FakeProcessRunner,
    OutputCollector,
    write_plugin,
)


def _command(
    runner: FakeProcessRunner,
    output: OutputCollector,
    os: str = "darwin",
) -> PodspecsCommand:
    return PodspecsCommand(
        version="0.1.0",
        process_runner=runner,  # type: ignore[arg-type]
        platform=FakePlatform(os),  # type: ignore[arg-type]
        printer=output,
    )


def _config(skip: List[str] = (), no_analyze: List[str] = (), **kwargs) -> PodlintConfig:
    return PodlintConfig(
        podspecs=PodspecsConfig(skip=list(skip), no_analyze=list(no_analyze)),
        **kwargs,
    )


@pytest.fixture
def packages(packages_dir: Path) -> Path:
    write_plugin(packages_dir, "b", podspecs=["ios/b.podspec"])
    write_plugin(packages_dir, "a", podspecs=["ios/a.podspec"])
    write_plugin(packages_dir, "skip", podspecs=["ios/skip.podspec"])
    return packages_dir


class TestPodspecsCommand:
    """Tests for PodspecsCommand.execute."""

    def test_name(self) -> None:
        assert _command(FakeProcessRunner(), OutputCollector()).name == "podspecs"

    def test_not_macos_is_noop(self, packages: Path, output: OutputCollector) -> None:
        runner = FakeProcessRunner()
        result = _command(runner, output, os="linux").execute(
            Namespace(packages=packages), _config()
        )
        assert result == EXIT_SUCCESS
        assert runner.calls == []
        assert output.lines == ["Detected platform is not macOS, skipping podspec lint"]

    def test_probes_for_pod(self, packages: Path, output: OutputCollector) -> None:
        runner = FakeProcessRunner()
        _command(runner, output).execute(Namespace(packages=packages), _config())
        command, args, cwd = runner.calls[0]
        assert (command, args) == ("which", ["pod"])
        assert cwd == packages.resolve()

    def test_missing_pod_aborts(self, packages: Path, output: OutputCollector) -> None:
        runner = FakeProcessRunner(lambda command, args: 1 if command == "which" else 0)
        with pytest.raises(ToolExit) as exc_info:
            _command(runner, output).execute(Namespace(packages=packages), _config())
        assert exc_info.value.exit_code == 1
        assert runner.pod_calls() == []
        assert output.lines == []

    def test_skip_and_order(self, packages: Path, output: OutputCollector) -> None:
        runner = FakeProcessRunner()
        result = _command(runner, output).execute(
            Namespace(packages=packages), _config(skip=["skip"])
        )
        assert result == EXIT_SUCCESS
        stems = [Path(p).stem for p in runner.linted_paths()]
        assert stems == ["a", "a", "b", "b"]
        assert "skip.podspec" not in output.text
        assert output.lines[0] == "Starting podspec lint test"

    def test_failure_roster(self, packages: Path, output: OutputCollector) -> None:
        """A library-mode failure fails the run and lists the plugin once."""
        def handler(command: str, args: List[str]) -> int:
            if command == "pod" and args[2].endswith("b.podspec") and "--use-libraries" in args:
                return 1
            return 0

        result = _command(FakeProcessRunner(handler), output).execute(
            Namespace(packages=packages), _config(skip=["skip"])
        )
        assert result == EXIT_ISSUES_FOUND
        assert output.lines[-2:] == [
            "The following plugins have podspec errors (see above):",
            " * b",
        ]
        assert output.lines.count(" * b") == 1

    def test_no_analyze(self, packages: Path, output: OutputCollector) -> None:
        runner = FakeProcessRunner()
        _command(runner, output).execute(
            Namespace(packages=packages), _config(no_analyze=["a"])
        )
        for args in runner.pod_calls():
            if args[2].endswith("a.podspec"):
                assert "--analyze" not in args
            else:
                assert "--analyze" in args
        assert "Linting a.podspec" in output.lines
        assert "Linting and analyzing b.podspec" in output.lines

    def test_no_podspecs(self, packages_dir: Path, output: OutputCollector) -> None:
        write_plugin(packages_dir, "dart_only")
        result = _command(FakeProcessRunner(), output).execute(
            Namespace(packages=packages_dir), _config()
        )
        assert result == EXIT_SUCCESS
        assert output.lines == ["Starting podspec lint test", "\n\n"]

    def test_empty_shard_is_noop(self, packages: Path, output: OutputCollector) -> None:
        runner = FakeProcessRunner()
        config = _config(shard=ShardConfig(index=3, count=4))
        result = _command(runner, output).execute(Namespace(packages=packages), config)
        assert result == EXIT_SUCCESS
        assert runner.calls == []

    def test_shard_selects_plugins(self, packages: Path, output: OutputCollector) -> None:
        runner = FakeProcessRunner()
        config = _config(shard=ShardConfig(index=1, count=2))
        _command(runner, output).execute(Namespace(packages=packages), config)
        # Plugins sorted by path: a, b | skip
        assert [Path(p).stem for p in runner.linted_paths()] == ["skip", "skip"]

    def test_invalid_shard(self, packages: Path, output: OutputCollector) -> None:
        config = _config(shard=ShardConfig(index=2, count=2))
        with pytest.raises(UsageError):
            _command(FakeProcessRunner(), output).execute(Namespace(packages=packages), config)

    def test_ignore_patterns(self, packages_dir: Path, output: OutputCollector) -> None:
        write_plugin(
            packages_dir,
            "camera",
            podspecs=["ios/camera.podspec", "example/ios/Runner.podspec"],
        )
        runner = FakeProcessRunner()
        _command(runner, output).execute(
            Namespace(packages=packages_dir), _config(ignore=["**/example/**"])
        )
        assert {Path(p).name for p in runner.linted_paths()} == {"camera.podspec"}
