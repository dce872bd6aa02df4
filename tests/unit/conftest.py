"""Shared fixtures for podlint unit tests."""

from __future__ import annotations

import threading
from pathlib import Path
from typing import Callable, Dict, List, Optional, Sequence, Tuple, Union

import pytest

from podlint.core.errors import ToolExit
from podlint.core.models import LintInvocationResult


class FakeProcessRunner:
    """Process runner double that records calls instead of spawning processes.

    ``handler`` maps (command, args) to an exit code, or to a full
    LintInvocationResult. Unhandled calls exit zero with no output.
    """

    def __init__(
        self,
        handler: Optional[Callable[[str, List[str]], Union[int, LintInvocationResult]]] = None,
    ) -> None:
        self._handler = handler
        self._lock = threading.Lock()
        self.calls: List[Tuple[str, List[str], Path]] = []

    def run(
        self,
        command: str,
        args: Sequence[str],
        working_dir: Union[str, Path],
    ) -> LintInvocationResult:
        args = list(args)
        with self._lock:
            self.calls.append((command, args, Path(working_dir)))
        outcome = self._handler(command, args) if self._handler else 0
        if isinstance(outcome, LintInvocationResult):
            return outcome
        return LintInvocationResult(
            args=(command, *args),
            exit_code=outcome,
            stdout=f"{command} {' '.join(args)} stdout",
            stderr=f"{command} {' '.join(args)} stderr",
        )

    def run_and_exit_on_error(
        self,
        command: str,
        args: Sequence[str],
        working_dir: Union[str, Path],
    ) -> LintInvocationResult:
        result = self.run(command, args, working_dir)
        if not result.succeeded:
            raise ToolExit(result.exit_code)
        return result

    def pod_calls(self) -> List[List[str]]:
        """Arguments of every ``pod`` invocation, in call order."""
        return [args for command, args, _ in self.calls if command == "pod"]

    def linted_paths(self) -> List[str]:
        """Podspec paths passed to ``pod lib lint``, one entry per invocation."""
        return [args[2] for args in self.pod_calls()]


class FakePlatform:
    """Platform query double."""

    def __init__(self, os: str = "darwin") -> None:
        from podlint.bootstrap.platform import PlatformInfo

        self.info = PlatformInfo(os=os, arch="arm64")

    @property
    def is_macos(self) -> bool:
        return self.info.is_macos


class OutputCollector:
    """Print sink that keeps every printed line."""

    def __init__(self) -> None:
        self.lines: List[str] = []

    def __call__(self, line: str) -> None:
        self.lines.append(line)

    @property
    def text(self) -> str:
        return "\n".join(self.lines)


def write_plugin(root: Path, name: str, podspecs: Sequence[str] = (), extra: Dict[str, str] | None = None) -> Path:
    """Create a plugin directory with a pubspec and the given podspec files."""
    plugin = root / name
    plugin.mkdir(parents=True, exist_ok=True)
    (plugin / "pubspec.yaml").write_text(f"name: {plugin.name}\n", encoding="utf-8")
    for podspec in podspecs:
        target = plugin / podspec
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text("Pod::Spec.new do |s|\nend\n", encoding="utf-8")
    for rel_path, content in (extra or {}).items():
        target = plugin / rel_path
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(content, encoding="utf-8")
    return plugin


@pytest.fixture
def packages_dir(tmp_path: Path) -> Path:
    """An empty packages directory."""
    packages = tmp_path / "packages"
    packages.mkdir()
    return packages


@pytest.fixture
def output() -> OutputCollector:
    return OutputCollector()
