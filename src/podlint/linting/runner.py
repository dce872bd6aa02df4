"""Runs ``pod lib lint`` on a single podspec.

Each podspec is linted twice, concurrently: once as a framework
(``use_frameworks!``) and once as a static library (``--use-libraries``).
It passes only if both lints exit zero.
"""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Callable, List, Optional

from podlint.core.logging import get_logger
from podlint.core.models import (
    LINT_MODES,
    ExclusionSet,
    LintInvocationResult,
    LintMode,
    LintOutcome,
    SpecFile,
)
from podlint.core.subprocess_runner import ProcessRunner

LOGGER = get_logger(__name__)

POD_COMMAND = "pod"

Printer = Callable[[str], None]


def build_lint_arguments(
    podspec_path: str,
    *,
    run_analyzer: bool,
    mode: LintMode,
) -> List[str]:
    """Build the ``pod`` arguments for one lint invocation.

    Args:
        podspec_path: Path to the podspec file.
        run_analyzer: Whether to pass ``--analyze``.
        mode: Framework or library lint.

    Returns:
        Argument list, without the ``pod`` executable.
    """
    arguments = ["lib", "lint", podspec_path, "--allow-warnings"]
    if run_analyzer:
        arguments.append("--analyze")
    if mode is LintMode.LIBRARY:
        arguments.append("--use-libraries")
    return arguments


class PodspecLinter:
    """Lints one podspec in both framework and library mode."""

    def __init__(
        self,
        packages_dir: Path,
        exclusions: ExclusionSet,
        process_runner: Optional[ProcessRunner] = None,
        printer: Printer = print,
    ) -> None:
        """Initialize the linter.

        Args:
            packages_dir: Working directory for ``pod`` invocations.
            exclusions: Podspec names excluded from the static analyzer.
            process_runner: Runner used to spawn ``pod``.
            printer: Sink for progress and ``pod`` output.
        """
        self._packages_dir = packages_dir
        self._exclusions = exclusions
        self._process_runner = process_runner or ProcessRunner()
        self._print = printer

    def lint_one(self, spec_file: SpecFile) -> LintOutcome:
        """Lint a podspec in both modes and return the combined verdict."""
        run_analyzer = self._exclusions.should_analyze(spec_file)

        if run_analyzer:
            self._print(f"Linting and analyzing {spec_file.basename}")
        else:
            self._print(f"Linting {spec_file.basename}")

        # Lint two at a time; map() keeps results in LINT_MODES order.
        with ThreadPoolExecutor(max_workers=len(LINT_MODES)) as executor:
            results = list(executor.map(
                lambda mode: self._run_pod_lint(spec_file, run_analyzer=run_analyzer, mode=mode),
                LINT_MODES,
            ))

        for result in results:
            self._print(result.stdout)
            self._print(result.stderr)

        outcome = LintOutcome(spec_file=spec_file, results=tuple(results))
        if not outcome.passed:
            codes = ", ".join(
                f"{mode.value}={result.exit_code}" for mode, result in zip(LINT_MODES, results)
            )
            LOGGER.debug(f"{spec_file.basename} failed ({codes})")
        return outcome

    def _run_pod_lint(
        self,
        spec_file: SpecFile,
        *,
        run_analyzer: bool,
        mode: LintMode,
    ) -> LintInvocationResult:
        arguments = build_lint_arguments(
            str(spec_file.path),
            run_analyzer=run_analyzer,
            mode=mode,
        )
        return self._process_runner.run(POD_COMMAND, arguments, self._packages_dir)
