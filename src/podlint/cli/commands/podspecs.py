"""Podspecs command implementation.

Lints the CocoaPods podspecs of every plugin with ``pod lib lint``, in
framework and library mode, with the static analyzer unless disabled.

See https://guides.cocoapods.org/terminal/commands.html#pod_lib_lint.
"""

from __future__ import annotations

from argparse import Namespace
from pathlib import Path
from typing import Callable, Optional

from podlint.bootstrap.platform import LocalPlatform
from podlint.cli.commands import Command
from podlint.cli.exit_codes import EXIT_ISSUES_FOUND, EXIT_SUCCESS
from podlint.config.ignore import load_ignore_patterns
from podlint.config.models import PodlintConfig
from podlint.core.logging import get_logger
from podlint.core.subprocess_runner import ProcessRunner
from podlint.discovery.plugins import PluginDiscovery
from podlint.linting.filter import select_podspecs
from podlint.linting.runner import POD_COMMAND, PodspecLinter
from podlint.pipeline.executor import PodspecLintExecutor
from podlint.reporting.summary import SummaryReporter

LOGGER = get_logger(__name__)


def build_discovery(packages_dir: Path, config: PodlintConfig) -> PluginDiscovery:
    """Create plugin discovery for the configured selection and shard."""
    return PluginDiscovery(
        packages_dir,
        plugins=config.plugins,
        exclude=config.exclude,
        shard_index=config.shard.index,
        shard_count=config.shard.count,
        ignore=load_ignore_patterns(packages_dir, config.ignore),
    )


class PodspecsCommand(Command):
    """Runs ``pod lib lint`` on all iOS and macOS plugin podspecs."""

    def __init__(
        self,
        version: str,
        process_runner: Optional[ProcessRunner] = None,
        platform: Optional[LocalPlatform] = None,
        printer: Callable[[str], None] = print,
    ) -> None:
        """Initialize PodspecsCommand.

        Args:
            version: Current podlint version string.
            process_runner: Runner for ``which`` and ``pod``. Defaults to a
                runner using the configured lint timeout.
            platform: Platform query; defaults to the local machine.
            printer: Sink for progress, ``pod`` output, and the summary.
        """
        self._version = version
        self._process_runner = process_runner
        self._platform = platform or LocalPlatform()
        self._print = printer

    @property
    def name(self) -> str:
        """Command identifier."""
        return "podspecs"

    def execute(self, args: Namespace, config: "PodlintConfig | None" = None) -> int:
        """Execute the podspecs command.

        Args:
            args: Parsed command-line arguments.
            config: Effective podlint configuration.

        Returns:
            EXIT_SUCCESS when every podspec passes or nothing needs linting,
            EXIT_ISSUES_FOUND when any podspec fails.

        Raises:
            ToolExit: If ``pod`` is not installed.
            UsageError: If the shard arguments or packages directory are invalid.
        """
        LOGGER.debug(f"podlint {self._version}: podspecs")
        config = config or PodlintConfig()
        packages_dir = Path(getattr(args, "packages", ".")).resolve()

        if not self._platform.is_macos:
            self._print("Detected platform is not macOS, skipping podspec lint")
            return EXIT_SUCCESS

        discovery = build_discovery(packages_dir, config)
        if not discovery.should_run_shard():
            return EXIT_SUCCESS

        process_runner = self._process_runner or ProcessRunner(timeout=config.podspecs.timeout)
        process_runner.run_and_exit_on_error("which", [POD_COMMAND], packages_dir)

        self._print("Starting podspec lint test")

        exclusions = config.podspecs.exclusions()
        spec_files = select_podspecs(discovery.iter_files(), exclusions)
        LOGGER.info(f"Found {len(spec_files)} podspecs to lint")

        linter = PodspecLinter(
            packages_dir,
            exclusions,
            process_runner=process_runner,
            printer=self._print,
        )
        report = PodspecLintExecutor(linter).execute(spec_files)

        SummaryReporter(printer=self._print).report(report)

        if report.has_failures:
            return EXIT_ISSUES_FOUND
        return EXIT_SUCCESS
