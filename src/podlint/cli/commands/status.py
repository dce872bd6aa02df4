"""Status command implementation."""

from __future__ import annotations

from argparse import Namespace
from pathlib import Path
from typing import Callable, Optional

from podlint.bootstrap.platform import LocalPlatform
from podlint.cli.commands import Command
from podlint.cli.commands.podspecs import build_discovery
from podlint.cli.exit_codes import EXIT_SUCCESS
from podlint.config.models import PodlintConfig
from podlint.core.subprocess_runner import ProcessRunner
from podlint.linting.filter import select_podspecs
from podlint.linting.runner import POD_COMMAND


class StatusCommand(Command):
    """Shows platform, tool, and plugin selection status."""

    def __init__(
        self,
        version: str,
        process_runner: Optional[ProcessRunner] = None,
        platform: Optional[LocalPlatform] = None,
        printer: Callable[[str], None] = print,
    ) -> None:
        """Initialize StatusCommand.

        Args:
            version: Current podlint version string.
        """
        self._version = version
        self._process_runner = process_runner or ProcessRunner()
        self._platform = platform or LocalPlatform()
        self._print = printer

    @property
    def name(self) -> str:
        """Command identifier."""
        return "status"

    def execute(self, args: Namespace, config: "PodlintConfig | None" = None) -> int:
        """Execute the status command.

        Nothing is linted; this only reports what a ``podspecs`` run with the
        same arguments would do.

        Returns:
            Exit code (always 0 for status).
        """
        config = config or PodlintConfig()
        packages_dir = Path(getattr(args, "packages", ".")).resolve()

        self._print(f"podlint version: {self._version}")
        self._print(f"Platform: {self._platform.info}")
        if not self._platform.is_macos:
            self._print("  pod lib lint only runs on macOS; podspecs would be skipped.")

        probe = self._process_runner.run("which", [POD_COMMAND], packages_dir)
        if probe.succeeded:
            self._print(f"pod: {probe.stdout.strip()}")
        else:
            self._print("pod: not found")

        self._print(f"Packages: {packages_dir}")
        sources = ", ".join(config.sources) if config.sources else "defaults"
        self._print(f"Config: {sources}")
        self._print("")

        discovery = build_discovery(packages_dir, config)
        discovery.check_sharding()
        plugins = discovery.sharded_plugins()
        self._print(
            f"Shard {config.shard.index + 1}/{config.shard.count}: {len(plugins)} plugins"
        )

        exclusions = config.podspecs.exclusions()
        spec_files = select_podspecs(discovery.iter_files(), exclusions)
        if spec_files:
            self._print("Podspecs:")
            for spec_file in spec_files:
                suffix = "" if exclusions.should_analyze(spec_file) else " (no analyze)"
                self._print(f"  {spec_file.basename}{suffix}")
        else:
            self._print("No podspecs to lint.")

        if exclusions.skip:
            self._print(f"Skipped: {', '.join(sorted(exclusions.skip))}")

        return EXIT_SUCCESS
