"""CLI runner orchestration.

This module handles command dispatch and execution for the podlint CLI.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Optional

from importlib.metadata import version, PackageNotFoundError

from podlint.cli.arguments import build_parser
from podlint.cli.commands.podspecs import PodspecsCommand
from podlint.cli.commands.status import StatusCommand
from podlint.cli.commands.validate import ValidateCommand
from podlint.cli.config_bridge import ConfigBridge
from podlint.cli.exit_codes import EXIT_INVALID_USAGE, EXIT_SUCCESS
from podlint.config import load_config
from podlint.config.loader import ConfigError
from podlint.config.models import PodlintConfig
from podlint.core.errors import ToolExit, UsageError
from podlint.core.logging import configure_logging, get_logger

LOGGER = get_logger(__name__)

PODSPECS_COMMANDS = ("podspecs", "podspec")


def get_version() -> str:
    """Get podlint version.

    Returns:
        Version string from package metadata or fallback.
    """
    try:
        return version("podlint")
    except PackageNotFoundError:
        # Fallback for editable installs that have not yet built metadata.
        from podlint import __version__
        return __version__


class CLIRunner:
    """Orchestrates CLI execution with subcommand dispatch."""

    def __init__(self) -> None:
        """Initialize CLIRunner with parser and commands."""
        self.parser = build_parser()
        self._version = get_version()
        self.podspecs_cmd = PodspecsCommand(version=self._version)
        self.status_cmd = StatusCommand(version=self._version)
        self.validate_cmd = ValidateCommand()

    def run(self, argv: Optional[Iterable[str]] = None) -> int:
        """Run the CLI.

        Args:
            argv: Command-line arguments (defaults to sys.argv).

        Returns:
            Exit code.
        """
        # Handle --help specially to return 0
        if argv is not None:
            argv_list = list(argv)
            if argv_list in (["--help"], ["-h"]):
                self.parser.print_help()
                return EXIT_SUCCESS
        else:
            argv_list = None

        args = self.parser.parse_args(argv_list)

        # Configure logging as early as possible
        configure_logging(
            debug=args.debug,
            verbose=args.verbose,
            quiet=args.quiet,
        )

        if args.version:
            print(self._version)
            return EXIT_SUCCESS

        command = getattr(args, "command", None)

        try:
            if command in PODSPECS_COMMANDS:
                return self._handle_podspecs(args)
            elif command == "status":
                return self._handle_status(args)
            elif command == "validate":
                return self.validate_cmd.execute(args)
        except ToolExit as e:
            LOGGER.error(str(e))
            return e.exit_code
        except (ConfigError, UsageError) as e:
            LOGGER.error(str(e))
            return EXIT_INVALID_USAGE

        # No command specified - show help
        self.parser.print_help()
        return EXIT_SUCCESS

    def _load_config(self, args) -> PodlintConfig:
        packages_dir = Path(args.packages).resolve()
        return load_config(
            packages_dir=packages_dir,
            cli_config_path=getattr(args, "config", None),
            cli_overrides=ConfigBridge.args_to_overrides(args),
        )

    def _handle_podspecs(self, args) -> int:
        """Handle the podspecs command.

        Args:
            args: Parsed command-line arguments.

        Returns:
            Exit code.
        """
        config = self._load_config(args)
        return self.podspecs_cmd.execute(args, config)

    def _handle_status(self, args) -> int:
        """Handle the status command."""
        config = self._load_config(args)
        return self.status_cmd.execute(args, config)
