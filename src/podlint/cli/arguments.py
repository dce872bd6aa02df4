"""Argument parser construction for the podlint CLI.

This module builds the argument parser with subcommands:
- podlint podspecs - Lint every plugin podspec with ``pod lib lint``
- podlint validate - Validate a podlint.yml configuration file
- podlint status   - Show platform, tool, and plugin selection status
"""

from __future__ import annotations

import argparse
from pathlib import Path

DEFAULT_PACKAGES_DIR = "packages"


def positive_float(value: str) -> float:
    """argparse type for a strictly positive number of seconds."""
    try:
        seconds = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid number: {value!r}")
    if seconds <= 0:
        raise argparse.ArgumentTypeError(f"must be positive, got {value}")
    return seconds


def _add_global_options(parser: argparse.ArgumentParser) -> None:
    """Add global options available to all commands."""
    parser.add_argument(
        "--version",
        action="store_true",
        help="Show podlint version and exit.",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging.",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose (info-level) logging.",
    )
    parser.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Reduce logging output to errors only.",
    )


def _build_selection_parent() -> argparse.ArgumentParser:
    """Options shared by commands that operate on the packages tree."""
    parent = argparse.ArgumentParser(add_help=False)

    target_group = parent.add_argument_group("targets")
    target_group.add_argument(
        "--packages",
        metavar="PATH",
        type=Path,
        default=Path(DEFAULT_PACKAGES_DIR),
        help=f"Directory containing the plugins (default: ./{DEFAULT_PACKAGES_DIR}).",
    )
    target_group.add_argument(
        "--plugins",
        action="append",
        metavar="NAME",
        help="Only run on these plugins (repeatable, or comma-separated).",
    )
    target_group.add_argument(
        "--exclude",
        action="append",
        metavar="NAME",
        help="Exclude these plugins (repeatable, or comma-separated).",
    )

    shard_group = parent.add_argument_group("sharding")
    shard_group.add_argument(
        "--shard-index",
        type=int,
        default=None,
        metavar="N",
        help="Zero-based index of this shard (default: 0).",
    )
    shard_group.add_argument(
        "--shard-count",
        type=int,
        default=None,
        metavar="N",
        help="Number of shards the plugins are split into (default: 1).",
    )

    config_group = parent.add_argument_group("configuration")
    config_group.add_argument(
        "--config",
        metavar="PATH",
        type=Path,
        help="Path to config file (default: .podlint.yml in the packages directory).",
    )
    return parent


def _build_podspecs_parser(
    subparsers: argparse._SubParsersAction,
    parent: argparse.ArgumentParser,
) -> None:
    """Build the 'podspecs' subcommand parser."""
    podspecs_parser = subparsers.add_parser(
        "podspecs",
        aliases=["podspec"],
        parents=[parent],
        help='Run "pod lib lint" on all iOS and macOS plugin podspecs.',
        description=(
            'Runs "pod lib lint" on all iOS and macOS plugin podspecs.\n\n'
            'This command requires "pod" to be in your path. Runs on macOS only.'
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    lint_group = podspecs_parser.add_argument_group("lint")
    lint_group.add_argument(
        "--skip",
        action="append",
        metavar="PODSPEC_FILE_NAME",
        help=(
            "Skip all linting for podspecs with this basename "
            "(example: federated plugins with placeholder podspecs)."
        ),
    )
    lint_group.add_argument(
        "--no-analyze",
        action="append",
        dest="no_analyze",
        metavar="PODSPEC_FILE_NAME",
        help=(
            'Do not pass --analyze flag to "pod lib lint" for podspecs with this '
            "basename (example: plugins with known analyzer warnings)."
        ),
    )
    lint_group.add_argument(
        "--timeout",
        type=positive_float,
        default=None,
        metavar="SECONDS",
        help='Fail a "pod lib lint" invocation that runs longer than this.',
    )


def _build_validate_parser(subparsers: argparse._SubParsersAction) -> None:
    """Build the 'validate' subcommand parser."""
    validate_parser = subparsers.add_parser(
        "validate",
        help="Validate a podlint configuration file.",
        description="Check podlint.yml for syntax errors, type errors, and unknown keys.",
    )
    validate_parser.add_argument(
        "--config",
        metavar="PATH",
        type=Path,
        help="Config file to validate (default: search the packages directory).",
    )
    validate_parser.add_argument(
        "--packages",
        metavar="PATH",
        type=Path,
        default=Path(DEFAULT_PACKAGES_DIR),
        help=f"Directory to search for the config file (default: ./{DEFAULT_PACKAGES_DIR}).",
    )


def _build_status_parser(
    subparsers: argparse._SubParsersAction,
    parent: argparse.ArgumentParser,
) -> None:
    """Build the 'status' subcommand parser."""
    subparsers.add_parser(
        "status",
        parents=[parent],
        help="Show platform, tool, and plugin selection status.",
        description=(
            "Display podlint version, platform info, whether pod is installed, "
            "and which plugins and podspecs this shard would lint."
        ),
    )


def build_parser() -> argparse.ArgumentParser:
    """Build and return the argument parser for the podlint CLI."""
    parser = argparse.ArgumentParser(
        prog="podlint",
        description="podlint - run pod lib lint across a plugin monorepo.",
        epilog=(
            "Examples:\n"
            "  podlint podspecs                              # Lint all podspecs\n"
            "  podlint podspecs --skip url_launcher_web      # Skip a placeholder podspec\n"
            "  podlint podspecs --no-analyze camera          # Lint camera without --analyze\n"
            "  podlint podspecs --shard-index 1 --shard-count 4\n"
            "  podlint status                                # Show what would be linted\n"
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    _add_global_options(parser)

    subparsers = parser.add_subparsers(
        dest="command",
        title="commands",
        description="Available commands:",
        metavar="COMMAND",
    )

    parent = _build_selection_parent()
    _build_podspecs_parser(subparsers, parent)
    _build_validate_parser(subparsers)
    _build_status_parser(subparsers, parent)

    return parser
