"""Validate command implementation.

Validates podlint.yml configuration files and reports issues.
"""

from __future__ import annotations

from argparse import Namespace
from pathlib import Path
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from podlint.config.models import PodlintConfig

from podlint.cli.commands import Command
from podlint.cli.exit_codes import EXIT_INVALID_USAGE, EXIT_ISSUES_FOUND, EXIT_SUCCESS
from podlint.config.loader import PROJECT_CONFIG_NAMES, find_project_config
from podlint.config.validation import (
    ConfigValidationIssue,
    ValidationSeverity,
    validate_config_file,
)


class ValidateCommand(Command):
    """Validates podlint.yml configuration files."""

    def __init__(self, printer: Callable[[str], None] = print) -> None:
        self._print = printer

    @property
    def name(self) -> str:
        """Command identifier."""
        return "validate"

    def execute(self, args: Namespace, config: "PodlintConfig | None" = None) -> int:
        """Execute the validate command.

        Returns:
            Exit code: 0 = valid, 1 = has errors, 3 = file not found.
        """
        config_path = getattr(args, "config", None)
        if config_path:
            config_path = Path(config_path)
        else:
            config_path = find_project_config(Path(getattr(args, "packages", ".")))

        if config_path is None:
            self._print("No configuration file found.")
            self._print(f"Looked for: {', '.join(PROJECT_CONFIG_NAMES)}")
            return EXIT_INVALID_USAGE

        if not config_path.exists():
            self._print(f"Configuration file not found: {config_path}")
            return EXIT_INVALID_USAGE

        self._print(f"Validating {config_path}...")

        is_valid, issues = validate_config_file(config_path)

        if not issues:
            self._print("Configuration is valid.")
            return EXIT_SUCCESS

        errors = [i for i in issues if i.severity == ValidationSeverity.ERROR]
        warnings = [i for i in issues if i.severity == ValidationSeverity.WARNING]

        if errors:
            self._print(f"\nErrors ({len(errors)}):")
            for issue in errors:
                self._print_issue(issue)

        if warnings:
            self._print(f"\nWarnings ({len(warnings)}):")
            for issue in warnings:
                self._print_issue(issue)

        if is_valid:
            self._print("\nConfiguration is valid (with warnings).")
            return EXIT_SUCCESS

        self._print("\nConfiguration has errors.")
        return EXIT_ISSUES_FOUND

    def _print_issue(self, issue: ConfigValidationIssue) -> None:
        line = f"  - {issue.message}"
        if issue.suggestion:
            line += f" (did you mean '{issue.suggestion}'?)"
        self._print(line)
