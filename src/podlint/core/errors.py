"""Exceptions that end a podlint run early."""

from __future__ import annotations


class ToolExit(Exception):
    """Abort the run with the given process exit code."""

    def __init__(self, exit_code: int, message: str = "") -> None:
        super().__init__(message or f"Exiting with code {exit_code}")
        self.exit_code = exit_code


class UsageError(Exception):
    """The command was invoked with invalid arguments."""

    pass
