"""Subprocess runner for external tools.

Runs commands with captured UTF-8 output and converts the outcome into a
``LintInvocationResult``. Failures are reported, never retried.
"""

from __future__ import annotations

import subprocess
from pathlib import Path
from typing import Optional, Sequence, Union

from podlint.core.errors import ToolExit
from podlint.core.logging import get_logger
from podlint.core.models import LintInvocationResult

LOGGER = get_logger(__name__)

# Conventional shell exit codes for a timed out / unlaunchable command.
EXIT_TIMEOUT = 124
EXIT_COMMAND_NOT_FOUND = 127


class ProcessRunner:
    """Runs external commands and captures their output."""

    def __init__(self, timeout: Optional[float] = None) -> None:
        """Initialize the runner.

        Args:
            timeout: Per-invocation timeout in seconds. None waits forever.
        """
        self._timeout = timeout

    @property
    def timeout(self) -> Optional[float]:
        return self._timeout

    def run(
        self,
        command: str,
        args: Sequence[str],
        working_dir: Union[str, Path],
    ) -> LintInvocationResult:
        """Run a command and capture its output.

        A command that cannot be started or that times out is reported as a
        non-zero result instead of raising.

        Args:
            command: Executable name or path.
            args: Arguments passed to the executable.
            working_dir: Working directory for the command.

        Returns:
            LintInvocationResult with exit code and captured streams.
        """
        cmd = [command, *args]
        LOGGER.debug(f"Running: {' '.join(cmd)} (cwd={working_dir})")

        try:
            completed = subprocess.run(
                cmd,
                capture_output=True,
                text=True,
                encoding="utf-8",
                errors="replace",
                cwd=str(working_dir),
                timeout=self._timeout,
            )
        except subprocess.TimeoutExpired as e:
            LOGGER.warning(f"{command} timed out after {self._timeout}s")
            return LintInvocationResult(
                args=tuple(cmd),
                exit_code=EXIT_TIMEOUT,
                stdout=_decode(e.stdout),
                stderr=f"{command} timed out after {self._timeout}s",
            )
        except OSError as e:
            LOGGER.debug(f"Failed to start {command}: {e}")
            return LintInvocationResult(
                args=tuple(cmd),
                exit_code=EXIT_COMMAND_NOT_FOUND,
                stderr=str(e),
            )

        return LintInvocationResult(
            args=tuple(cmd),
            exit_code=completed.returncode,
            stdout=completed.stdout or "",
            stderr=completed.stderr or "",
        )

    def run_and_exit_on_error(
        self,
        command: str,
        args: Sequence[str],
        working_dir: Union[str, Path],
    ) -> LintInvocationResult:
        """Run a command that must succeed for the run to continue.

        Raises:
            ToolExit: If the command exits non-zero or cannot be started.
        """
        result = self.run(command, args, working_dir)
        if not result.succeeded:
            LOGGER.error(
                f"Command '{' '.join(result.args)}' failed with exit code {result.exit_code}"
            )
            raise ToolExit(result.exit_code, f"{command} failed")
        return result


def _decode(output: Union[str, bytes, None]) -> str:
    """Normalize partial output captured from a timed out process."""
    if output is None:
        return ""
    if isinstance(output, bytes):
        return output.decode("utf-8", errors="replace")
    return output
