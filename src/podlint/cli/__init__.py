"""Command-line interface for podlint."""

from __future__ import annotations

from typing import Iterable, Optional


def main(argv: Optional[Iterable[str]] = None) -> int:
    """CLI entrypoint.

    Returns an exit code suitable for use as a console script.
    """
    from podlint.cli.runner import CLIRunner

    return CLIRunner().run(argv)


__all__ = ["main"]
