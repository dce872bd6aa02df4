"""Logging setup for podlint.

Lint progress and ``pod`` output are printed to stdout; log records go to
stderr so the two streams can be separated in CI logs.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

ROOT_LOGGER_NAME = "podlint"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def resolve_level(*, debug: bool = False, verbose: bool = False, quiet: bool = False) -> int:
    """Map CLI verbosity flags to a logging level.

    Precedence:
    - quiet → ERROR
    - debug → DEBUG
    - verbose → INFO
    - default → WARNING
    """
    if quiet:
        return logging.ERROR
    if debug:
        return logging.DEBUG
    if verbose:
        return logging.INFO
    return logging.WARNING


def configure_logging(*, debug: bool = False, verbose: bool = False, quiet: bool = False) -> None:
    """Configure the podlint logger hierarchy based on CLI flags."""
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(resolve_level(debug=debug, verbose=verbose, quiet=quiet))

    # Replace rather than stack handlers when called more than once.
    for existing in [h for h in logger.handlers if getattr(h, "_podlint", False)]:
        logger.removeHandler(existing)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler._podlint = True  # type: ignore[attr-defined]
    logger.addHandler(handler)
    logger.propagate = False


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a module-level logger."""

    return logging.getLogger(name if name is not None else ROOT_LOGGER_NAME)
