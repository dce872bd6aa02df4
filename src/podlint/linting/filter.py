"""Podspec selection from the discovered candidate files."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List, Union

from podlint.core.logging import get_logger
from podlint.core.models import PODSPEC_SUFFIX, ExclusionSet, SpecFile

LOGGER = get_logger(__name__)


def select_podspecs(
    candidates: Iterable[Union[Path, SpecFile]],
    exclusions: ExclusionSet,
) -> List[SpecFile]:
    """Return the podspecs to lint, sorted by basename.

    Files without the ``.podspec`` extension and podspecs whose name is in
    ``exclusions.skip`` are dropped. Skip entries that match nothing are
    ignored.
    """
    selected: List[SpecFile] = []
    for candidate in candidates:
        spec_file = candidate if isinstance(candidate, SpecFile) else SpecFile(Path(candidate))
        if spec_file.suffix != PODSPEC_SUFFIX:
            continue
        if exclusions.is_skipped(spec_file):
            LOGGER.info(f"Skipping {spec_file.basename}")
            continue
        selected.append(spec_file)

    # By basename, not full path, independent of directory enumeration order.
    selected.sort(key=lambda f: f.basename)
    return selected
