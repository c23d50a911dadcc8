"""Discover candidate image files under a directory."""

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


def scan_directory(directory: Path) -> list[Path]:
    """Return every regular file under directory (recursive), sorted by relative path.

    No extension filtering is done: whatever the codec cannot read surfaces
    later as a read error when that file is selected.
    """
    if not directory.is_dir():
        raise NotADirectoryError(f"Not a directory: {directory}")
    paths = [p for p in directory.rglob("*") if p.is_file()]
    paths.sort(key=lambda p: p.relative_to(directory).as_posix())
    logger.debug("Found %d candidate file(s) under %s", len(paths), directory)
    return paths
