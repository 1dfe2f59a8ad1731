"""Removal of directories left empty after organizing."""

import logging
import os
from pathlib import Path
from typing import List, Set, Tuple

from ..shared.file_utils import is_hidden, mark_visited

logger = logging.getLogger(__name__)


def remove_empty_directories(root: Path) -> List[Path]:
    """
    Remove empty directories below a root.

    Directories are visited deepest first so that a parent emptied by
    removing its children is removed as well. The root itself and hidden
    directories are left alone. Directories that are not empty are skipped.

    Args:
        root: Directory to clean

    Returns:
        Removed directories
    """
    root = Path(root)
    visited: Set[Tuple[int, int]] = set()
    directories: List[Path] = []

    for dirpath, dirnames, _ in os.walk(root, followlinks=True):
        if not mark_visited(dirpath, visited):
            dirnames[:] = []
            continue
        dirnames[:] = [name for name in dirnames if not is_hidden(name)]
        directories.append(Path(dirpath))

    removed: List[Path] = []
    # Reversed pre-order puts every directory before its parent
    for path in reversed(directories):
        if path == root:
            continue
        try:
            os.rmdir(path)
        except OSError:
            continue
        logger.debug(f"Removed empty directory {path}")
        removed.append(path)

    return removed
