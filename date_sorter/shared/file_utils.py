"""
Directory traversal and logging setup shared by the command line tools.
"""

import logging
import os
from pathlib import Path
from typing import Iterator, Set, Tuple, Union

from ..core.types import FileEntry

logger = logging.getLogger(__name__)


def is_hidden(name: str) -> bool:
    """Check if a file or directory name is hidden."""
    return name.startswith(".")


def display_path(path: Union[str, Path]) -> str:
    """
    Format a path for printing.

    Names that are not valid UTF-8 come back from the OS with surrogate
    escapes, which cannot be written to a UTF-8 stream. Such bytes are
    shown as U+FFFD instead.
    """
    return os.fsencode(path).decode("utf-8", "replace")


def mark_visited(directory: Union[str, Path], visited: Set[Tuple[int, int]]) -> bool:
    """
    Record a directory by device and inode.

    Args:
        directory: Directory being entered
        visited: Keys of directories entered so far, updated in place

    Returns:
        False if the directory was entered before (a symlink loop or a
        second link to the same directory), otherwise True
    """
    try:
        stat = os.stat(directory)
    except OSError as e:
        logger.warning(f"Cannot read {display_path(directory)}: {e.strerror}")
        return False

    key = (stat.st_dev, stat.st_ino)
    if key in visited:
        logger.warning(f"Skipping {display_path(directory)}: directory already visited")
        return False
    visited.add(key)
    return True


def walk_files(directory: Path, follow_symlinks: bool = True) -> Iterator[FileEntry]:
    """
    Lazily walk all regular files below a directory.

    Hidden files are skipped and hidden directories are not descended into.
    The directory itself is never excluded, even if its name is hidden.
    Each directory is walked once, so symlink loops terminate.

    Args:
        directory: Directory to walk
        follow_symlinks: If True, follow symbolic links

    Yields:
        FileEntry for each regular file
    """
    directory = Path(directory)
    visited: Set[Tuple[int, int]] = set()

    def on_error(error: OSError) -> None:
        path = error.filename or directory
        logger.warning(f"Cannot read {display_path(path)}: {error.strerror}")

    for root, dirnames, filenames in os.walk(
        directory, onerror=on_error, followlinks=follow_symlinks
    ):
        if not mark_visited(root, visited):
            dirnames[:] = []
            continue
        dirnames[:] = sorted(name for name in dirnames if not is_hidden(name))
        root_path = Path(root)
        for filename in sorted(filenames):
            if is_hidden(filename):
                continue
            file_path = root_path / filename
            # os.path.isfile reports unreadable entries as False instead of raising
            if not os.path.isfile(file_path):
                continue
            yield FileEntry(path=file_path, file_name=filename, is_file=True)


def setup_logging(verbose: bool = False, quiet: bool = False) -> None:
    """
    Configure logging for the application.

    Args:
        verbose: If True, set logging level to DEBUG
        quiet: If True, set logging level to WARNING
    """
    if quiet:
        level = logging.WARNING
    elif verbose:
        level = logging.DEBUG
    else:
        level = logging.INFO

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
