"""
Shared utilities for Date Sorter.
"""

from .file_utils import (
    display_path,
    is_hidden,
    mark_visited,
    setup_logging,
    walk_files,
)

__all__ = [
    "display_path",
    "is_hidden",
    "mark_visited",
    "setup_logging",
    "walk_files",
]
