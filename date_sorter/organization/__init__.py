"""
Organization module for sorting files into date directories.

This module builds target directories from resolution dates and moves files
into them, never overwriting existing files.
"""

from .cleanup import remove_empty_directories
from .file_organizer import FileOrganizer, OrganizationResult
from .relocator import RelocationOutcome, RelocationStatus, Relocator
from .strategy import DirectoryLayout, Month, MonthLanguage, NamingPolicy

__all__ = [
    "FileOrganizer",
    "OrganizationResult",
    "RelocationOutcome",
    "RelocationStatus",
    "Relocator",
    "DirectoryLayout",
    "Month",
    "MonthLanguage",
    "NamingPolicy",
    "remove_empty_directories",
]
