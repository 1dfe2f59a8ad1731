"""
Type definitions for the date resolution engine.
"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

import arrow
from pydantic import BaseModel, ConfigDict, Field


class DateSource(str, Enum):
    """Where a date candidate came from."""

    FILENAME = "from-name"
    METADATA = "from-metadata"


@dataclass(frozen=True)
class DateCandidate:
    """A date found for a file, normalized to a fixed time of day in UTC."""

    date: arrow.Arrow
    source: DateSource


@dataclass(frozen=True)
class FileEntry:
    """A file produced by directory traversal."""

    path: Path
    file_name: str
    is_file: bool = True

    @classmethod
    def from_path(cls, path: Path) -> "FileEntry":
        """Build an entry for an existing path."""
        path = Path(path)
        return cls(path=path, file_name=path.name, is_file=path.is_file())


class ResolutionPolicy(BaseModel):
    """Which date sources to consult, and the oldest acceptable year."""

    use_name: bool = Field(default=True, description="Extract dates from filenames")
    use_metadata: bool = Field(
        default=True, description="Extract dates from filesystem timestamps"
    )
    minimum_year: int = Field(default=1950, description="Oldest acceptable year")

    model_config = ConfigDict(frozen=True)
