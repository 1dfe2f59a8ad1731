"""
Date extraction for files.

Two independent sources are supported:
- Filename patterns (year-first layouts before day-first layouts)
- File system timestamps (earliest of birth, modification and access time)
"""

import logging
import os
import re
from pathlib import Path
from typing import List, Optional, Tuple

import arrow

from .date_validation import DateValidator, at_fixed_time
from .errors import (
    DateError,
    InvalidMetadataError,
    MetadataReadError,
    PatternMismatchError,
)
from .types import DateCandidate, DateSource

logger = logging.getLogger(__name__)

# Separators in priority order; "" means the groups are adjacent
SEPARATORS = ["-", "_", "", " ", r"\.", "/"]

YEAR = r"(\d{4})"
MONTH = r"([0-1]\d)"
DAY = r"([0-3]\d)"


def _compile(groups: Tuple[str, str, str]) -> List[re.Pattern]:
    return [re.compile(sep.join(groups), re.ASCII) for sep in SEPARATORS]


# Groups captured as (year, month, day)
YEAR_FIRST_PATTERNS = _compile((YEAR, MONTH, DAY))
# Groups captured as (day, month, year)
DAY_FIRST_PATTERNS = _compile((DAY, MONTH, YEAR))


class NameDateExtractor:
    """Extract dates embedded in filenames."""

    def __init__(self, validator: DateValidator) -> None:
        self.validator = validator

    def extract(self, file_name: str) -> DateCandidate:
        """
        Find the first valid date in a filename.

        Every year-first pattern is tried over all of its matches before any
        day-first pattern, so a year-first date always wins.

        Args:
            file_name: Base name of the file

        Returns:
            DateCandidate for the first valid date

        Raises:
            PatternMismatchError: If no pattern matches
            DateError: The last validation error if every match was invalid
        """
        last_error: Optional[DateError] = None

        for patterns, year_first in (
            (YEAR_FIRST_PATTERNS, True),
            (DAY_FIRST_PATTERNS, False),
        ):
            for pattern in patterns:
                for match in pattern.finditer(file_name):
                    if year_first:
                        year, month, day = match.groups()
                    else:
                        day, month, year = match.groups()

                    try:
                        date = self.validator.validate(int(year), int(month), int(day))
                    except DateError as e:
                        logger.debug(
                            f"Rejected {match.group(0)!r} in {file_name}: {e}"
                        )
                        last_error = e
                        continue

                    logger.debug(f"Extracted date from filename {file_name}: {date}")
                    return DateCandidate(date=date, source=DateSource.FILENAME)

        if last_error is not None:
            raise last_error
        raise PatternMismatchError()


class MetadataDateExtractor:
    """Extract dates from file system timestamps."""

    TIMESTAMP_FIELDS = ("st_birthtime", "st_mtime", "st_atime")

    def extract(self, path: Path) -> DateCandidate:
        """
        Get the earliest available timestamp of a file.

        Args:
            path: Path to the file

        Returns:
            DateCandidate for the earliest timestamp, in UTC

        Raises:
            MetadataReadError: If the file cannot be stat'ed
            InvalidMetadataError: If no timestamp is usable
        """
        try:
            stat = os.stat(path)
        except OSError as e:
            raise MetadataReadError(e)

        dates: List[arrow.Arrow] = []
        for field in self.TIMESTAMP_FIELDS:
            timestamp = getattr(stat, field, None)
            if timestamp is None:
                continue
            try:
                dates.append(arrow.get(timestamp))
            except (ValueError, OverflowError, OSError):
                logger.debug(f"Unusable {field} for {path}: {timestamp}")

        if not dates:
            raise InvalidMetadataError()

        date = at_fixed_time(min(dates))
        logger.debug(f"Using filesystem date for {path}: {date}")
        return DateCandidate(date=date, source=DateSource.METADATA)
