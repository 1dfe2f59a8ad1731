"""
Validation of raw calendar dates.

Turns numeric (year, month, day) triples into UTC timestamps fixed at one
second past midnight, so that comparisons only depend on the calendar date.
"""

import logging
from typing import Optional

import arrow

from .errors import (
    AncientDateError,
    FutureDateError,
    InvalidDateError,
    InvalidDayError,
    InvalidMonthError,
)

logger = logging.getLogger(__name__)


def at_fixed_time(date: arrow.Arrow) -> arrow.Arrow:
    """Return the UTC calendar date of ``date`` at 00:00:01."""
    utc = date.to("UTC")
    return arrow.Arrow(utc.year, utc.month, utc.day, 0, 0, 1)


class DateValidator:
    """Validate dates against a minimum year and a fixed "now"."""

    def __init__(self, minimum_year: int, now: Optional[arrow.Arrow] = None) -> None:
        """
        Initialize the validator.

        Args:
            minimum_year: Oldest acceptable year
            now: Reference time for rejecting future dates. Captured once
                here so every file in a run is judged against the same value.
        """
        self.minimum_year = minimum_year
        self.now = now if now is not None else arrow.utcnow()

    def validate(self, year: int, month: int, day: int) -> arrow.Arrow:
        """
        Validate a date triple.

        Args:
            year: Four digit year
            month: Month number
            day: Day of month

        Returns:
            The date at 00:00:01 UTC

        Raises:
            InvalidMonthError, InvalidDayError, AncientDateError,
            InvalidDateError or FutureDateError, checked in that order
        """
        if not 1 <= month <= 12:
            raise InvalidMonthError()
        if not 1 <= day <= 31:
            raise InvalidDayError()
        if year < self.minimum_year:
            raise AncientDateError()

        try:
            date = arrow.Arrow(year, month, day, 0, 0, 1)
        except ValueError:
            raise InvalidDateError()

        if date > self.now:
            raise FutureDateError()

        logger.debug(f"Validated date {date.format('YYYY-MM-DD')}")
        return date
