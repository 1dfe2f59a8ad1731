"""
Organization strategies for date directories.

Defines the directory layouts and month names used to turn a resolution
date into a relative target directory.
"""

from enum import Enum, IntEnum
from typing import Dict, Optional

import arrow
from pydantic import BaseModel, ConfigDict, Field


class DirectoryLayout(str, Enum):
    """Directory layouts for organizing files."""

    FLAT = "flat"  # 2023 06
    YEAR = "year"  # 2023/2023 06
    PLAIN = "plain"  # 2023/06


class MonthLanguage(str, Enum):
    """Language of month names appended to month directories."""

    NONE = "none"
    ENGLISH = "en"
    SWEDISH = "swe"


class Month(IntEnum):
    """Calendar months."""

    JANUARY = 1
    FEBRUARY = 2
    MARCH = 3
    APRIL = 4
    MAY = 5
    JUNE = 6
    JULY = 7
    AUGUST = 8
    SEPTEMBER = 9
    OCTOBER = 10
    NOVEMBER = 11
    DECEMBER = 12


MONTH_NAMES: Dict[MonthLanguage, Dict[Month, str]] = {
    MonthLanguage.ENGLISH: {
        Month.JANUARY: "January",
        Month.FEBRUARY: "February",
        Month.MARCH: "March",
        Month.APRIL: "April",
        Month.MAY: "May",
        Month.JUNE: "June",
        Month.JULY: "July",
        Month.AUGUST: "August",
        Month.SEPTEMBER: "September",
        Month.OCTOBER: "October",
        Month.NOVEMBER: "November",
        Month.DECEMBER: "December",
    },
    MonthLanguage.SWEDISH: {
        Month.JANUARY: "Januari",
        Month.FEBRUARY: "Februari",
        Month.MARCH: "Mars",
        Month.APRIL: "April",
        Month.MAY: "Maj",
        Month.JUNE: "Juni",
        Month.JULY: "Juli",
        Month.AUGUST: "Augusti",
        Month.SEPTEMBER: "September",
        Month.OCTOBER: "Oktober",
        Month.NOVEMBER: "November",
        Month.DECEMBER: "December",
    },
}


def month_name(month: Month, language: MonthLanguage) -> Optional[str]:
    """
    Get the name of a month.

    Args:
        month: Month to name
        language: Language of the name

    Returns:
        The month name, or None when no language is selected
    """
    if language == MonthLanguage.NONE:
        return None
    return MONTH_NAMES[language][month]


class NamingPolicy(BaseModel):
    """Policy for naming date directories."""

    layout: DirectoryLayout = Field(
        default=DirectoryLayout.PLAIN,
        description="Directory layout",
    )

    language: MonthLanguage = Field(
        default=MonthLanguage.NONE,
        description="Language of month names appended to month directories",
    )

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_tokens(
        cls, layout: Optional[str] = None, language: Optional[str] = None
    ) -> "NamingPolicy":
        """
        Build a policy from command line tokens.

        Args:
            layout: "flat", "year", or anything else for the plain layout
            language: "en", "swe", or None for no month names

        Returns:
            Naming policy

        Raises:
            ValueError: If the language token is unknown
        """
        try:
            directory_layout = DirectoryLayout(layout)
        except ValueError:
            directory_layout = DirectoryLayout.PLAIN

        return cls(
            layout=directory_layout,
            language=MonthLanguage(language) if language else MonthLanguage.NONE,
        )

    def get_target_directory(self, date: arrow.Arrow) -> str:
        """
        Get the relative target directory for a date.

        Args:
            date: Resolution date

        Returns:
            Slash separated relative path such as "2023/06" or "2023 06 June"
        """
        year = date.year
        month = Month(date.month)
        name = month_name(month, self.language)
        suffix = f" {name}" if name else ""

        if self.layout == DirectoryLayout.FLAT:
            return f"{year:04d} {int(month):02d}{suffix}"
        elif self.layout == DirectoryLayout.YEAR:
            return f"{year:04d}/{year:04d} {int(month):02d}{suffix}"
        return f"{year:04d}/{int(month):02d}{suffix}"
