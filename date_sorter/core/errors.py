"""
Exceptions raised while resolving dates for files.

Every per-file problem is a ``DateError`` and is reported without stopping
the run. ``ConfigurationError`` marks a policy that cannot produce dates at
all and must be handled before any file is processed.
"""

from typing import Optional


class DateSorterError(Exception):
    """Base class for all date sorter errors."""

    message = "Date sorter error"

    def __init__(self, message: Optional[str] = None) -> None:
        super().__init__(message or self.message)


class DateError(DateSorterError):
    """A date could not be determined for a file."""


class PatternMismatchError(DateError):
    message = "Date pattern not found"


class InvalidMetadataError(DateError):
    message = "Metadata not found"


class MetadataReadError(DateError):
    """Reading filesystem metadata failed."""

    def __init__(self, error: OSError) -> None:
        super().__init__(error.strerror or str(error))
        self.error = error


class InvalidMonthError(DateError):
    message = "Invalid month"


class InvalidDayError(DateError):
    message = "Invalid day"


class InvalidDateError(DateError):
    message = "Invalid date"


class AncientDateError(DateError):
    message = "Year is too ancient"


class FutureDateError(DateError):
    message = "Future date"


class ConfigurationError(DateSorterError):
    """The requested policy is unusable."""


class ExtractorsDisabledError(ConfigurationError):
    message = "Both filename and metadata dates are disabled"
