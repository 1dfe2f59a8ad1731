"""
Tests for date_validation module.
"""

import arrow
import pytest

from date_sorter.core.date_validation import DateValidator, at_fixed_time
from date_sorter.core.errors import (
    AncientDateError,
    FutureDateError,
    InvalidDateError,
    InvalidDayError,
    InvalidMonthError,
)


class TestDateValidator:
    """Tests for DateValidator."""

    def test_valid_date(self, validator: DateValidator) -> None:
        """Test that a valid date is returned at 00:00:01 UTC."""
        date = validator.validate(2023, 6, 15)

        assert date == arrow.Arrow(2023, 6, 15, 0, 0, 1)
        assert date.utcoffset().total_seconds() == 0

    @pytest.mark.parametrize("month", [0, 13, 19])
    def test_invalid_month(self, validator: DateValidator, month: int) -> None:
        """Test months outside 1-12 are rejected."""
        with pytest.raises(InvalidMonthError):
            validator.validate(2023, month, 1)

    @pytest.mark.parametrize("day", [0, 32, 39])
    def test_invalid_day(self, validator: DateValidator, day: int) -> None:
        """Test days outside 1-31 are rejected."""
        with pytest.raises(InvalidDayError):
            validator.validate(2023, 1, day)

    def test_ancient_year(self, validator: DateValidator) -> None:
        """Test years before the minimum are rejected."""
        with pytest.raises(AncientDateError):
            validator.validate(1949, 12, 31)

    def test_minimum_year_is_inclusive(self, validator: DateValidator) -> None:
        """Test the minimum year itself is accepted."""
        assert validator.validate(1950, 1, 1).year == 1950

    def test_day_out_of_range_for_month(self, validator: DateValidator) -> None:
        """Test day 31 in a 30 day month is rejected."""
        with pytest.raises(InvalidDateError):
            validator.validate(2023, 4, 31)

    def test_leap_years(self, validator: DateValidator) -> None:
        """Test February 29 is only accepted in leap years."""
        assert validator.validate(2020, 2, 29) == arrow.Arrow(2020, 2, 29, 0, 0, 1)

        with pytest.raises(InvalidDateError):
            validator.validate(2023, 2, 29)
        with pytest.raises(InvalidDateError):
            validator.validate(2000, 2, 30)

    def test_future_date(self, validator: DateValidator) -> None:
        """Test dates after the captured now are rejected."""
        with pytest.raises(FutureDateError):
            validator.validate(2024, 6, 2)

    def test_today_is_not_future(self, validator: DateValidator) -> None:
        """Test the current day is accepted since 00:00:01 is before now."""
        assert validator.validate(2024, 6, 1) == arrow.Arrow(2024, 6, 1, 0, 0, 1)

    def test_check_order(self, validator: DateValidator) -> None:
        """Test month is checked before day, and day before year."""
        with pytest.raises(InvalidMonthError):
            validator.validate(1000, 13, 40)
        with pytest.raises(InvalidDayError):
            validator.validate(1000, 12, 40)
        with pytest.raises(AncientDateError):
            validator.validate(1000, 2, 30)

    def test_now_captured_once(self) -> None:
        """Test the reference time does not change between validations."""
        validator = DateValidator(minimum_year=1950)
        first = validator.now

        validator.validate(2000, 1, 1)

        assert validator.now is first


class TestAtFixedTime:
    """Tests for at_fixed_time."""

    def test_normalizes_time_of_day(self) -> None:
        """Test the time of day is replaced with 00:00:01."""
        date = arrow.Arrow(2021, 3, 4, 17, 45, 12)

        assert at_fixed_time(date) == arrow.Arrow(2021, 3, 4, 0, 0, 1)

    def test_converts_to_utc_first(self) -> None:
        """Test the calendar date is taken in UTC."""
        date = arrow.Arrow(2021, 3, 4, 23, 30, tzinfo="+02:00")

        assert at_fixed_time(date) == arrow.Arrow(2021, 3, 4, 0, 0, 1)

        date = arrow.Arrow(2021, 3, 4, 1, 30, tzinfo="+02:00")

        assert at_fixed_time(date) == arrow.Arrow(2021, 3, 3, 0, 0, 1)
