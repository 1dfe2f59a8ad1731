"""
Pytest configuration and fixtures for date_sorter tests.
"""

import tempfile
from pathlib import Path
from typing import Generator

import arrow
import pytest

from date_sorter.core.date_validation import DateValidator


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def now() -> arrow.Arrow:
    """Fixed reference time for future date checks."""
    return arrow.Arrow(2024, 6, 1, 12, 0, 0)


@pytest.fixture
def validator(now: arrow.Arrow) -> DateValidator:
    """Validator with the default minimum year and a fixed now."""
    return DateValidator(minimum_year=1950, now=now)


@pytest.fixture
def make_symlink():
    """Create a symlink, skipping the test where symlinks are unsupported."""

    def _make(link: Path, target: Path, target_is_directory: bool = False) -> Path:
        try:
            link.symlink_to(target, target_is_directory=target_is_directory)
        except (OSError, NotImplementedError) as e:
            pytest.skip(f"symlinks unavailable: {e}")
        return link

    return _make
