"""Unit tests for worked-day counting."""

from datetime import date, datetime

import pytest

from fincalc.sdk.errors import InvalidInputError, InvalidRangeError
from fincalc.sdk.periods import days_worked, effective_start, parse_date


class TestParseDate:
    """Tests for parse_date()."""

    def test_iso_string(self):
        assert parse_date("2024-03-15") == date(2024, 3, 15)

    def test_us_formats(self):
        assert parse_date("03/15/2024") == date(2024, 3, 15)
        assert parse_date("03-15-2024") == date(2024, 3, 15)

    def test_datetime_truncates_to_date(self):
        assert parse_date(datetime(2024, 3, 15, 17, 30)) == date(2024, 3, 15)

    def test_invalid_string_raises(self):
        with pytest.raises(InvalidInputError, match="Invalid date"):
            parse_date("not-a-date")

    def test_empty_raises(self):
        with pytest.raises(InvalidInputError):
            parse_date("")


class TestDaysWorked:
    """Tests for days_worked() and effective_start()."""

    def test_same_year_is_inclusive(self):
        assert days_worked("2024-01-01", "2024-01-10") == 10

    def test_same_day_counts_one(self):
        assert days_worked("2024-05-05", "2024-05-05") == 1

    def test_first_half_of_leap_year(self):
        # Jan 31 + Feb 29 + Mar 31 + Apr 30 + May 31 + Jun 30
        assert days_worked("2024-01-01", "2024-06-30") == 182

    def test_start_in_prior_year_clamps_to_jan_1(self):
        """Dec 1 of Y-1 through Jan 10 of Y counts only the 10 days of Y."""
        assert effective_start("2023-12-01", "2024-01-10") == date(2024, 1, 1)
        assert days_worked("2023-12-01", "2024-01-10") == 10

    def test_mid_year_start_is_not_clamped(self):
        assert effective_start("2024-03-01", "2024-04-01") == date(2024, 3, 1)

    def test_as_of_before_start_raises(self):
        with pytest.raises(InvalidRangeError):
            days_worked("2024-06-01", "2024-05-31")
