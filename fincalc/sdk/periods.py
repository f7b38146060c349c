"""Worked-day counting for year-to-date figures.

A YTD figure only covers the current calendar year, so a start date in a
prior year is clamped to January 1 of the as-of year before counting.
"""

from datetime import date, datetime
from typing import Union

from .errors import InvalidInputError, InvalidRangeError

DATE_FORMATS = ["%Y-%m-%d", "%m/%d/%Y", "%m-%d-%Y"]

DateLike = Union[date, datetime, str]


def parse_date(value: DateLike) -> date:
    """Parse a date, datetime or date string into a date.

    Accepts YYYY-MM-DD, MM/DD/YYYY and MM-DD-YYYY strings.

    Raises:
        InvalidInputError: If the value cannot be parsed
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not value:
        raise InvalidInputError("Date is required")

    for fmt in DATE_FORMATS:
        try:
            return datetime.strptime(value.strip(), fmt).date()
        except ValueError:
            continue
    raise InvalidInputError(
        f"Invalid date '{value}'. Expected YYYY-MM-DD, MM/DD/YYYY or MM-DD-YYYY."
    )


def effective_start(start_date: DateLike, as_of_date: DateLike) -> date:
    """Start date clamped to January 1 of the as-of year."""
    start = parse_date(start_date)
    as_of = parse_date(as_of_date)
    return max(start, date(as_of.year, 1, 1))


def days_worked(start_date: DateLike, as_of_date: DateLike) -> int:
    """Count worked days from the effective start through as_of_date, inclusive.

    Args:
        start_date: First day worked (may fall in a prior year)
        as_of_date: Date the YTD figure was reported

    Returns:
        Number of days, always >= 1

    Raises:
        InvalidRangeError: If as_of_date is before start_date

    Example:
        days_worked(date(2023, 12, 1), date(2024, 1, 10))  # -> 10
    """
    start = parse_date(start_date)
    as_of = parse_date(as_of_date)
    if as_of < start:
        raise InvalidRangeError(
            f"As-of date {as_of.isoformat()} is before start date {start.isoformat()}"
        )
    return (as_of - effective_start(start, as_of)).days + 1
