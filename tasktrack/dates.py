"""Calendar helpers for dates written as YYYY-MM-DD strings."""

from __future__ import annotations

import re
from datetime import date

MIN_YEAR = 1900
MAX_YEAR = 2100

_DATE_RE = re.compile(r"([0-9]{4})-([0-9]{2})-([0-9]{2})")

_LONG_MONTHS = frozenset({1, 3, 5, 7, 8, 10, 12})
_SHORT_MONTHS = frozenset({4, 6, 9, 11})


def parse_date(date_str: str) -> tuple[int, int, int]:
    """Split a YYYY-MM-DD string into (year, month, day).

    Only the shape is checked; raises ValueError when it does not match.
    """
    match = _DATE_RE.fullmatch(date_str)
    if match is None:
        raise ValueError(f"not a YYYY-MM-DD date: {date_str!r}")
    year, month, day = (int(group) for group in match.groups())
    return year, month, day


def is_leap_year(year: int) -> bool:
    """Return True for Gregorian leap years."""
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def days_in_month(month: int, year: int) -> int:
    """Number of days in the month, or 0 for a month outside 1..12."""
    if month in _LONG_MONTHS:
        return 31
    if month in _SHORT_MONTHS:
        return 30
    if month == 2:
        return 29 if is_leap_year(year) else 28
    return 0


def is_valid_date(date_str: str) -> bool:
    """Return True for a well-formed date between 1900 and 2100."""
    try:
        year, month, day = parse_date(date_str)
    except ValueError:
        return False
    if not MIN_YEAR <= year <= MAX_YEAR:
        return False
    if not 1 <= month <= 12:
        return False
    if day < 1:
        return False
    return day <= days_in_month(month, year)


def current_date() -> str:
    """Today's local date as YYYY-MM-DD."""
    return date.today().strftime("%Y-%m-%d")


def format_date(date_str: str) -> str:
    """Render a date in ISO form; text that is not a date comes back unchanged."""
    try:
        year, month, day = parse_date(date_str)
    except ValueError:
        return date_str
    return f"{year:04d}-{month:02d}-{day:02d}"


def _day_number(year: int, month: int, day: int) -> int:
    # A coarse day count: every year has 365 days and every month 30.
    return year * 365 + month * 30 + day


def days_between(date1: str, date2: str) -> int:
    """Approximate number of days from date1 to date2; 0 if either is malformed."""
    try:
        first = parse_date(date1)
        second = parse_date(date2)
    except ValueError:
        return 0
    return _day_number(*second) - _day_number(*first)


def is_date_before(date1: str, date2: str) -> bool:
    """Return True when date1 comes before date2."""
    return days_between(date1, date2) > 0


def is_date_equal(date1: str, date2: str) -> bool:
    """Return True when both strings name the same date."""
    return date1 == date2


def is_date_in_range(date_str: str, start_date: str, end_date: str) -> bool:
    """Return True when start_date <= date_str <= end_date."""
    after_start = is_date_equal(date_str, start_date) or is_date_before(start_date, date_str)
    before_end = is_date_equal(date_str, end_date) or is_date_before(date_str, end_date)
    return after_start and before_end


def add_days(date_str: str, days: int) -> str:
    """Shift a date by a number of days; a malformed date comes back unchanged."""
    try:
        year, month, day = parse_date(date_str)
    except ValueError:
        return date_str

    day += days

    while day > days_in_month(month, year):
        day -= days_in_month(month, year)
        month += 1
        if month > 12:
            month = 1
            year += 1

    while day < 1:
        month -= 1
        if month < 1:
            month = 12
            year -= 1
        day += days_in_month(month, year)

    return f"{year:04d}-{month:02d}-{day:02d}"