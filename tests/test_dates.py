import re

import pytest

from tasktrack.dates import (
    add_days,
    current_date,
    days_between,
    days_in_month,
    format_date,
    is_date_before,
    is_date_equal,
    is_date_in_range,
    is_leap_year,
    is_valid_date,
    parse_date,
)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("2025-06-15", True),
        ("2024-02-29", True),
        ("2025-12-31", True),
        ("2025-13-01", False),
        ("2025-06-32", False),
        ("2025-02-29", False),
        ("25-06-15", False),
        ("invalid", False),
        ("1899-12-31", False),
        ("2101-01-01", False),
        ("2025-00-10", False),
        ("2025-06-00", False),
        ("", False),
    ],
)
def test_is_valid_date(text, expected):
    assert is_valid_date(text) is expected


def test_date_comparisons():
    assert is_date_before("2025-06-01", "2025-06-02") is True
    assert is_date_before("2025-06-02", "2025-06-01") is False
    assert is_date_equal("2025-06-15", "2025-06-15") is True
    assert is_date_equal("2025-06-15", "2025-06-16") is False


@pytest.mark.parametrize(
    "year, expected",
    [(2024, True), (2025, False), (2000, True), (1900, False)],
)
def test_is_leap_year(year, expected):
    assert is_leap_year(year) is expected


@pytest.mark.parametrize(
    "month, year, expected",
    [
        (1, 2025, 31),
        (2, 2024, 29),
        (2, 2025, 28),
        (4, 2025, 30),
        (12, 2025, 31),
        (13, 2025, 0),
        (0, 2025, 0),
    ],
)
def test_days_in_month(month, year, expected):
    assert days_in_month(month, year) == expected


def test_parse_date_splits_fields():
    assert parse_date("2025-06-15") == (2025, 6, 15)


def test_parse_date_accepts_out_of_range_values():
    assert parse_date("2025-13-40") == (2025, 13, 40)


@pytest.mark.parametrize("text", ["invalid", "2025-6-15", "2025-06-15x", "x2025-06-15"])
def test_parse_date_rejects_bad_shape(text):
    with pytest.raises(ValueError):
        parse_date(text)


def test_days_between():
    assert days_between("2025-06-01", "2025-06-02") == 1
    assert days_between("2025-06-02", "2025-06-01") == -1
    assert days_between("2025-06-01", "2025-06-01") == 0


def test_days_between_malformed_is_zero():
    assert days_between("bad", "2025-06-01") == 0
    assert days_between("2025-06-01", "bad") == 0


def test_is_date_in_range():
    assert is_date_in_range("2025-06-10", "2025-06-01", "2025-06-30") is True
    assert is_date_in_range("2025-06-01", "2025-06-01", "2025-06-30") is True
    assert is_date_in_range("2025-06-30", "2025-06-01", "2025-06-30") is True
    assert is_date_in_range("2025-07-01", "2025-06-01", "2025-06-30") is False
    assert is_date_in_range("2025-05-31", "2025-06-01", "2025-06-30") is False


@pytest.mark.parametrize(
    "start, days, expected",
    [
        ("2025-01-31", 1, "2025-02-01"),
        ("2025-03-01", -1, "2025-02-28"),
        ("2024-03-01", -1, "2024-02-29"),
        ("2024-12-31", 1, "2025-01-01"),
        ("2025-01-01", -1, "2024-12-31"),
        ("2025-06-15", 0, "2025-06-15"),
        ("2025-06-15", 30, "2025-07-15"),
    ],
)
def test_add_days(start, days, expected):
    assert add_days(start, days) == expected


def test_add_days_malformed_returns_input():
    assert add_days("not a date", 5) == "not a date"


def test_current_date_is_iso_and_valid():
    today = current_date()
    assert re.fullmatch(r"\d{4}-\d{2}-\d{2}", today)
    assert is_valid_date(today) is True


def test_format_date_is_identity():
    assert format_date("2025-06-15") == "2025-06-15"