"""Tests for date parser with relative dates."""

import pytest
from datetime import date, timedelta
from dateutil.relativedelta import relativedelta
from sitebook.utils.date_parser import parse_date, get_date_range


@pytest.mark.parametrize(
    "text, offset",
    [("today", 0), ("yesterday", -1), ("tomorrow", 1), ("  Today ", 0)],
)
def test_parse_relative_day(text, offset):
    assert parse_date(text) == date.today() + timedelta(days=offset)


def test_parse_iso_date():
    """ISO dates are never read day-first."""
    assert parse_date("2024-01-05") == date(2024, 1, 5)


def test_parse_day_first_formats():
    """Slash dates on site vouchers are day/month/year."""
    assert parse_date("05/01/2024") == date(2024, 1, 5)
    assert parse_date("15/01/2024") == date(2024, 1, 15)
    assert parse_date("15 Jan 2024") == date(2024, 1, 15)
    assert parse_date("January 15, 2024") == date(2024, 1, 15)


def test_parse_period_start():
    """'last/this <period>' gives the first day of that period."""
    today = date.today()
    assert parse_date("this month") == today.replace(day=1)
    assert parse_date("this year") == date(today.year, 1, 1)
    assert parse_date("last year") == date(today.year - 1, 1, 1)
    assert parse_date("last month") == (today - relativedelta(months=1)).replace(day=1)

    last_week = parse_date("last week")
    assert last_week == today - timedelta(days=today.weekday() + 7)
    assert last_week.weekday() == 0


@pytest.mark.parametrize("text", ["last invalid", "not a date", "32/13/2024"])
def test_parse_invalid(text):
    with pytest.raises(ValueError):
        parse_date(text)


def test_get_date_range_this_periods_end_today():
    today = date.today()
    for period in ("this-week", "this-month", "this-year"):
        start, end = get_date_range(period)
        assert end == today
        assert start <= today

    assert get_date_range("this-week")[0].weekday() == 0


def test_get_date_range_last_month():
    today = date.today()
    start, end = get_date_range("last-month")

    assert start == (today - relativedelta(months=1)).replace(day=1)
    assert end == today.replace(day=1) - timedelta(days=1)
    assert (start.year, start.month) == (end.year, end.month)


def test_get_date_range_last_year():
    today = date.today()
    start, end = get_date_range("last-year")

    assert start == date(today.year - 1, 1, 1)
    assert end == date(today.year - 1, 12, 31)


def test_get_date_range_last_week():
    start, end = get_date_range("last-week")

    assert start.weekday() == 0
    assert end.weekday() == 6
    assert (end - start).days == 6


def test_get_date_range_invalid_period():
    with pytest.raises(ValueError, match="Unknown period"):
        get_date_range("next-decade")
