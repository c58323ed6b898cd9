"""Date parsing utilities."""

from datetime import date, timedelta
from dateutil import parser as date_parser
from dateutil.relativedelta import relativedelta

PERIODS = ("this-week", "this-month", "this-year", "last-week", "last-month", "last-year")


def parse_date(date_str: str) -> date:
    """Parse a date string into a date object.

    Supports absolute dates ("2024-01-15", "15 Jan 2024") and relative ones:
    "today", "yesterday", "tomorrow", and "last/this month", "last/this year",
    "last/this week" (first day of that period).

    Args:
        date_str: Date string

    Returns:
        Date object

    Raises:
        ValueError: If date string cannot be parsed
    """
    date_str = date_str.strip().lower()
    today = date.today()

    relative_dates = {
        "today": today,
        "yesterday": today - timedelta(days=1),
        "tomorrow": today + timedelta(days=1),
    }
    if date_str in relative_dates:
        return relative_dates[date_str]

    if date_str.startswith(("last ", "this ")):
        start, _ = get_date_range(date_str.replace(" ", "-", 1))
        return start

    try:
        return date.fromisoformat(date_str)
    except ValueError:
        pass

    try:
        # Site paperwork is written day-first (15/01/2024)
        return date_parser.parse(date_str, dayfirst=True).date()
    except (ValueError, OverflowError) as e:
        raise ValueError(f"Could not parse date '{date_str}': {e}")


def get_date_range(period: str) -> tuple[date, date]:
    """Get start and end dates for a named period.

    Args:
        period: One of this-week, this-month, this-year, last-week,
            last-month, last-year. "this" periods end today.

    Returns:
        Tuple of (start_date, end_date)

    Raises:
        ValueError: If period string is not recognized
    """
    period = period.strip().lower()
    today = date.today()
    week_start = today - timedelta(days=today.weekday())
    month_start = today.replace(day=1)
    year_start = today.replace(month=1, day=1)

    ranges = {
        "this-week": (week_start, today),
        "this-month": (month_start, today),
        "this-year": (year_start, today),
        "last-week": (week_start - timedelta(days=7), week_start - timedelta(days=1)),
        "last-month": (month_start - relativedelta(months=1), month_start - timedelta(days=1)),
        "last-year": (year_start - relativedelta(years=1), year_start - timedelta(days=1)),
    }
    if period not in ranges:
        raise ValueError(f"Unknown period: '{period}'. Supported periods: {', '.join(PERIODS)}")
    return ranges[period]
