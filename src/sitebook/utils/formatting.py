"""Display formatting helpers."""

from datetime import date
from decimal import Decimal, ROUND_HALF_UP
from typing import Optional

CURRENCY_SYMBOL = "₹"


def format_currency(amount: Decimal) -> str:
    """Format an amount as rupees with thousands separators.

    >>> format_currency(Decimal("-1234.5"))
    '-₹1,234.50'
    """
    rounded = Decimal(amount).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    sign = "-" if rounded < 0 else ""
    return f"{sign}{CURRENCY_SYMBOL}{abs(rounded):,.2f}"


def format_date(value: Optional[date]) -> str:
    """Format a date as 'Jan 05, 2024', or '-' when missing."""
    if value is None:
        return "-"
    return value.strftime("%b %d, %Y")
