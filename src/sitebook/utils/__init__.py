"""Utility functions for sitebook."""

from sitebook.utils.date_parser import parse_date
from sitebook.utils.amount_parser import parse_amount
from sitebook.utils.formatting import format_currency, format_date

__all__ = ["parse_date", "parse_amount", "format_currency", "format_date"]
