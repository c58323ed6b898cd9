"""Tests for amount parsing and display formatting."""

import pytest
from datetime import date
from decimal import Decimal

from sitebook.utils import format_currency, format_date, parse_amount


@pytest.mark.parametrize(
    "text, expected",
    [
        ("1234.50", Decimal("1234.50")),
        ("₹1,234.50", Decimal("1234.50")),
        ("Rs. 1,23,456", Decimal("123456")),
        ("rs 500", Decimal("500")),
        ("INR 75", Decimal("75")),
        ("$20", Decimal("20")),
        ("-₹50", Decimal("-50")),
        ("  0.1 ", Decimal("0.1")),
    ],
)
def test_parse_amount(text, expected):
    assert parse_amount(text) == expected


@pytest.mark.parametrize("text", ["", "   ", "fifty", "1.2.3", "NaN", "Infinity"])
def test_parse_amount_invalid(text):
    with pytest.raises(ValueError):
        parse_amount(text)


@pytest.mark.parametrize(
    "amount, expected",
    [
        (Decimal("0"), "₹0.00"),
        (Decimal("1234.5"), "₹1,234.50"),
        (Decimal("1234567.891"), "₹1,234,567.89"),
        (Decimal("-250"), "-₹250.00"),
        (Decimal("0.005"), "₹0.01"),
    ],
)
def test_format_currency(amount, expected):
    assert format_currency(amount) == expected


def test_format_date():
    assert format_date(date(2024, 1, 5)) == "Jan 05, 2024"
    assert format_date(None) == "-"
