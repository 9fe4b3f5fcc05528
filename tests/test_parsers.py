"""Tests for amount and date parsing."""

import pytest
from datetime import date, timedelta

from walletdues.utils.amount_parser import parse_amount
from walletdues.utils.date_parser import parse_date


@pytest.mark.parametrize(
    "text,expected",
    [
        ("40", 40.0),
        ("12.50", 12.5),
        ("$123.45", 123.45),
        ("1,234.56", 1234.56),
        (" $1,200.00 ", 1200.0),
        ("0", 0.0),
    ],
)
def test_parse_amount(text, expected):
    assert parse_amount(text) == expected


@pytest.mark.parametrize("text", ["", "   ", "abc", "12..5", "nan", "inf"])
def test_parse_amount_invalid(text):
    with pytest.raises(ValueError):
        parse_amount(text)


def test_parse_amount_negative_rejected():
    with pytest.raises(ValueError, match="negative"):
        parse_amount("-5")


def test_parse_absolute_date():
    """Test parsing absolute dates."""
    assert parse_date("2024-01-15") == date(2024, 1, 15)
    assert parse_date("January 15, 2024") == date(2024, 1, 15)


def test_parse_relative_dates():
    """Test parsing relative words against a reference day."""
    today = date(2024, 3, 1)
    assert parse_date("today", today=today) == today
    assert parse_date("Yesterday", today=today) == date(2024, 2, 29)
    assert parse_date("tomorrow", today=today) == date(2024, 3, 2)


def test_parse_today_default():
    """Test parsing 'today' without a reference day."""
    assert parse_date("today") == date.today()
    assert parse_date("yesterday") == date.today() - timedelta(days=1)


def test_parse_invalid_date():
    """Test parsing an invalid date."""
    with pytest.raises(ValueError):
        parse_date("not a date")
