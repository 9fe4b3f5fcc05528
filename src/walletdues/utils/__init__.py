"""Utility functions for walletdues."""

from walletdues.utils.date_parser import parse_date
from walletdues.utils.amount_parser import parse_amount
from walletdues.utils.contact_resolver import resolve_contact

__all__ = ["parse_date", "parse_amount", "resolve_contact"]
