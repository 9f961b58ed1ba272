"""Utility functions for cashbook."""

from cashbook.utils.date_parser import parse_date
from cashbook.utils.amount_parser import parse_amount

__all__ = ["parse_date", "parse_amount"]
