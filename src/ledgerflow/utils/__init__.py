"""Utility functions for ledgerflow."""

from ledgerflow.utils.date_parser import parse_date, parse_timestamp, format_display_date
from ledgerflow.utils.amount_parser import to_decimal

__all__ = [
    "parse_date",
    "parse_timestamp",
    "format_display_date",
    "to_decimal",
]
