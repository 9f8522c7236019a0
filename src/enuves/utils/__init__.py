"""Utility functions for enuves."""

from enuves.utils.date_parser import parse_date, parse_statement_date
from enuves.utils.amount_parser import parse_amount, format_brl

__all__ = ["parse_date", "parse_statement_date", "parse_amount", "format_brl"]
