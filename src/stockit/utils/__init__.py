"""Utility functions for stockit."""

from stockit.utils.date_parser import parse_date
from stockit.utils.amount_parser import parse_amount

__all__ = ["parse_date", "parse_amount"]
