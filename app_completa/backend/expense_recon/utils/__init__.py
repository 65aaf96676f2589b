"""Utility modules."""

from .similarity import (
    amount_similarity,
    amounts_match,
    date_delta_days,
    normalize_text,
    string_similarity,
)
from .parsing import parse_amount, parse_iso_date, parse_text

__all__ = [
    "amount_similarity",
    "amounts_match",
    "date_delta_days",
    "normalize_text",
    "string_similarity",
    "parse_amount",
    "parse_iso_date",
    "parse_text",
]
