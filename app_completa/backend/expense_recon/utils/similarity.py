"""
Similarity primitives for receipt/transaction comparison.

Pure functions with no shared state: string edit-distance similarity,
calendar-day distance and tolerance-based amount comparison.
"""

from datetime import date
from typing import Optional

from rapidfuzz.distance import Levenshtein

from ..config import AMOUNT_TOLERANCE


def normalize_text(text: Optional[str]) -> str:
    """Lower-case and trim a free-text field."""
    if not text:
        return ""
    return text.lower().strip()


def string_similarity(a: Optional[str], b: Optional[str]) -> float:
    """
    Calculate fuzzy string similarity using Levenshtein distance.

    Comparison is case-insensitive and ignores leading/trailing whitespace.
    Identical strings score 1.0; a single empty string scores 0.0.

    Args:
        a: First string
        b: Second string

    Returns:
        Similarity score between 0 and 1
    """
    a = normalize_text(a)
    b = normalize_text(b)

    if a == b:
        return 1.0
    if not a or not b:
        return 0.0

    distance = Levenshtein.distance(a, b)
    return 1.0 - distance / max(len(a), len(b))


def date_delta_days(d1: date, d2: date) -> int:
    """Absolute difference between two calendar dates, in days."""
    return abs((d1 - d2).days)


def amounts_match(x: float, y: float, tolerance: float = AMOUNT_TOLERANCE) -> bool:
    """
    Check if amounts are equal within a relative tolerance.

    Direction of money flow is ignored: only magnitudes are compared.
    The relative difference is taken against the average magnitude.

    Args:
        x: First amount
        y: Second amount
        tolerance: Maximum relative difference (default 0.02 = 2%)

    Returns:
        True if amounts are similar
    """
    abs_x = abs(x)
    abs_y = abs(y)

    # Also covers 0 == 0, where the average would be zero
    if abs_x == abs_y:
        return True

    difference = abs(abs_x - abs_y)
    average = (abs_x + abs_y) / 2
    return difference / average <= tolerance


def amount_similarity(x: float, y: float) -> float:
    """Partial credit for close amounts: max(0, 1 - |diff| / avg)."""
    abs_x = abs(x)
    abs_y = abs(y)

    if abs_x == abs_y:
        return 1.0

    difference = abs(abs_x - abs_y)
    average = (abs_x + abs_y) / 2
    return max(0.0, 1.0 - difference / average)
