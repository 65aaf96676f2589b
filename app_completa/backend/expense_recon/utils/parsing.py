"""
Lenient field parsing for caller-supplied records.

Malformed values are degraded data, not errors: every parser returns None
instead of raising so the scorer can fall back to its neutral defaults.
"""

from datetime import date, datetime
from typing import Any, Optional
import re

import structlog

logger = structlog.get_logger()

# Commas only as thousands separators: "15,000" or "1,250,000.50"
THOUSANDS_PATTERN = re.compile(r"^[-+]?\d{1,3}(,\d{3})+(\.\d+)?$")


def parse_iso_date(value: Any) -> Optional[date]:
    """
    Parse a calendar date from a date, datetime or ISO-8601 string.

    Datetimes (and strings carrying a time component) keep only their
    date part.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        logger.debug("Unsupported date value", value=repr(value))
        return None

    text = value.strip()
    if not text:
        return None

    try:
        return date.fromisoformat(text[:10])
    except ValueError:
        logger.debug("Unparseable date", value=text)
        return None


def parse_amount(value: Any) -> Optional[float]:
    """Parse a monetary amount from a number or numeric string."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        amount = float(value)
    elif isinstance(value, str):
        text = value.strip()
        if "," in text:
            if not THOUSANDS_PATTERN.match(text):
                logger.debug("Ambiguous amount separator", value=value)
                return None
            text = text.replace(",", "")
        try:
            amount = float(text)
        except ValueError:
            logger.debug("Unparseable amount", value=value)
            return None
    else:
        logger.debug("Unsupported amount value", value=repr(value))
        return None

    # NaN/inf carry no usable magnitude
    if amount != amount or amount in (float("inf"), float("-inf")):
        return None
    return amount


def parse_text(value: Any) -> str:
    """Coerce an optional free-text field to a string."""
    if value is None:
        return ""
    return str(value)
