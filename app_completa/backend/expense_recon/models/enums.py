"""Enumerations for the expense reconciliation system."""

from enum import Enum


class TransactionType(str, Enum):
    """Type of bank transaction."""
    DEBIT = "debit"        # Money out (purchase, payment made)
    CREDIT = "credit"      # Money in (refund, salary)


class MatchFactor(str, Enum):
    """
    Label for a sub-comparison that contributed meaningfully to a score.

    AMOUNT_EXACT: amounts equal within tolerance
    AMOUNT_CLOSE: amounts differ but similarity above the close threshold
    DATE_EXACT: same calendar day
    DATE_CLOSE: within the date window (1-3 days by default)
    MERCHANT_HIGH: merchant/description similarity above the high threshold
    MERCHANT_MEDIUM: merchant/description similarity above the medium threshold
    """
    AMOUNT_EXACT = "amount_exact"
    AMOUNT_CLOSE = "amount_close"
    DATE_EXACT = "date_exact"
    DATE_CLOSE = "date_close"
    MERCHANT_HIGH = "merchant_high"
    MERCHANT_MEDIUM = "merchant_medium"
