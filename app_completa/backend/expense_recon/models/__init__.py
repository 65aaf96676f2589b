"""Data models for the expense reconciliation system."""

from .enums import (
    MatchFactor,
    TransactionType,
)
from .transaction import (
    Receipt,
    BankTransaction,
)
from .reconciliation import (
    MatchCandidate,
    Match,
    MatchSummary,
    ReconciliationResult,
)

__all__ = [
    # Enums
    "MatchFactor",
    "TransactionType",
    # Records
    "Receipt",
    "BankTransaction",
    # Reconciliation
    "MatchCandidate",
    "Match",
    "MatchSummary",
    "ReconciliationResult",
]
