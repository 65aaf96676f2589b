"""Reconciliation result models."""

from dataclasses import dataclass, field
from typing import Tuple, Dict, Any

from .enums import MatchFactor
from .transaction import Receipt, BankTransaction


@dataclass(frozen=True)
class MatchCandidate:
    """
    A scored (receipt, transaction) pair.
    Intermediate value produced by the scorer, never persisted.
    """
    receipt: Receipt
    transaction: BankTransaction
    confidence: float = 0.0
    factors: Tuple[MatchFactor, ...] = field(default_factory=tuple)

    # Per-component contributions (already weighted)
    amount_score: float = 0.0
    date_score: float = 0.0
    text_score: float = 0.0

    def to_match(self) -> "Match":
        return Match(
            receipt=self.receipt,
            transaction=self.transaction,
            confidence=self.confidence,
            factors=self.factors,
        )


@dataclass(frozen=True)
class Match:
    """A receipt paired with its best transaction."""
    receipt: Receipt
    transaction: BankTransaction
    confidence: float
    factors: Tuple[MatchFactor, ...] = field(default_factory=tuple)

    @property
    def receipt_id(self) -> str:
        return self.receipt.id

    @property
    def transaction_id(self) -> str:
        return self.transaction.id

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "receipt_id": self.receipt_id,
            "transaction_id": self.transaction_id,
            "confidence_score": self.confidence,
            "matching_factors": [factor.value for factor in self.factors],
            "receipt": self.receipt.to_dict(),
            "transaction": self.transaction.to_dict(),
        }


@dataclass(frozen=True)
class MatchSummary:
    """Summary statistics of a reconciliation run."""
    total_receipts: int = 0
    total_transactions: int = 0
    matched_count: int = 0
    unmatched_receipts: int = 0

    @property
    def match_rate(self) -> float:
        """Percentage of receipts matched."""
        if self.total_receipts == 0:
            return 0.0
        return (self.matched_count / self.total_receipts) * 100

    def to_dict(self) -> Dict[str, Any]:
        return {
            "total_receipts": self.total_receipts,
            "total_transactions": self.total_transactions,
            "matched_count": self.matched_count,
            "unmatched_receipts": self.unmatched_receipts,
        }


@dataclass(frozen=True)
class ReconciliationResult:
    """Complete result of a reconciliation run."""
    matches: Tuple[Match, ...] = field(default_factory=tuple)
    summary: MatchSummary = field(default_factory=MatchSummary)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "matches": [match.to_dict() for match in self.matches],
            "summary": self.summary.to_dict(),
        }
