"""
Pairwise scorer - weighted multi-factor confidence for a single pair.

Combines three independent sub-scores:
- Amount (40%): tolerance match, partial credit for close amounts
- Date (30%): full credit on the same day, linear decay within the window
- Text (30%): merchant vs. description edit-distance similarity
"""

from typing import List, Optional

from ..config import Settings, get_settings
from ..models import BankTransaction, MatchCandidate, MatchFactor, Receipt
from ..utils.similarity import (
    amount_similarity,
    amounts_match,
    date_delta_days,
    string_similarity,
)


class PairwiseScorer:
    """
    Scores (receipt, transaction) pairs.

    Stateless apart from the read-only settings it is built with, so a
    single instance can be shared between threads.
    """

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or get_settings()

    def score(self, receipt: Receipt, transaction: BankTransaction) -> MatchCandidate:
        """
        Score a single receipt against a single transaction.

        Args:
            receipt: Receipt extracted from an image/PDF
            transaction: Transaction imported from a bank statement

        Returns:
            MatchCandidate with confidence in [0, 1] and contributing factors
        """
        factors: List[MatchFactor] = []

        amount_score = self._score_amount(receipt, transaction, factors)
        date_score = self._score_date(receipt, transaction, factors)
        text_score = self._score_text(receipt, transaction, factors)

        return MatchCandidate(
            receipt=receipt,
            transaction=transaction,
            confidence=min(1.0, amount_score + date_score + text_score),
            factors=tuple(factors),
            amount_score=amount_score,
            date_score=date_score,
            text_score=text_score,
        )

    def _score_amount(
        self,
        receipt: Receipt,
        transaction: BankTransaction,
        factors: List[MatchFactor],
    ) -> float:
        if receipt.amount is None or transaction.amount is None:
            return 0.0

        weight = self.settings.amount_weight
        receipt_amount = receipt.abs_amount
        transaction_amount = transaction.abs_amount

        if amounts_match(receipt_amount, transaction_amount, self.settings.amount_tolerance):
            factors.append(MatchFactor.AMOUNT_EXACT)
            return weight

        similarity = amount_similarity(receipt_amount, transaction_amount)
        if similarity > self.settings.amount_close_threshold:
            factors.append(MatchFactor.AMOUNT_CLOSE)
        return weight * similarity

    def _score_date(
        self,
        receipt: Receipt,
        transaction: BankTransaction,
        factors: List[MatchFactor],
    ) -> float:
        if receipt.receipt_date is None or transaction.transaction_date is None:
            return 0.0

        weight = self.settings.date_weight
        window = self.settings.date_window_days
        days_apart = date_delta_days(receipt.receipt_date, transaction.transaction_date)

        if days_apart == 0:
            factors.append(MatchFactor.DATE_EXACT)
            return weight
        if days_apart <= window:
            factors.append(MatchFactor.DATE_CLOSE)
            return weight * (1 - days_apart / window)
        return 0.0

    def _score_text(
        self,
        receipt: Receipt,
        transaction: BankTransaction,
        factors: List[MatchFactor],
    ) -> float:
        similarity = string_similarity(receipt.merchant, transaction.description)

        if similarity > self.settings.merchant_high_threshold:
            factors.append(MatchFactor.MERCHANT_HIGH)
        elif similarity > self.settings.merchant_medium_threshold:
            factors.append(MatchFactor.MERCHANT_MEDIUM)

        return self.settings.text_weight * similarity
