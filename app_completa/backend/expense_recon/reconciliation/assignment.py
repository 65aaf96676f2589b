"""
Assignment policy - picks at most one transaction per receipt.

Greedy and receipt-local: each receipt independently keeps its single
best-scoring transaction above the minimum confidence. The same
transaction may therefore be selected for more than one receipt.
"""

from concurrent.futures import ThreadPoolExecutor
from typing import Iterable, List, Optional, Sequence

import structlog

from ..config import Settings, get_settings
from ..models import BankTransaction, Match, MatchCandidate, Receipt
from .scorer import PairwiseScorer

logger = structlog.get_logger()


def select_best_candidate(
    candidates: Iterable[MatchCandidate],
    min_confidence: float,
) -> Optional[MatchCandidate]:
    """
    Return the candidate with the strictly highest confidence, provided it
    strictly exceeds min_confidence.

    Ties keep the first candidate seen, so input order decides between
    equally good transactions.
    """
    best: Optional[MatchCandidate] = None
    best_score = 0.0

    for candidate in candidates:
        if candidate.confidence > best_score and candidate.confidence > min_confidence:
            best = candidate
            best_score = candidate.confidence

    return best


class GreedyAssignmentPolicy:
    """
    Per-receipt best-match selection.

    With settings.max_workers > 1 receipts are scored on a thread pool;
    ThreadPoolExecutor.map yields results in submission order, so the
    output is identical to the sequential run.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        scorer: Optional[PairwiseScorer] = None,
    ):
        self.settings = settings or get_settings()
        self.scorer = scorer or PairwiseScorer(self.settings)

    def match_receipt(
        self,
        receipt: Receipt,
        transactions: Sequence[BankTransaction],
    ) -> Optional[Match]:
        """
        Find the best transaction for a single receipt.

        Args:
            receipt: Receipt to match
            transactions: All candidate transactions, in input order

        Returns:
            Match, or None if no transaction clears the threshold
        """
        best = select_best_candidate(
            (self.scorer.score(receipt, txn) for txn in transactions),
            self.settings.min_confidence,
        )

        if best is None:
            logger.debug("No transaction above threshold", receipt_id=receipt.id)
            return None

        logger.debug(
            "Selected transaction for receipt",
            receipt_id=receipt.id,
            transaction_id=best.transaction.id,
            confidence=round(best.confidence, 4),
            factors=[factor.value for factor in best.factors],
        )
        return best.to_match()

    def assign(
        self,
        receipts: Sequence[Receipt],
        transactions: Sequence[BankTransaction],
    ) -> List[Match]:
        """
        Match every receipt, returning matches in receipt order.

        Receipts without a transaction above the threshold are omitted.
        """
        if not receipts or not transactions:
            return []

        workers = min(self.settings.max_workers, len(receipts))
        if workers <= 1:
            results = [self.match_receipt(receipt, transactions) for receipt in receipts]
        else:
            with ThreadPoolExecutor(max_workers=workers) as executor:
                results = list(executor.map(
                    lambda receipt: self.match_receipt(receipt, transactions),
                    receipts,
                ))

        return [match for match in results if match is not None]
