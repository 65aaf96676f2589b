"""
Reconciliation Engine - pairs receipts with bank transactions.

Pipeline:
1. Input contract check (both collections present)
2. Record normalisation (caller dicts -> immutable models)
3. Pairwise scoring + greedy per-receipt assignment
4. Result assembly (sorted matches + summary)

A run is a pure function of its inputs and settings: no I/O and no shared
mutable state, so concurrent runs never interfere.
"""

from collections.abc import Mapping
from typing import Any, Iterable, List, Optional, Union
import time

import structlog

from ..config import Settings, get_settings
from ..exceptions import ContractViolationError
from ..models import BankTransaction, Receipt, ReconciliationResult
from .assignment import GreedyAssignmentPolicy
from .summary import build_result

logger = structlog.get_logger()

ReceiptInput = Union[Receipt, Mapping]
TransactionInput = Union[BankTransaction, Mapping]


class ReconciliationEngine:
    """
    Main entry point for matching receipts to transactions.

    Each run takes its two input lists explicitly and returns a fresh
    ReconciliationResult; the engine itself holds only settings.
    """

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or get_settings()
        self.policy = GreedyAssignmentPolicy(self.settings)

    def run(
        self,
        receipts: Optional[Iterable[ReceiptInput]],
        transactions: Optional[Iterable[TransactionInput]],
        user_id: Optional[str] = None,
    ) -> ReconciliationResult:
        """
        Execute reconciliation.

        Args:
            receipts: Receipts (models or raw records), never None
            transactions: Bank transactions (models or raw records), never None
            user_id: Optional caller identity, used for logging only

        Returns:
            ReconciliationResult with matches sorted by descending confidence

        Raises:
            ContractViolationError: if either collection is missing
        """
        receipt_list = _coerce_records(receipts, Receipt, "receipts")
        transaction_list = _coerce_records(transactions, BankTransaction, "transactions")

        log = logger.bind(user_id=user_id) if user_id else logger
        log.info(
            "Starting reconciliation",
            receipts=len(receipt_list),
            transactions=len(transaction_list),
        )
        start_time = time.perf_counter()

        matches = self.policy.assign(receipt_list, transaction_list)
        result = build_result(matches, len(receipt_list), len(transaction_list))

        log.info(
            "Reconciliation complete",
            matched=result.summary.matched_count,
            unmatched_receipts=result.summary.unmatched_receipts,
            elapsed_ms=round((time.perf_counter() - start_time) * 1000, 2),
        )
        return result


def reconcile(
    receipts: Optional[Iterable[ReceiptInput]],
    transactions: Optional[Iterable[TransactionInput]],
    settings: Optional[Settings] = None,
) -> ReconciliationResult:
    """Convenience wrapper: one-off run with explicit settings."""
    return ReconciliationEngine(settings).run(receipts, transactions)


def _coerce_records(records: Any, model: type, name: str) -> List[Any]:
    """Validate that a collection is present and convert raw records."""
    if records is None:
        raise ContractViolationError(f"{name} data required")
    if isinstance(records, (str, bytes, Mapping)):
        raise ContractViolationError(
            f"{name} must be a list of records, got {type(records).__name__}"
        )

    try:
        items = list(records)
    except TypeError:
        raise ContractViolationError(
            f"{name} must be a list of records, got {type(records).__name__}"
        ) from None

    coerced = []
    for index, item in enumerate(items):
        if isinstance(item, model):
            coerced.append(item)
        elif isinstance(item, Mapping):
            coerced.append(model.from_dict(item))
        else:
            raise ContractViolationError(
                f"{name}[{index}] must be a record, got {type(item).__name__}"
            )
    return coerced
