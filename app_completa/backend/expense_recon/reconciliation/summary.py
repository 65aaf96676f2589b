"""Result assembly: match ordering and summary statistics."""

from typing import List, Sequence

from ..models import Match, MatchSummary, ReconciliationResult


def sort_matches(matches: Sequence[Match]) -> List[Match]:
    """
    Sort matches by descending confidence.

    sorted() is stable, so equal confidences keep receipt order.
    """
    return sorted(matches, key=lambda match: match.confidence, reverse=True)


def compute_summary(
    matches: Sequence[Match],
    total_receipts: int,
    total_transactions: int,
) -> MatchSummary:
    """Compute summary statistics."""
    matched_count = len(matches)
    return MatchSummary(
        total_receipts=total_receipts,
        total_transactions=total_transactions,
        matched_count=matched_count,
        unmatched_receipts=total_receipts - matched_count,
    )


def build_result(
    matches: Sequence[Match],
    total_receipts: int,
    total_transactions: int,
) -> ReconciliationResult:
    return ReconciliationResult(
        matches=tuple(sort_matches(matches)),
        summary=compute_summary(matches, total_receipts, total_transactions),
    )
