"""Reconciliation engine components."""

from .scorer import PairwiseScorer
from .assignment import GreedyAssignmentPolicy, select_best_candidate
from .summary import build_result, compute_summary, sort_matches
from .engine import ReconciliationEngine, reconcile

__all__ = [
    "PairwiseScorer",
    "GreedyAssignmentPolicy",
    "select_best_candidate",
    "build_result",
    "compute_summary",
    "sort_matches",
    "ReconciliationEngine",
    "reconcile",
]
