"""Expense-to-transaction reconciliation engine."""

from .exceptions import ConfigurationError, ContractViolationError, ReconciliationError
from .reconciliation import ReconciliationEngine, reconcile

__all__ = [
    "ConfigurationError",
    "ContractViolationError",
    "ReconciliationError",
    "ReconciliationEngine",
    "reconcile",
]
