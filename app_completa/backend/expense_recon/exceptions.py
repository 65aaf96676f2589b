"""Exception types raised by the reconciliation engine."""


class ReconciliationError(Exception):
    """Base class for all reconciliation errors."""


class ContractViolationError(ReconciliationError, ValueError):
    """
    The caller broke the input contract (e.g. a missing receipts or
    transactions collection). Never retried; reported as-is.
    """


class ConfigurationError(ReconciliationError, ValueError):
    """Scoring settings are inconsistent (weights, thresholds, workers)."""
