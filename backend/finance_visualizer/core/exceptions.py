# finance_visualizer/core/exceptions.py
"""
Error taxonomy shared by the store, the service and the HTTP layer.

Each class maps to one distinguishable outcome for API callers:
invalid input (422), missing transaction (404), database down (503).
"""

from typing import Dict


class FinanceTrackerError(Exception):
    """Base exception for all finance tracker errors."""


class ValidationError(FinanceTrackerError):
    """One or more fields of a transaction payload are invalid."""

    def __init__(self, errors: Dict[str, str]):
        self.errors = dict(errors)
        fields = ", ".join(sorted(self.errors))
        super().__init__(f"Invalid transaction fields: {fields}")


class NotFound(FinanceTrackerError):
    """No transaction exists with the requested id."""

    def __init__(self, transaction_id: str):
        self.transaction_id = transaction_id
        super().__init__(f"Transaction {transaction_id} not found")


class StorageUnavailable(FinanceTrackerError):
    """The database could not be reached or rejected the operation."""
