# finance_visualizer/services/transaction_service.py

from typing import Any, Dict, List

from finance_visualizer.core.aggregation import dashboard_summary
from finance_visualizer.core.exceptions import NotFound, ValidationError
from finance_visualizer.core.logging import get_logger
from finance_visualizer.core.transaction_validator import validate
from finance_visualizer.db.models.transaction_model import TransactionModel
from finance_visualizer.db.transaction_store import TransactionStore
from finance_visualizer.schemas.summary_schema import DashboardSummary
from finance_visualizer.schemas.transaction_schema import TRANSACTION_FIELDS

logger = get_logger(__name__)


class TransactionService:
    """
    API-facing operations on transactions.

    Payloads are validated before any write, so a rejected request leaves
    the collection untouched. Errors propagate as the typed exceptions in
    finance_visualizer.core.exceptions.
    """

    def __init__(self, store: TransactionStore):
        self.store = store

    async def list_transactions(self) -> List[TransactionModel]:
        return await self.store.list()

    async def create_transaction(self, payload: Any) -> TransactionModel:
        try:
            fields = validate(payload)
        except ValidationError as e:
            logger.warning("Rejected new transaction: %s", e.errors)
            raise
        transaction = await self.store.create(fields)
        logger.info(
            "Created transaction %s (%s, %.2f)", transaction.id, transaction.category, transaction.amount,
            extra={"extra": {"event": "transaction_created", "transaction_id": transaction.id}},
        )
        return transaction

    async def update_transaction(self, transaction_id: str, payload: Any) -> TransactionModel:
        """
        Apply a full or partial edit. Fields missing from the payload keep
        their stored values. The store validates the payload before writing.
        """
        try:
            transaction = await self.store.update(transaction_id, payload)
        except ValidationError as e:
            logger.warning("Rejected update of transaction %s: %s", transaction_id, e.errors)
            raise
        except NotFound:
            logger.warning("Update of missing transaction %s", transaction_id)
            raise
        fields = sorted(f for f in TRANSACTION_FIELDS if f in payload)
        logger.info(
            "Updated transaction %s (%s)", transaction_id, ", ".join(fields),
            extra={"extra": {"event": "transaction_updated", "transaction_id": transaction_id, "fields": fields}},
        )
        return transaction

    async def delete_transaction(self, transaction_id: str) -> Dict[str, str]:
        try:
            await self.store.delete(transaction_id)
        except NotFound:
            logger.warning("Delete of missing transaction %s", transaction_id)
            raise
        logger.info(
            "Deleted transaction %s", transaction_id,
            extra={"extra": {"event": "transaction_deleted", "transaction_id": transaction_id}},
        )
        return {"message": "Transaction deleted successfully"}

    async def summary(self, top_n: int = 3, recent_n: int = 3) -> DashboardSummary:
        transactions = await self.store.list()
        return dashboard_summary(transactions, top_n=top_n, recent_n=recent_n)
