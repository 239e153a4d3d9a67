from typing import Any

from fastapi import APIRouter, Body, Depends, Query, status

from finance_visualizer.core.config import settings
from finance_visualizer.db.mongodb import get_database
from finance_visualizer.db.transaction_store import TransactionStore
from finance_visualizer.services.transaction_service import TransactionService

router = APIRouter(prefix="/transactions", tags=["Transactions"])


async def get_transaction_service(db=Depends(get_database)) -> TransactionService:
    return TransactionService(TransactionStore(db[settings.MONGO_COLLECTION]))


@router.get("")
async def list_transactions(service: TransactionService = Depends(get_transaction_service)):
    transactions = await service.list_transactions()
    return {
        "transactions": [t.model_dump(mode="json") for t in transactions],
        "count": len(transactions),
    }


@router.get("/summary")
async def get_summary(
    top_n: int = Query(3, ge=0, le=10),
    recent_n: int = Query(3, ge=0, le=50),
    service: TransactionService = Depends(get_transaction_service),
):
    summary = await service.summary(top_n=top_n, recent_n=recent_n)
    return summary.model_dump(mode="json")


# Body is taken as raw JSON so every field error comes from the validator
@router.post("", status_code=status.HTTP_201_CREATED)
async def create_transaction(
    payload: Any = Body(...),
    service: TransactionService = Depends(get_transaction_service),
):
    transaction = await service.create_transaction(payload)
    return {"message": "Transaction added", "data": transaction.model_dump(mode="json")}


@router.put("/{transaction_id}")
async def update_transaction(
    transaction_id: str,
    payload: Any = Body(...),
    service: TransactionService = Depends(get_transaction_service),
):
    transaction = await service.update_transaction(transaction_id, payload)
    return {"message": "Transaction updated", "data": transaction.model_dump(mode="json")}


@router.delete("/{transaction_id}")
async def delete_transaction(
    transaction_id: str,
    service: TransactionService = Depends(get_transaction_service),
):
    return await service.delete_transaction(transaction_id)
