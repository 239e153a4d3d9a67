# finance_visualizer/db/transaction_store.py
from contextlib import contextmanager
from typing import Any, List, Mapping, Union

from bson import ObjectId
from bson.errors import InvalidId
from pymongo import DESCENDING, ReturnDocument
from pymongo.errors import PyMongoError

from finance_visualizer.core.exceptions import NotFound, StorageUnavailable
from finance_visualizer.core.logging import get_logger
from finance_visualizer.core.transaction_validator import validate, validate_partial
from finance_visualizer.db.models.transaction_model import TransactionModel, to_document_fields
from finance_visualizer.schemas.transaction_schema import TransactionCreate

logger = get_logger(__name__)


@contextmanager
def storage_errors(operation: str):
    """Re-raise driver failures as StorageUnavailable."""
    try:
        yield
    except PyMongoError as e:
        logger.error("MongoDB %s failed: %s", operation, e)
        raise StorageUnavailable(f"Database unavailable during {operation}") from e


def to_object_id(transaction_id: str) -> ObjectId:
    # A malformed id cannot match any document
    try:
        return ObjectId(transaction_id)
    except (InvalidId, TypeError):
        raise NotFound(transaction_id)


class TransactionStore:
    def __init__(self, collection):
        """
        collection is a Motor collection object (async)
        e.g. collection = (await get_database())["transactions"]
        """
        self.collection = collection

    # all transactions, newest date first
    async def list(self) -> List[TransactionModel]:
        with storage_errors("list"):
            cursor = self.collection.find({}).sort([("date", DESCENDING), ("_id", DESCENDING)])
            docs = await cursor.to_list(length=None)
        return [TransactionModel.from_document(doc) for doc in docs]

    async def get(self, transaction_id: str) -> TransactionModel:
        oid = to_object_id(transaction_id)
        with storage_errors("get"):
            doc = await self.collection.find_one({"_id": oid})
        if doc is None:
            raise NotFound(transaction_id)
        return TransactionModel.from_document(doc)

    async def create(self, fields: Union[TransactionCreate, Mapping[str, Any]]) -> TransactionModel:
        if not isinstance(fields, TransactionCreate):
            fields = validate(fields)
        doc = to_document_fields(fields.model_dump())
        with storage_errors("create"):
            result = await self.collection.insert_one(doc)
        doc["_id"] = result.inserted_id
        return TransactionModel.from_document(doc)

    # $set only the given fields; never upserts
    async def update(self, transaction_id: str, fields: Mapping[str, Any]) -> TransactionModel:
        oid = to_object_id(transaction_id)
        changes = validate_partial(fields)
        with storage_errors("update"):
            doc = await self.collection.find_one_and_update(
                {"_id": oid},
                {"$set": to_document_fields(changes)},
                return_document=ReturnDocument.AFTER,
            )
        if doc is None:
            raise NotFound(transaction_id)
        return TransactionModel.from_document(doc)

    async def delete(self, transaction_id: str) -> bool:
        oid = to_object_id(transaction_id)
        with storage_errors("delete"):
            result = await self.collection.delete_one({"_id": oid})
        if result.deleted_count == 0:
            raise NotFound(transaction_id)
        return True

    # create helpful indexes (run at startup)
    async def ensure_indexes(self):
        with storage_errors("ensure_indexes"):
            await self.collection.create_index([("date", DESCENDING)])
