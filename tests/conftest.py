"""
Shared fixtures: an in-memory stand-in for the Motor collection API.

Only the calls made by TransactionStore are implemented, with the same
async signatures and result objects.
"""
import copy
from types import SimpleNamespace

import pytest
from bson import ObjectId
from pymongo.errors import ServerSelectionTimeoutError

from finance_visualizer.db.transaction_store import TransactionStore
from finance_visualizer.services.transaction_service import TransactionService


def _matches(doc: dict, query: dict) -> bool:
    return all(doc.get(key) == value for key, value in query.items())


class FakeCursor:
    def __init__(self, docs):
        self.docs = docs

    def sort(self, keys, direction=None):
        if isinstance(keys, str):
            keys = [(keys, direction if direction is not None else 1)]
        # apply least significant key first; list.sort is stable
        for key, key_direction in reversed(keys):
            self.docs.sort(key=lambda d: d[key], reverse=key_direction < 0)
        return self

    async def to_list(self, length=None):
        docs = self.docs if length is None else self.docs[:length]
        return [copy.deepcopy(d) for d in docs]


class FakeCollection:
    def __init__(self):
        self.docs = []
        self.indexes = []

    def find(self, query=None):
        return FakeCursor([d for d in self.docs if _matches(d, query or {})])

    async def find_one(self, query):
        for doc in self.docs:
            if _matches(doc, query):
                return copy.deepcopy(doc)
        return None

    async def insert_one(self, doc):
        doc.setdefault("_id", ObjectId())
        self.docs.append(copy.deepcopy(doc))
        return SimpleNamespace(inserted_id=doc["_id"])

    async def find_one_and_update(self, query, update, return_document=None, upsert=False):
        for doc in self.docs:
            if _matches(doc, query):
                doc.update(copy.deepcopy(update["$set"]))
                return copy.deepcopy(doc)
        return None

    async def delete_one(self, query):
        for i, doc in enumerate(self.docs):
            if _matches(doc, query):
                del self.docs[i]
                return SimpleNamespace(deleted_count=1)
        return SimpleNamespace(deleted_count=0)

    async def create_index(self, keys):
        self.indexes.append(keys)
        return "_".join(f"{k}_{d}" for k, d in keys)


class UnreachableCollection:
    """Every call fails the way Motor does when no server is selectable."""

    def _fail(self, *args, **kwargs):
        raise ServerSelectionTimeoutError("localhost:27017: [Errno 111] Connection refused")

    def find(self, *args, **kwargs):
        return SimpleNamespace(sort=lambda *a, **kw: SimpleNamespace(to_list=self._async_fail))

    async def _async_fail(self, *args, **kwargs):
        self._fail()

    find_one = _async_fail
    insert_one = _async_fail
    find_one_and_update = _async_fail
    delete_one = _async_fail
    create_index = _async_fail


@pytest.fixture
def collection() -> FakeCollection:
    return FakeCollection()


@pytest.fixture
def store(collection) -> TransactionStore:
    return TransactionStore(collection)


@pytest.fixture
def service(store) -> TransactionService:
    return TransactionService(store)


@pytest.fixture
def valid_payload() -> dict:
    return {
        "amount": -42.5,
        "description": "Groceries",
        "category": "Food & Dining",
        "date": "2024-01-05",
    }


@pytest.fixture
def unreachable_store() -> TransactionStore:
    return TransactionStore(UnreachableCollection())
