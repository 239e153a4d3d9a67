import datetime as dt
from typing import Any, Dict

from pydantic import BaseModel


class TransactionModel(BaseModel):
    """
    Transaction record as stored in MongoDB and returned by the API.

    The document keeps `date` as a midnight datetime since BSON has no
    date-only type; it is narrowed back to a calendar date here.
    """

    id: str
    amount: float
    description: str
    category: str
    date: dt.date

    class Config:
        from_attributes = True

    @classmethod
    def from_document(cls, doc: Dict[str, Any]) -> "TransactionModel":
        stored_date = doc["date"]
        if isinstance(stored_date, dt.datetime):
            stored_date = stored_date.date()
        return cls(
            id=str(doc["_id"]),
            amount=doc["amount"],
            description=doc["description"],
            category=doc["category"],
            date=stored_date,
        )


def to_document_fields(fields: Dict[str, Any]) -> Dict[str, Any]:
    """Convert validated fields into their BSON-storable form."""
    doc = dict(fields)
    if isinstance(doc.get("date"), dt.date) and not isinstance(doc["date"], dt.datetime):
        doc["date"] = dt.datetime.combine(doc["date"], dt.time.min)
    return doc
