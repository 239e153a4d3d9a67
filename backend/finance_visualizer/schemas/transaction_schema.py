# finance_visualizer/schemas/transaction_schema.py

import datetime as dt
import math
import re
from typing import Any, Optional

from pydantic import BaseModel, field_validator

from finance_visualizer.core.categories import TRANSACTION_CATEGORIES, is_valid_category

MIN_AMOUNT = 0.01

TRANSACTION_FIELDS = ("amount", "description", "category", "date")

# "YYYY-MM-DD", optionally followed by a time part
ISO_DATE_PREFIX = re.compile(r"\d{4}-\d{2}-\d{2}(?:$|[T ])")


def parse_transaction_date(value: Any) -> dt.date:
    """
    Accepts a date, a datetime, "YYYY-MM-DD" or an ISO datetime string
    such as "2024-01-05T00:00:00.000Z" (what a browser sends for
    JSON.stringify(new Date(...))). Datetimes keep their calendar date.
    Compact and week forms ("20240105", "2024-W01-1") are rejected.
    """
    if isinstance(value, dt.datetime):
        return value.date()
    if isinstance(value, dt.date):
        return value
    if isinstance(value, str):
        text = value.strip()
        if not ISO_DATE_PREFIX.match(text):
            raise ValueError("Date must be a valid date")
        try:
            return dt.date.fromisoformat(text)
        except ValueError:
            pass
        try:
            return dt.datetime.fromisoformat(text.replace("Z", "+00:00")).date()
        except ValueError:
            pass
    raise ValueError("Date must be a valid date")


class TransactionCreate(BaseModel):
    """Full transaction payload, as submitted by the transaction form."""

    amount: float
    description: str
    category: str
    date: dt.date

    class Config:
        extra = "ignore"

    @field_validator("amount", mode="before")
    @classmethod
    def amount_is_number(cls, v):
        if v is None:
            raise ValueError("Amount is required")
        if isinstance(v, bool):
            raise ValueError("Amount must be a number")
        return v

    @field_validator("amount")
    @classmethod
    def amount_in_range(cls, v: float) -> float:
        if not math.isfinite(v):
            raise ValueError("Amount must be a finite number")
        if abs(v) < MIN_AMOUNT:
            raise ValueError("Amount must be at least 0.01")
        return v

    @field_validator("description", mode="before")
    @classmethod
    def description_present(cls, v):
        if v is None:
            raise ValueError("Description is required")
        return v

    @field_validator("description")
    @classmethod
    def description_not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Description is required")
        return v

    @field_validator("category", mode="before")
    @classmethod
    def category_present(cls, v):
        if v is None:
            raise ValueError("Category is required")
        return v

    @field_validator("category")
    @classmethod
    def category_known(cls, v: str) -> str:
        if not is_valid_category(v):
            labels = ", ".join(c.label for c in TRANSACTION_CATEGORIES)
            raise ValueError(f"Category must be one of: {labels}")
        return v

    @field_validator("date", mode="before")
    @classmethod
    def date_parses(cls, v):
        if v is None:
            raise ValueError("Date is required")
        return parse_transaction_date(v)


class TransactionUpdate(TransactionCreate):
    """Edit payload: any subset of the transaction fields."""

    amount: Optional[float] = None
    description: Optional[str] = None
    category: Optional[str] = None
    date: Optional[dt.date] = None
