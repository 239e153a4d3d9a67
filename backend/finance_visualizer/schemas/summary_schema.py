# finance_visualizer/schemas/summary_schema.py

from typing import List
from pydantic import BaseModel

from finance_visualizer.db.models.transaction_model import TransactionModel


class CategoryTotal(BaseModel):
    category: str
    amount: float


class MonthlyTotal(BaseModel):
    month: str   # "2024-01"
    label: str   # "Jan 2024"
    amount: float


class CategorySlice(BaseModel):
    name: str
    value: float
    icon: str


class DashboardSummary(BaseModel):
    total_expenses: float
    top_categories: List[CategoryTotal]
    recent_expenses: List[TransactionModel]
    monthly: List[MonthlyTotal]
    category_breakdown: List[CategorySlice]
    transaction_count: int
