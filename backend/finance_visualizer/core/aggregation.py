# finance_visualizer/core/aggregation.py
"""
Dashboard aggregations over an in-memory list of transactions.

All functions are pure. They accept TransactionModel instances or plain
mappings with the same keys, so a list fetched by a client can be passed
in unchanged. A negative amount is an expense, a positive one is income.
"""

import datetime as dt
from collections.abc import Mapping
from typing import Any, Dict, Iterable, List, Sequence, Tuple

from finance_visualizer.core.categories import category_icon
from finance_visualizer.db.models.transaction_model import TransactionModel
from finance_visualizer.schemas.summary_schema import (
    CategorySlice,
    CategoryTotal,
    DashboardSummary,
    MonthlyTotal,
)
from finance_visualizer.schemas.transaction_schema import parse_transaction_date


def _get(txn: Any, name: str) -> Any:
    if isinstance(txn, Mapping):
        return txn[name]
    return getattr(txn, name)


def _amount(txn: Any) -> float:
    return float(_get(txn, "amount"))


def _date(txn: Any) -> dt.date:
    return parse_transaction_date(_get(txn, "date"))


def is_expense(txn: Any) -> bool:
    return _amount(txn) < 0


def total_expenses(transactions: Iterable[Any]) -> float:
    total = sum(abs(_amount(t)) for t in transactions if is_expense(t))
    return round(total, 2)


def by_category(transactions: Iterable[Any]) -> Dict[str, float]:
    """Expense totals per category label, in order of first appearance."""
    totals: Dict[str, float] = {}
    for txn in transactions:
        if not is_expense(txn):
            continue
        category = _get(txn, "category")
        totals[category] = totals.get(category, 0.0) + abs(_amount(txn))
    return {category: round(amount, 2) for category, amount in totals.items()}


def by_month(transactions: Iterable[Any]) -> List[Tuple[str, float]]:
    """Net signed amount per calendar month, oldest month first."""
    totals: Dict[str, float] = {}
    for txn in transactions:
        month = _date(txn).strftime("%Y-%m")
        totals[month] = totals.get(month, 0.0) + _amount(txn)
    # "YYYY-MM" keys sort chronologically
    return [(month, round(totals[month], 2)) for month in sorted(totals)]


def top_categories(transactions: Iterable[Any], n: int) -> List[Tuple[str, float]]:
    if n <= 0:
        return []
    ranked = sorted(by_category(transactions).items(), key=lambda item: item[1], reverse=True)
    return ranked[:n]


def recent_expenses(transactions: Iterable[Any], n: int) -> List[Any]:
    if n <= 0:
        return []
    expenses = [t for t in transactions if is_expense(t)]
    expenses.sort(key=_date, reverse=True)
    return expenses[:n]


def month_label(month: str) -> str:
    """Turn "2024-01" into "Jan 2024"."""
    return dt.datetime.strptime(month, "%Y-%m").strftime("%b %Y")


def category_breakdown(transactions: Iterable[Any]) -> List[CategorySlice]:
    """Pie-chart series for expense categories."""
    return [
        CategorySlice(name=category, value=amount, icon=category_icon(category))
        for category, amount in by_category(transactions).items()
    ]


def dashboard_summary(
    transactions: Sequence[TransactionModel],
    top_n: int = 3,
    recent_n: int = 3,
) -> DashboardSummary:
    """Everything the dashboard cards and charts render."""
    return DashboardSummary(
        total_expenses=total_expenses(transactions),
        top_categories=[
            CategoryTotal(category=category, amount=amount)
            for category, amount in top_categories(transactions, top_n)
        ],
        recent_expenses=recent_expenses(transactions, recent_n),
        monthly=[
            MonthlyTotal(month=month, label=month_label(month), amount=amount)
            for month, amount in by_month(transactions)
        ],
        category_breakdown=category_breakdown(transactions),
        transaction_count=len(transactions),
    )
