# finance_visualizer/core/categories.py
"""
Fixed category table.

The validator uses the labels to accept or reject a payload and the
aggregation engine uses the icons for the pie-chart series.
"""

from typing import Dict, List, NamedTuple, Optional


class Category(NamedTuple):
    id: str
    label: str
    icon: str


TRANSACTION_CATEGORIES = (
    Category("housing", "Housing", "🏠"),
    Category("transportation", "Transportation", "🚗"),
    Category("food", "Food & Dining", "🍽️"),
    Category("utilities", "Utilities", "💡"),
    Category("healthcare", "Healthcare", "🏥"),
    Category("entertainment", "Entertainment", "🎬"),
    Category("shopping", "Shopping", "🛍️"),
    Category("education", "Education", "📚"),
    Category("savings", "Savings", "💰"),
    Category("other", "Other", "📌"),
)

CATEGORY_LABELS = frozenset(c.label for c in TRANSACTION_CATEGORIES)

DEFAULT_ICON = "📌"

_BY_LABEL: Dict[str, Category] = {c.label: c for c in TRANSACTION_CATEGORIES}


def is_valid_category(label: str) -> bool:
    return label in CATEGORY_LABELS


def get_category(label: str) -> Optional[Category]:
    return _BY_LABEL.get(label)


def category_icon(label: str) -> str:
    category = _BY_LABEL.get(label)
    return category.icon if category else DEFAULT_ICON


def list_categories() -> List[dict]:
    """Category table as JSON-ready dicts, in display order."""
    return [c._asdict() for c in TRANSACTION_CATEGORIES]
