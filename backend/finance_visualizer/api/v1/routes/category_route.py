from fastapi import APIRouter

from finance_visualizer.core.categories import list_categories

router = APIRouter(prefix="/categories", tags=["Categories"])


@router.get("")
def get_categories():
    categories = list_categories()
    return {"categories": categories, "count": len(categories)}
