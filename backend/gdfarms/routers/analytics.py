"""
API endpoints for Analytics.
"""

from fastapi import APIRouter, Depends

from gdfarms.database import Store
from gdfarms.dependencies import get_store
from gdfarms.services.analytics_service import analytics_service

router = APIRouter()


@router.get("/{user_id}")
def get_analytics(user_id: str, store: Store = Depends(get_store)):
    """Get investment, revenue, profit, margin and the top five items."""
    analytics = analytics_service.compute_analytics(store, user_id)
    return {"success": True, "analytics": analytics}
