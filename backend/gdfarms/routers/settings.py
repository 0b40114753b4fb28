"""
API endpoints for user settings.
"""

from fastapi import APIRouter, Depends

from gdfarms.core.exceptions import NotFoundError
from gdfarms.database import Store
from gdfarms.dependencies import get_store
from gdfarms.schemas import SettingsUpdate
from gdfarms.services.settings_service import settings_service

router = APIRouter()


@router.get("/{user_id}")
def get_settings(user_id: str, store: Store = Depends(get_store)):
    row = settings_service.get_settings(store, user_id)
    if not row:
        raise NotFoundError("Settings not found")
    return {"success": True, "settings": row}


@router.put("/{user_id}")
def update_settings(
    user_id: str, settings_in: SettingsUpdate, store: Store = Depends(get_store)
):
    """Overwrite currency, app name and unit preferences."""
    row = settings_service.update_settings(store, user_id, settings_in)
    if not row:
        raise NotFoundError("Settings not found")
    return {"success": True, "settings": row}
