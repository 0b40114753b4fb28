"""
API endpoints for inventory items.
"""

from fastapi import APIRouter, Depends

from gdfarms.core.exceptions import NotFoundError
from gdfarms.database import Store
from gdfarms.dependencies import get_store
from gdfarms.schemas import ItemCreate, ItemUpdate
from gdfarms.services.item_service import item_service

router = APIRouter()


def _parse_item_id(raw: str) -> int:
    # ids are integers; anything else cannot match a row
    try:
        return int(raw)
    except ValueError:
        raise NotFoundError("Item not found")


@router.get("/{user_id}")
def list_items(user_id: str, store: Store = Depends(get_store)):
    """List a user's items, newest first."""
    items = item_service.list_items(store, user_id)
    return {"success": True, "items": items}


@router.post("")
def add_item(item: ItemCreate, store: Store = Depends(get_store)):
    """Create a new item."""
    created = item_service.add_item(store, item)
    return {"success": True, "message": "Item added successfully", "item": created}


@router.put("/{item_id}")
def update_item(item_id: str, item: ItemUpdate, store: Store = Depends(get_store)):
    """Update an item owned by the userId given in the body."""
    updated = item_service.update_item(store, _parse_item_id(item_id), item)
    if not updated:
        raise NotFoundError("Item not found")
    return {"success": True, "message": "Item updated successfully", "item": updated}


@router.delete("/{item_id}/{user_id}")
def delete_item(item_id: str, user_id: str, store: Store = Depends(get_store)):
    """Delete an item owned by the user."""
    if not item_service.delete_item(store, _parse_item_id(item_id), user_id):
        raise NotFoundError("Item not found")
    return {"success": True, "message": "Item deleted successfully"}
