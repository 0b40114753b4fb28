import logging
from typing import Any, Dict, List, Optional

from gdfarms.database import Store, utcnow
from gdfarms.models.item import Item
from gdfarms.schemas import ItemCreate, ItemResponse, ItemUpdate

logger = logging.getLogger(__name__)


class ItemService:
    """
    CRUD over a user's inventory items.

    Every statement filters on user_id, so one user can never read or change
    another user's rows.
    """

    def list_items(self, store: Store, user_id: str) -> List[ItemResponse]:
        """All items of the user, newest first."""
        with store.session_scope() as db:
            items = (
                db.query(Item)
                .filter(Item.user_id == user_id)
                .order_by(Item.created_at.desc(), Item.id.desc())
                .all()
            )
            return [ItemResponse.model_validate(item) for item in items]

    def add_item(self, store: Store, item_in: ItemCreate) -> ItemResponse:
        """Insert a new item and return the stored row."""
        with store.session_scope() as db:
            item = Item(**item_in.model_dump())
            db.add(item)
            db.flush()  # assigns id
            db.refresh(item)
            logger.info(f"Added item {item.id} for user {item.user_id}")
            return ItemResponse.model_validate(item)

    def update_item(
        self, store: Store, item_id: int, item_in: ItemUpdate
    ) -> Optional[ItemResponse]:
        """
        Overwrite the fields present in the request.

        Returns None when no item with that id belongs to the user.
        """
        changes: Dict[str, Any] = item_in.model_dump(
            exclude_unset=True, exclude={"user_id"}
        )
        with store.session_scope() as db:
            item = (
                db.query(Item)
                .filter(Item.id == item_id, Item.user_id == item_in.user_id)
                .first()
            )
            if not item:
                return None

            for field, value in changes.items():
                setattr(item, field, value)
            item.updated_at = utcnow()
            db.flush()
            return ItemResponse.model_validate(item)

    def delete_item(self, store: Store, item_id: int, user_id: str) -> bool:
        """Delete the item; False when nothing matched."""
        with store.session_scope() as db:
            deleted = (
                db.query(Item)
                .filter(Item.id == item_id, Item.user_id == user_id)
                .delete(synchronize_session=False)
            )
        if deleted:
            logger.info(f"Deleted item {item_id} for user {user_id}")
        return deleted > 0


item_service = ItemService()
