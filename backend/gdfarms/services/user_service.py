"""
User Service.

Users are anonymous: a client asks for an identifier once and sends it back
on every later request.
"""

import logging
import uuid
from typing import Optional

from gdfarms.config import Settings
from gdfarms.database import Store
from gdfarms.models.user import User
from gdfarms.models.user_settings import UserSettings
from gdfarms.schemas import UserInitResult

logger = logging.getLogger(__name__)


class UserService:
    def __init__(self, default_currency: str, default_app_name: str):
        self.default_currency = default_currency
        self.default_app_name = default_app_name

    @classmethod
    def from_settings(cls, app_settings: Settings) -> "UserService":
        return cls(
            default_currency=app_settings.DEFAULT_CURRENCY,
            default_app_name=app_settings.DEFAULT_APP_NAME,
        )

    def init_user(self, store: Store, user_id: Optional[str] = None) -> UserInitResult:
        """
        Return an existing user or create a new one.

        A supplied identifier is honoured only when a settings row exists for
        it. Otherwise a fresh UUID is issued together with default settings.
        """
        with store.session_scope() as db:
            if user_id:
                existing = (
                    db.query(UserSettings.user_id)
                    .filter(UserSettings.user_id == user_id)
                    .first()
                )
                if existing:
                    return UserInitResult(user_id=user_id, created=False)
                logger.info(f"Unknown user id {user_id} supplied, issuing a new one")

            new_id = str(uuid.uuid4())
            db.add(User(id=new_id))
            db.add(
                UserSettings(
                    user_id=new_id,
                    currency=self.default_currency,
                    app_name=self.default_app_name,
                    unit_preferences={},
                )
            )

        logger.info(f"Created user {new_id}")
        return UserInitResult(user_id=new_id, created=True)
