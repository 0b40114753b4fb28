"""
Settings Service.
"""

from typing import Optional

from gdfarms.database import Store, utcnow
from gdfarms.models.user_settings import UserSettings
from gdfarms.schemas import SettingsResponse, SettingsUpdate


class SettingsService:
    def get_settings(self, store: Store, user_id: str) -> Optional[SettingsResponse]:
        """Get a user's settings."""
        with store.session_scope() as db:
            row = db.query(UserSettings).filter(UserSettings.user_id == user_id).first()
            if not row:
                return None
            return SettingsResponse.model_validate(row)

    def update_settings(
        self, store: Store, user_id: str, settings_in: SettingsUpdate
    ) -> Optional[SettingsResponse]:
        """Replace every settings field. The row must already exist."""
        with store.session_scope() as db:
            row = db.query(UserSettings).filter(UserSettings.user_id == user_id).first()
            if not row:
                return None

            row.currency = settings_in.currency
            row.app_name = settings_in.app_name
            row.unit_preferences = settings_in.unit_preferences
            row.updated_at = utcnow()
            db.flush()
            return SettingsResponse.model_validate(row)


settings_service = SettingsService()
