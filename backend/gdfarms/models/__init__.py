"""
Database models for the GD Farms backend.

All SQLAlchemy models are imported here so metadata.create_all sees them.
"""

from gdfarms.models.user import User
from gdfarms.models.item import Item
from gdfarms.models.user_settings import UserSettings
from gdfarms.models.goal import Goal

__all__ = [
    "User",
    "Item",
    "UserSettings",
    "Goal",
]
