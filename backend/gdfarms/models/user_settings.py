"""
Per-user settings database model.
"""

from sqlalchemy import Column, Integer, String, ForeignKey, DateTime, JSON
from sqlalchemy.orm import relationship

from gdfarms.database import Base, utcnow


class UserSettings(Base):
    """Display preferences, exactly one row per user."""

    __tablename__ = "settings"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(String(36), ForeignKey("users.id"), nullable=False, unique=True)
    currency = Column(String(8), nullable=False)
    app_name = Column(String, nullable=False)
    unit_preferences = Column(JSON, nullable=False, default=dict)
    created_at = Column(DateTime, default=utcnow, nullable=False)
    updated_at = Column(DateTime, nullable=True)

    # Relationships
    user = relationship("User", back_populates="settings")
