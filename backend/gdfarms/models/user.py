"""
User database model.
"""

from sqlalchemy import Column, String, DateTime
from sqlalchemy.orm import relationship

from gdfarms.database import Base, utcnow


class User(Base):
    """User identified by an opaque server-generated UUID."""

    __tablename__ = "users"

    id = Column(String(36), primary_key=True)
    created_at = Column(DateTime, default=utcnow, nullable=False)

    # Relationships
    items = relationship("Item", back_populates="user")
    settings = relationship("UserSettings", back_populates="user", uselist=False)
    goals = relationship("Goal", back_populates="user")
