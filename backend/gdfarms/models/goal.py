"""
Goal database model.
"""

from sqlalchemy import Column, Integer, String, Float, ForeignKey, Date, DateTime, Text
from sqlalchemy.orm import relationship

from gdfarms.database import Base, utcnow


class Goal(Base):
    """Sales target; the service keeps at most one per user."""

    __tablename__ = "goals"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(String(36), ForeignKey("users.id"), nullable=False, index=True)
    name = Column(String, nullable=True)
    target_revenue = Column(Float, nullable=True)
    target_profit = Column(Float, nullable=True)
    target_items = Column(Integer, nullable=True)
    deadline = Column(Date, nullable=True)
    description = Column(Text, nullable=True)
    created_at = Column(DateTime, default=utcnow, nullable=False)

    # Relationships
    user = relationship("User", back_populates="goals")
