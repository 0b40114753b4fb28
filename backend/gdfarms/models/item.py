"""
Inventory item database model.
"""

from sqlalchemy import Column, Integer, String, Float, ForeignKey, DateTime, Text, Index
from sqlalchemy.orm import relationship

from gdfarms.database import Base, utcnow


class Item(Base):
    """A stocked item owned by one user."""

    __tablename__ = "items"
    __table_args__ = (
        Index("idx_item_user_created", "user_id", "created_at"),
    )

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(String(36), ForeignKey("users.id"), nullable=False, index=True)
    name = Column(String, nullable=False)
    category = Column(String, nullable=True)
    unit = Column(String, nullable=True)  # e.g. "kg", "crate", "tray"
    quantity = Column(Float, nullable=True)  # may be fractional
    buying_price = Column(Float, nullable=True)
    selling_price = Column(Float, nullable=True)
    description = Column(Text, nullable=True)
    created_at = Column(DateTime, default=utcnow, nullable=False)
    updated_at = Column(DateTime, nullable=True)

    # Relationships
    user = relationship("User", back_populates="items")

    @property
    def profit(self) -> float:
        """(selling_price - buying_price) * quantity, missing values as 0."""
        return ((self.selling_price or 0.0) - (self.buying_price or 0.0)) * (
            self.quantity or 0.0
        )
