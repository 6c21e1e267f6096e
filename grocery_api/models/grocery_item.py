"""Grocery item model."""

from sqlalchemy import Boolean, Column, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from grocery_api.database import Base
from grocery_api.models.mixins import TimestampMixin


class GroceryItem(Base, TimestampMixin):
    """Pending entry on a user's grocery list."""

    __tablename__ = "grocery_items"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    item_name = Column(String(100), nullable=False)
    quantity = Column(String(50), nullable=True)  # "2 lbs", "1 gallon", etc.
    notes = Column(String(255), nullable=True)
    is_bought = Column(Boolean, default=False)

    user = relationship("User", back_populates="grocery_items")
