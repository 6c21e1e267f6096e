"""User model."""

from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship

from grocery_api.database import Base
from grocery_api.models.mixins import TimestampMixin


class User(Base, TimestampMixin):
    """Account that owns grocery items and purchase history."""

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), nullable=False)
    email = Column(String(150), unique=True, nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)

    # Relationships
    grocery_items = relationship(
        "GroceryItem", back_populates="user", cascade="all, delete-orphan", passive_deletes=True
    )
    purchases = relationship(
        "PurchaseHistory", back_populates="user", cascade="all, delete-orphan", passive_deletes=True
    )
