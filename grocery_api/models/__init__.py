"""SQLAlchemy models."""

from grocery_api.models.grocery_item import GroceryItem
from grocery_api.models.purchase import PurchaseHistory
from grocery_api.models.recommendation import Recommendation
from grocery_api.models.user import User

__all__ = [
    "User",
    "GroceryItem",
    "PurchaseHistory",
    "Recommendation",
]
