"""Item lifecycle service.

A grocery item is either pending on the list, completed (moved into
purchase history) or deleted. Completion is one-way and all-or-nothing.
"""

import logging
from typing import Any

from sqlalchemy import or_
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from grocery_api.database import transaction
from grocery_api.exceptions import (
    ConflictError,
    NotFoundError,
    StoreError,
    ValidationError,
    parse_positive_id,
)
from grocery_api.models.grocery_item import GroceryItem
from grocery_api.models.purchase import PurchaseHistory
from grocery_api.models.user import User

logger = logging.getLogger(__name__)

# Notes value marking a quick-buy entry; such rows are hidden from the pending list
QUICK_BUY_NOTE = "Quick buy"


def _clean(value: str | None) -> str | None:
    """Trim a free-text field, mapping blank values to None."""
    if value is None:
        return None
    value = value.strip()
    return value or None


class ItemService:
    """Service for grocery list and purchase history operations."""

    def __init__(self, db: Session):
        self.db = db

    def _user_exists(self, user_id: int) -> bool:
        return self.db.query(User.id).filter(User.id == user_id).first() is not None

    def _delete_scoped(self, item_id: int, user_id: int) -> int:
        """Delete an item only if it belongs to the user. Returns rows deleted."""
        return (
            self.db.query(GroceryItem)
            .filter(GroceryItem.id == item_id, GroceryItem.user_id == user_id)
            .delete(synchronize_session=False)
        )

    def list_pending(self, user_id: Any) -> list[GroceryItem]:
        """Get the user's pending items, newest first."""
        user_id = parse_positive_id(user_id, "user id")
        try:
            return (
                self.db.query(GroceryItem)
                .filter(
                    GroceryItem.user_id == user_id,
                    or_(GroceryItem.is_bought.is_(None), GroceryItem.is_bought.is_(False)),
                    or_(GroceryItem.notes.is_(None), GroceryItem.notes != QUICK_BUY_NOTE),
                )
                .order_by(GroceryItem.created_at.desc(), GroceryItem.id.desc())
                .all()
            )
        except SQLAlchemyError as e:
            logger.error(f"Failed to list items for user {user_id}: {e}")
            raise StoreError("Database error", e) from e

    def list_history(self, user_id: Any) -> list[PurchaseHistory]:
        """Get the user's purchase history, newest first."""
        user_id = parse_positive_id(user_id, "user id")
        try:
            return (
                self.db.query(PurchaseHistory)
                .filter(PurchaseHistory.user_id == user_id)
                .order_by(PurchaseHistory.purchased_on.desc(), PurchaseHistory.id.desc())
                .all()
            )
        except SQLAlchemyError as e:
            logger.error(f"Failed to list history for user {user_id}: {e}")
            raise StoreError("Database error", e) from e

    def add_item(
        self,
        user_id: Any,
        item_name: str | None,
        quantity: str | None = None,
        notes: str | None = None,
    ) -> GroceryItem:
        """Add a pending item to the user's list."""
        name = _clean(item_name)
        if user_id is None or not name:
            raise ValidationError("user_id and item_name are required")
        user_id = parse_positive_id(user_id, "user_id")

        with transaction(self.db):
            if not self._user_exists(user_id):
                raise ValidationError(f"User {user_id} does not exist")
            item = GroceryItem(
                user_id=user_id,
                item_name=name,
                quantity=_clean(quantity),
                notes=_clean(notes),
            )
            self.db.add(item)
            self.db.flush()

        logger.info(f"Added item {item.id} '{name}' for user {user_id}")
        return item

    def delete_item(self, item_id: Any, user_id: Any) -> None:
        """Delete a pending item owned by the user.

        Raises NotFoundError when nothing matched, including when the item
        was already deleted or completed.
        """
        if not item_id or not user_id:
            raise ValidationError("Both id (param) and userId (query) are required")
        item_id = parse_positive_id(item_id, "item id")
        user_id = parse_positive_id(user_id, "userId")

        with transaction(self.db):
            deleted = self._delete_scoped(item_id, user_id)
            if deleted == 0:
                raise NotFoundError("Item not found (wrong id or userId)")

        logger.info(f"Deleted item {item_id} for user {user_id}")

    def complete_item(self, item_id: Any, user_id: Any) -> PurchaseHistory:
        """Move a pending item into purchase history.

        The history insert and the item delete commit together or not at
        all. If the final delete matches no row, a concurrent request got
        there first and the whole unit is rolled back with ConflictError.
        """
        try:
            item_id = parse_positive_id(item_id, "item id")
            user_id = parse_positive_id(user_id, "userId")
        except ValidationError:
            raise ValidationError("Invalid or missing item id / userId") from None

        logger.info(f"Processing complete request for user {user_id}, item {item_id}")
        with transaction(self.db):
            if not self._user_exists(user_id):
                raise ValidationError(f"User {user_id} does not exist")

            item = (
                self.db.query(GroceryItem)
                .filter(GroceryItem.id == item_id, GroceryItem.user_id == user_id)
                .with_for_update()
                .first()
            )
            if item is None:
                raise NotFoundError("Item not found for this user")

            purchase = PurchaseHistory(user_id=user_id, item_name=item.item_name)
            self.db.add(purchase)
            self.db.flush()

            if self._delete_scoped(item_id, user_id) == 0:
                raise ConflictError("Delete failed: item disappeared")

        logger.info(f"Item {item_id} completed for user {user_id}")
        return purchase

    def record_purchase(self, user_id: Any, item_name: str | None) -> PurchaseHistory:
        """Record a purchase directly, without a pending item."""
        name = _clean(item_name)
        if user_id is None or not name:
            raise ValidationError("user_id and item_name are required")
        user_id = parse_positive_id(user_id, "user_id")

        with transaction(self.db):
            if not self._user_exists(user_id):
                raise ValidationError(f"User {user_id} does not exist")
            purchase = PurchaseHistory(user_id=user_id, item_name=name)
            self.db.add(purchase)
            self.db.flush()

        logger.info(f"Recorded purchase {purchase.id} '{name}' for user {user_id}")
        return purchase
