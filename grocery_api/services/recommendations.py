"""Co-purchase recommendation service."""

import logging
from datetime import UTC, datetime, timedelta
from typing import Any

from sqlalchemy import and_, func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, aliased

from grocery_api.config import get_settings
from grocery_api.exceptions import StoreError, parse_positive_id
from grocery_api.models.purchase import PurchaseHistory

logger = logging.getLogger(__name__)


class RecommendationService:
    """Recommends items that other users bought on the same day as the user's recent items."""

    def __init__(
        self,
        db: Session,
        window_days: int | None = None,
        limit: int | None = None,
    ):
        settings = get_settings()
        self.db = db
        self.window_days = window_days or settings.recommendation_window_days
        self.limit = limit or settings.recommendation_limit

    def build_query(self, user_id: int, now: datetime):
        """Build the co-purchase query for a user.

        recent_items:  distinct items the user bought within the window
        related_users: other users who ever bought one of those items
        co_purchases:  for each related user, every item they bought on the
                       same calendar day as a recent item, excluding the
                       recent items themselves
        """
        cutoff = now - timedelta(days=self.window_days)

        recent_items = (
            select(PurchaseHistory.item_name)
            .where(
                PurchaseHistory.user_id == user_id,
                PurchaseHistory.purchased_on >= cutoff,
            )
            .distinct()
            .cte("recent_items")
        )

        related_users = (
            select(PurchaseHistory.user_id)
            .join(recent_items, PurchaseHistory.item_name == recent_items.c.item_name)
            .where(PurchaseHistory.user_id != user_id)
            .distinct()
            .cte("related_users")
        )

        ph1 = aliased(PurchaseHistory, name="ph1")
        ph2 = aliased(PurchaseHistory, name="ph2")
        co_purchases = (
            select(ph2.item_name)
            .select_from(ph1)
            .join(
                ph2,
                and_(
                    ph1.user_id == ph2.user_id,
                    func.date(ph1.purchased_on) == func.date(ph2.purchased_on),
                ),
            )
            .where(
                ph1.item_name.in_(select(recent_items.c.item_name)),
                ph1.user_id.in_(select(related_users.c.user_id)),
                ph2.item_name.not_in(select(recent_items.c.item_name)),
            )
            .cte("co_purchases")
        )

        freq = func.count().label("freq")
        return (
            select(co_purchases.c.item_name, freq)
            .group_by(co_purchases.c.item_name)
            .order_by(freq.desc())
            .limit(self.limit)
        )

    def recommend(self, user_id: Any, now: datetime | None = None) -> list[dict[str, Any]]:
        """Get up to `limit` co-purchased items ordered by frequency.

        Order among equal frequencies is whatever the database returns.
        """
        user_id = parse_positive_id(user_id, "user ID")
        now = now or datetime.now(UTC)

        logger.info(f"Generating co-purchase recommendations for user {user_id}")
        try:
            rows = self.db.execute(self.build_query(user_id, now)).all()
        except SQLAlchemyError as e:
            logger.error(f"Recommendation query failed for user {user_id}: {e}")
            raise StoreError("Failed to generate recommendations", e) from e

        results = [{"item_name": row.item_name, "freq": int(row.freq)} for row in rows]
        logger.info(f"Generated {len(results)} recommendations for user {user_id}")
        return results
