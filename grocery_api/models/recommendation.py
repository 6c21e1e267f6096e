"""Recommendation model.

Recommendations are computed on demand; this table is kept for schema
compatibility and is not written by the API.
"""

from datetime import UTC, datetime

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String

from grocery_api.database import Base


class Recommendation(Base):
    __tablename__ = "recommendations"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    item_name = Column(String(100), nullable=False)
    score = Column(Integer, default=0)
    generated_at = Column(DateTime(timezone=True), default=lambda: datetime.now(UTC))
