"""Recommendation schemas."""

from pydantic import BaseModel, ConfigDict


class RecommendationResponse(BaseModel):
    """An item frequently bought alongside the user's recent purchases."""

    model_config = ConfigDict(from_attributes=True)

    item_name: str
    freq: int
