"""Purchase history schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class PurchaseCreate(BaseModel):
    """Record a direct purchase."""

    user_id: int | None = None
    item_name: str | None = Field(None, max_length=100)


class PurchaseResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    item_name: str
    purchased_on: datetime
