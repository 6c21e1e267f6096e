"""Grocery item schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class ItemCreate(BaseModel):
    """Add an item to the pending list."""

    user_id: int | None = None
    item_name: str | None = Field(None, max_length=100)
    quantity: str | None = Field(None, max_length=50)
    notes: str | None = Field(None, max_length=255)


class ItemResponse(BaseModel):
    """Pending item response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    item_name: str
    quantity: str | None
    notes: str | None
    is_bought: bool | None
    created_at: datetime


class CompleteRequest(BaseModel):
    """Optional body for completing an item; userId may be sent as a query param instead."""

    user_id: int | None = None


class CreatedResponse(BaseModel):
    message: str
    id: int


class OkResponse(BaseModel):
    ok: bool = True
    message: str
