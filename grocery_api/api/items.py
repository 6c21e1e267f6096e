"""Grocery item API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Body, Depends, Query

from grocery_api.api.dependencies import get_item_service
from grocery_api.schemas.item import (
    CompleteRequest,
    CreatedResponse,
    ItemCreate,
    ItemResponse,
    OkResponse,
)
from grocery_api.services.items import ItemService

router = APIRouter(prefix="/api/items", tags=["items"])


@router.get("/{user_id}", response_model=list[ItemResponse])
def get_items(
    user_id: str,
    service: Annotated[ItemService, Depends(get_item_service)],
):
    """Get the pending items for a user."""
    return service.list_pending(user_id)


@router.post("", response_model=CreatedResponse)
def create_item(
    item_data: ItemCreate,
    service: Annotated[ItemService, Depends(get_item_service)],
):
    """Add an item to the pending list."""
    item = service.add_item(
        item_data.user_id, item_data.item_name, item_data.quantity, item_data.notes
    )
    return CreatedResponse(message="Item added successfully", id=item.id)


@router.delete("/{item_id}", response_model=OkResponse)
def delete_item(
    item_id: str,
    service: Annotated[ItemService, Depends(get_item_service)],
    user_id: Annotated[str | None, Query(alias="userId")] = None,
):
    """Delete a pending item owned by the user."""
    service.delete_item(item_id, user_id)
    return OkResponse(message="Item deleted successfully")


@router.post("/{item_id}/complete", response_model=OkResponse)
def complete_item(
    item_id: str,
    service: Annotated[ItemService, Depends(get_item_service)],
    payload: Annotated[CompleteRequest | None, Body()] = None,
    user_id: Annotated[str | None, Query(alias="userId")] = None,
):
    """Mark an item as bought, moving it into purchase history."""
    if payload is not None and payload.user_id is not None:
        user_id = payload.user_id
    service.complete_item(item_id, user_id)
    return OkResponse(message="Item completed and moved to history")
