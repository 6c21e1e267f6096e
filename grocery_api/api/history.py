"""Purchase history API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends

from grocery_api.api.dependencies import get_item_service
from grocery_api.schemas.history import PurchaseCreate, PurchaseResponse
from grocery_api.schemas.item import CreatedResponse
from grocery_api.services.items import ItemService

router = APIRouter(prefix="/api/history", tags=["history"])


@router.get("/{user_id}", response_model=list[PurchaseResponse])
def get_history(
    user_id: str,
    service: Annotated[ItemService, Depends(get_item_service)],
):
    """Get a user's purchase history, newest first."""
    return service.list_history(user_id)


@router.post("", response_model=CreatedResponse)
def record_purchase(
    purchase: PurchaseCreate,
    service: Annotated[ItemService, Depends(get_item_service)],
):
    """Record a quick-buy purchase directly into history."""
    record = service.record_purchase(purchase.user_id, purchase.item_name)
    return CreatedResponse(message="Purchase recorded successfully", id=record.id)
