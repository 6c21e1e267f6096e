"""FastAPI dependencies for services and database."""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.orm import Session

from grocery_api.database import get_db
from grocery_api.services.items import ItemService
from grocery_api.services.recommendations import RecommendationService


def get_item_service(
    db: Annotated[Session, Depends(get_db)],
) -> ItemService:
    """Get item service bound to the request's session."""
    return ItemService(db)


def get_recommendation_service(
    db: Annotated[Session, Depends(get_db)],
) -> RecommendationService:
    """Get recommendation service bound to the request's session."""
    return RecommendationService(db)
