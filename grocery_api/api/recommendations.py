"""Recommendation API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends

from grocery_api.api.dependencies import get_recommendation_service
from grocery_api.schemas.recommendation import RecommendationResponse
from grocery_api.services.recommendations import RecommendationService

router = APIRouter(prefix="/api/recommendations", tags=["recommendations"])


@router.get("/{user_id}", response_model=list[RecommendationResponse])
def get_recommendations(
    user_id: str,
    service: Annotated[RecommendationService, Depends(get_recommendation_service)],
):
    """Get items frequently bought together with the user's recent purchases."""
    return service.recommend(user_id)
