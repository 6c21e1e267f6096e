"""Service layer over the relational store."""

from grocery_api.services.items import QUICK_BUY_NOTE, ItemService
from grocery_api.services.recommendations import RecommendationService

__all__ = ["ItemService", "RecommendationService", "QUICK_BUY_NOTE"]
