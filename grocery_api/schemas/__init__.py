"""Pydantic schemas for API requests and responses."""

from grocery_api.schemas.auth import LoginResponse, RegisterResponse, UserLogin, UserRegister
from grocery_api.schemas.history import PurchaseCreate, PurchaseResponse
from grocery_api.schemas.item import (
    CompleteRequest,
    CreatedResponse,
    ItemCreate,
    ItemResponse,
    OkResponse,
)
from grocery_api.schemas.recommendation import RecommendationResponse

__all__ = [
    "UserRegister",
    "UserLogin",
    "LoginResponse",
    "RegisterResponse",
    "ItemCreate",
    "ItemResponse",
    "CompleteRequest",
    "CreatedResponse",
    "OkResponse",
    "PurchaseCreate",
    "PurchaseResponse",
    "RecommendationResponse",
]
