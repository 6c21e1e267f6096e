"""Authentication API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from grocery_api.database import get_db
from grocery_api.schemas.auth import LoginResponse, RegisterResponse, UserLogin, UserRegister
from grocery_api.services.auth import authenticate_user, create_user

router = APIRouter(prefix="/api", tags=["auth"])


@router.post("/register", response_model=RegisterResponse)
def register(
    user_data: UserRegister,
    db: Annotated[Session, Depends(get_db)],
):
    """Register a new user."""
    user = create_user(db, user_data.name, user_data.email, user_data.password)
    return RegisterResponse(message="User registered successfully", id=user.id)


@router.post("/login", response_model=LoginResponse)
def login(
    credentials: UserLogin,
    db: Annotated[Session, Depends(get_db)],
):
    """Login with email and password."""
    user = authenticate_user(db, credentials.email, credentials.password)
    return LoginResponse(id=user.id, name=user.name)
