"""Authentication schemas."""

from pydantic import BaseModel, EmailStr, Field


class UserRegister(BaseModel):
    """User registration request."""

    name: str = Field(..., min_length=1, max_length=100)
    email: EmailStr = Field(..., max_length=150)
    password: str = Field(..., min_length=1, max_length=128)


class UserLogin(BaseModel):
    """User login request."""

    email: EmailStr = Field(..., max_length=150)
    password: str = Field(..., min_length=1, max_length=128)


class LoginResponse(BaseModel):
    id: int
    name: str


class RegisterResponse(BaseModel):
    message: str
    id: int
