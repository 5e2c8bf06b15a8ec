"""Pydantic schemas package."""
from app.schemas.auth import (
    LoginRequest,
    LoginResponse,
    MessageResponse,
    RegisterRequest,
    RegisterResponse,
    TokenResponse,
    TokenUser,
    UserResponse,
)

__all__ = [
    # Request schemas
    "LoginRequest",
    "RegisterRequest",
    # Response schemas
    "LoginResponse",
    "RegisterResponse",
    "TokenResponse",
    "MessageResponse",
    "UserResponse",
    # Token identity
    "TokenUser",
]
