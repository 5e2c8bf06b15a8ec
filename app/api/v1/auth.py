"""Authentication API endpoints.

``login`` and ``register`` are public.  Every other endpoint requires a
bearer token, verified by ``CurrentUser`` before the handler runs; the
resolved identity and raw token are passed down explicitly.
"""

from fastapi import APIRouter, status

from app.auth.dependencies import BearerToken, CurrentUser
from app.providers import AuthSvc
from app.schemas.auth import (
    LoginRequest,
    LoginResponse,
    MessageResponse,
    RegisterRequest,
    RegisterResponse,
    TokenResponse,
    UserResponse,
)

router = APIRouter()


@router.post("/login", response_model=LoginResponse)
async def login(credentials: LoginRequest, service: AuthSvc) -> LoginResponse:
    """Exchange email and password for an access token."""
    return await service.login(credentials)


@router.post(
    "/register",
    response_model=RegisterResponse,
    status_code=status.HTTP_201_CREATED,
)
async def register(data: RegisterRequest, service: AuthSvc) -> RegisterResponse:
    """Create a new account."""
    return await service.register(data)


@router.post("/logout", response_model=MessageResponse)
async def logout(
    current_user: CurrentUser, token: BearerToken, service: AuthSvc
) -> MessageResponse:
    """Invalidate the presented token."""
    return await service.logout(token, current_user)


@router.post("/refresh", response_model=TokenResponse)
async def refresh(
    current_user: CurrentUser, token: BearerToken, service: AuthSvc
) -> TokenResponse:
    """Swap the presented token for a new one with a fresh expiry."""
    return await service.refresh(token, current_user)


@router.get("/profile", response_model=UserResponse)
async def profile(current_user: CurrentUser, service: AuthSvc) -> UserResponse:
    """Return the authenticated user's account details."""
    return await service.profile(current_user)
