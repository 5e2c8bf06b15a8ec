"""FastAPI dependency providers for repositories and services.

Kept apart from ``dependencies.py`` so route modules and
``app.auth.dependencies`` can import these aliases without a cycle.
"""

from typing import Annotated

from fastapi import Depends

from app.auth.token_service import TokenService
from app.dependencies import DBSession, RedisClient
from app.repositories.user_repository import UserRepository
from app.services.auth_service import AuthService

# ---------------------------------------------------------------------------
# Repository providers
# ---------------------------------------------------------------------------


def get_user_repository(db: DBSession) -> UserRepository:
    return UserRepository(db)


UserRepo = Annotated[UserRepository, Depends(get_user_repository)]

# ---------------------------------------------------------------------------
# Service providers
# ---------------------------------------------------------------------------


def get_token_service(redis: RedisClient) -> TokenService:
    return TokenService(redis)


TokenSvc = Annotated[TokenService, Depends(get_token_service)]


def get_auth_service(repo: UserRepo, tokens: TokenSvc) -> AuthService:
    return AuthService(repo, tokens)


AuthSvc = Annotated[AuthService, Depends(get_auth_service)]
