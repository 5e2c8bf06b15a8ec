"""Service layer for the authentication flow.

Payloads reaching this layer have already passed schema validation.  Each
operation logs its outcome: ``info`` on success, ``ALERT`` with the
submitted email when a login or registration is rejected.
"""

import asyncio
import logging

from app.auth.security import hash_password
from app.auth.token_service import TokenService
from app.config import get_settings
from app.exceptions import (
    EmailTakenError,
    IncorrectPasswordError,
    InvalidTokenError,
    UserNotFoundError,
)
from app.repositories.protocols import UserRepositoryProtocol
from app.repositories.user_repository import DuplicateEmailError
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
from app.utils.logging import ALERT

logger = logging.getLogger(__name__)


class AuthService:
    """Login, registration, logout, refresh and profile lookup."""

    def __init__(self, repo: UserRepositoryProtocol, tokens: TokenService):
        self._repo = repo
        self._tokens = tokens

    async def login(self, credentials: LoginRequest) -> LoginResponse:
        """Exchange email and password for an access token.

        Raises:
            UserNotFoundError: No account for the email.
            IncorrectPasswordError: The password does not match.
        """
        user = await self._repo.get_by_email(credentials.email)
        if user is None:
            logger.log(ALERT, "Unregistered email given for login: %s", credentials.email)
            raise UserNotFoundError(credentials.email)

        token = await self._tokens.attempt(user, credentials.password)
        if token is None:
            logger.log(ALERT, "Wrong password given for login: %s", credentials.email)
            raise IncorrectPasswordError(credentials.email)

        logger.info("User logged in: %s", credentials.email)
        return LoginResponse(access_token=token)

    async def register(self, data: RegisterRequest) -> RegisterResponse:
        """Create an account with a hashed password.

        Raises:
            EmailTakenError: The email already belongs to an account, either
                found up front or reported by the unique index on insert.
        """
        if await self._repo.get_by_email(data.email) is not None:
            logger.log(ALERT, "Existing email given for register: %s", data.email)
            raise EmailTakenError(data.email)

        hashed = await asyncio.to_thread(hash_password, data.password)
        try:
            user = await self._repo.create(
                firstname=data.firstname,
                lastname=data.lastname,
                email=data.email,
                hashed_password=hashed,
            )
        except DuplicateEmailError as exc:
            # Lost a race with a concurrent registration for the same email
            logger.log(ALERT, "Existing email given for register: %s", data.email)
            raise EmailTakenError(data.email) from exc

        logger.info("New user registered: %s", data.email)
        return RegisterResponse(user=UserResponse.model_validate(user))

    async def logout(self, token: str, identity: TokenUser) -> MessageResponse:
        await self._tokens.invalidate(token)
        logger.info("User logged out: %s", identity.email)
        return MessageResponse(message="User successfully signed out")

    async def refresh(self, token: str, identity: TokenUser) -> TokenResponse:
        new_token = await self._tokens.refresh(token)
        logger.info("User refreshed token: %s", identity.email)
        return TokenResponse(
            access_token=new_token,
            expires_in=get_settings().access_token_ttl_seconds,
        )

    async def profile(self, identity: TokenUser) -> UserResponse:
        """Return the account the token was issued for.

        Raises:
            InvalidTokenError: The account no longer exists.
        """
        user = await self._repo.get_by_id(identity.id)
        if user is None:
            raise InvalidTokenError("User no longer exists")
        logger.info("User account details requested: %s", identity.email)
        return UserResponse.model_validate(user)
