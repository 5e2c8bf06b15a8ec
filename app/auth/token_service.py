"""Token service: issue, verify, refresh and invalidate bearer tokens.

Verification is stateless (signature + ``exp``) plus a single Redis
lookup against the deny-list written by ``invalidate`` and ``refresh``.
"""

import asyncio
import logging
from datetime import UTC, datetime

from jose import ExpiredSignatureError, JWTError
from redis.asyncio import Redis

from app.auth.security import create_access_token, decode_token, verify_password
from app.auth.token_revocation import is_token_revoked, revoke_token
from app.constants import TOKEN_TYPE_ACCESS
from app.exceptions import InvalidTokenError, TokenExpiredError
from app.models.user import User
from app.schemas.auth import TokenUser

logger = logging.getLogger(__name__)


class TokenService:
    """Mints and validates access tokens bound to a user identity."""

    def __init__(self, redis: Redis):
        self._redis = redis

    def issue(self, user: User) -> str:
        return create_access_token(user.id, email=user.email)

    async def attempt(self, user: User, password: str) -> str | None:
        """Issue a token if *password* matches the user's stored hash."""
        # bcrypt is CPU-bound; keep it off the event loop
        if not await asyncio.to_thread(verify_password, password, user.password):
            return None
        return self.issue(user)

    async def verify(self, token: str) -> TokenUser:
        """Resolve *token* to the identity it was issued for.

        Raises:
            TokenExpiredError: The token's ``exp`` has passed.
            InvalidTokenError: Malformed, badly signed, wrong type, or revoked.
        """
        try:
            payload = decode_token(token)
        except ExpiredSignatureError as exc:
            raise TokenExpiredError() from exc
        except JWTError as exc:
            raise InvalidTokenError() from exc

        user_id = payload.get("sub")
        jti = payload.get("jti")
        exp = payload.get("exp")
        if not user_id or not jti or exp is None or payload.get("type") != TOKEN_TYPE_ACCESS:
            raise InvalidTokenError()

        if await is_token_revoked(self._redis, jti):
            raise InvalidTokenError("Token has been revoked")

        return TokenUser(
            id=user_id,
            email=payload.get("email", ""),
            jti=jti,
            expires_at=datetime.fromtimestamp(exp, tz=UTC),
        )

    async def refresh(self, token: str) -> str:
        """Exchange a valid *token* for a new one; the old one is revoked."""
        identity = await self.verify(token)
        await self._revoke(identity)
        logger.debug("Revoked jti=%s on refresh", identity.jti)
        return create_access_token(identity.id, email=identity.email)

    async def invalidate(self, token: str) -> None:
        """Revoke *token* for the rest of its lifetime."""
        identity = await self.verify(token)
        await self._revoke(identity)
        logger.debug("Revoked jti=%s on logout", identity.jti)

    async def _revoke(self, identity: TokenUser) -> None:
        """Revoke *identity*'s token; losing a concurrent race counts as revoked."""
        if not await revoke_token(self._redis, identity.jti, identity.expires_at):
            raise InvalidTokenError("Token has been revoked")
