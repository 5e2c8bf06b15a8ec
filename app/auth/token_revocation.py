"""Redis-backed deny-list of revoked token IDs.

Logout and refresh revoke the presented token by storing its ``jti`` with
a TTL equal to the token's remaining lifetime; the entry disappears once
the signature check alone would reject the token.
"""

import math
from datetime import UTC, datetime

from redis.asyncio import Redis

_DENY_PREFIX = "token:deny:"


def _deny_key(jti: str) -> str:
    return f"{_DENY_PREFIX}{jti}"


async def revoke_token(redis: Redis, jti: str, expires_at: datetime) -> bool:
    """Deny *jti* until *expires_at*.

    Returns ``False`` if *jti* was already denied.  The check and the write
    are a single ``SET NX`` so only one of several concurrent callers wins.
    Already-expired tokens need no entry and return ``True``.
    """
    remaining = math.ceil((expires_at - datetime.now(UTC)).total_seconds())
    if remaining <= 0:
        return True
    return bool(await redis.set(_deny_key(jti), "1", ex=remaining, nx=True))


async def is_token_revoked(redis: Redis, jti: str) -> bool:
    """Return ``True`` if *jti* has been revoked."""
    return await redis.exists(_deny_key(jti)) > 0
