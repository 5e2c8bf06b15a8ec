"""Password hashing and JWT encode/decode primitives.

Passwords are hashed with bcrypt (salted, one-way).  Tokens are HS256 JWTs
carrying ``sub`` (user id), ``email``, ``type``, ``jti``, ``iat`` and
``exp``.  Every token gets a fresh random ``jti`` so two tokens issued for
the same user in the same second are still distinct, and so a single token
can be put on the deny-list (see ``app.auth.token_revocation``).
"""

import uuid
from datetime import UTC, datetime, timedelta
from typing import Any

import bcrypt
from jose import jwt

from app.config import get_settings
from app.constants import TOKEN_TYPE_ACCESS


def hash_password(password: str) -> str:
    """Hash *password* with a per-password salt."""
    salt = bcrypt.gensalt(rounds=get_settings().bcrypt_rounds)
    return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Return ``True`` if *plain_password* matches *hashed_password*."""
    try:
        return bcrypt.checkpw(plain_password.encode("utf-8"), hashed_password.encode("utf-8"))
    except ValueError:
        # Stored value is not a bcrypt hash
        return False


def create_access_token(user_id: str, email: str = "") -> str:
    """Create a signed access token for *user_id*."""
    settings = get_settings()
    now = datetime.now(UTC)
    payload = {
        "sub": user_id,
        "email": email,
        "type": TOKEN_TYPE_ACCESS,
        "jti": uuid.uuid4().hex,
        "iat": now,
        "exp": now + timedelta(minutes=settings.jwt_access_token_expire_minutes),
    }
    return jwt.encode(payload, settings.jwt_secret_key, algorithm=settings.jwt_algorithm)


def decode_token(token: str) -> dict[str, Any]:
    """Decode and validate a JWT token. Raises JWTError on failure."""
    settings = get_settings()
    return jwt.decode(token, settings.jwt_secret_key, algorithms=[settings.jwt_algorithm])
