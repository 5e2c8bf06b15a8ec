"""Shared test fixtures for the user auth service."""

import os

# Set test settings before any app imports trigger Settings() validation.
os.environ.setdefault("JWT_SECRET_KEY", "test-secret-for-unit-tests-0123456789abcdef")
os.environ.setdefault("BCRYPT_ROUNDS", "4")

import uuid  # noqa: E402
from collections.abc import AsyncGenerator  # noqa: E402
from datetime import UTC, datetime  # noqa: E402
from types import SimpleNamespace  # noqa: E402
from unittest.mock import AsyncMock, MagicMock  # noqa: E402

import fakeredis.aioredis  # noqa: E402
import pytest_asyncio  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402

from app.auth.security import hash_password  # noqa: E402
from app.main import app  # noqa: E402
from app.providers import get_user_repository  # noqa: E402
from tests.helpers.user_store import InMemoryUserRepository  # noqa: E402

# ---------------------------------------------------------------------------
# Fake Redis (drop-in async replacement)
# ---------------------------------------------------------------------------


def _make_fake_redis():
    """Create a fakeredis instance that behaves like redis.asyncio.Redis."""
    return fakeredis.aioredis.FakeRedis(decode_responses=True)


# ---------------------------------------------------------------------------
# Mock DB session
# ---------------------------------------------------------------------------


def _make_mock_session():
    """Create a mock async DB session.

    Supports ``async with factory() as session`` used by
    ``get_db_session`` and by the readiness probe (``SELECT 1``).
    """
    session = AsyncMock()
    session.add = MagicMock()
    result_mock = MagicMock()
    result_mock.scalar.return_value = 1
    session.execute.return_value = result_mock
    session.close = AsyncMock()
    return session


def _make_mock_session_factory():
    """Return a callable that mimics ``async_sessionmaker().__call__()``."""
    mock_session = _make_mock_session()
    factory = MagicMock()
    ctx = AsyncMock()
    ctx.__aenter__.return_value = mock_session
    factory.return_value = ctx
    return factory, mock_session


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest_asyncio.fixture()
async def user_store() -> InMemoryUserRepository:
    """Empty in-memory credential store."""
    return InMemoryUserRepository()


@pytest_asyncio.fixture()
async def redis_client():
    """Provide a fake Redis client."""
    client = _make_fake_redis()
    yield client
    await client.aclose()


@pytest_asyncio.fixture()
async def client(user_store, redis_client) -> AsyncGenerator[AsyncClient, None]:
    """Async HTTP client wired to the FastAPI app.

    The database is replaced by ``user_store`` and Redis by fakeredis, so
    tests run without external services.
    """
    session_factory, _ = _make_mock_session_factory()

    app.state.engine = MagicMock()
    app.state.session_factory = session_factory
    app.state.redis = redis_client
    app.dependency_overrides[get_user_repository] = lambda: user_store

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.pop(get_user_repository, None)


@pytest_asyncio.fixture()
async def db_session():
    """Provide a mock database session for repository tests."""
    return _make_mock_session()


# ---------------------------------------------------------------------------
# Factory helpers
# ---------------------------------------------------------------------------

_NOW = datetime.now(UTC)


def make_user_model(password: str = "secret1", **overrides) -> SimpleNamespace:
    """Return a SimpleNamespace that looks like a User ORM instance."""
    data = {
        "id": str(uuid.uuid4()),
        "firstname": "Jo",
        "lastname": "Do",
        "email": "a@b.com",
        "password": hash_password(password),
        "created_at": _NOW,
        "updated_at": _NOW,
    }
    data.update(overrides)
    return SimpleNamespace(**data)


def make_register_payload(**overrides) -> dict:
    """Build a valid registration payload."""
    data = {
        "firstname": "Jo",
        "lastname": "Do",
        "email": "a@b.com",
        "password": "secret1",
        "confirm_password": "secret1",
    }
    data.update(overrides)
    return data
