"""Protocol definitions for repository interfaces.

These protocols enable type-safe mocking in tests and decouple service
layer code from concrete SQLAlchemy implementations.
"""

from typing import Protocol

from app.models.user import User


class UserRepositoryProtocol(Protocol):
    """Interface for user account data access."""

    async def get_by_email(self, email: str) -> User | None: ...

    async def get_by_id(self, user_id: str) -> User | None: ...

    async def create(
        self,
        *,
        firstname: str,
        lastname: str,
        email: str,
        hashed_password: str,
    ) -> User: ...
