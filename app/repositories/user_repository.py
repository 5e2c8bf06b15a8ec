"""Repository for user account data access."""

import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.user import EMAIL_UNIQUE_INDEX, User

logger = logging.getLogger(__name__)


class DuplicateEmailError(Exception):
    """Raised when attempting to create a user with an email that already exists."""

    def __init__(self, email: str):
        self.email = email
        super().__init__(f"User with email '{email}' already exists")


class UserRepository:
    """Data access layer for users.

    Emails are stored and looked up lower-cased, so the unique index on
    ``users.email`` treats ``Jo@b.com`` and ``jo@b.com`` as one account.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_email(self, email: str) -> User | None:
        """Get a user by email address."""
        query = select(User).where(User.email == email.lower())
        result = await self.session.execute(query)
        return result.scalar_one_or_none()

    async def get_by_id(self, user_id: str) -> User | None:
        """Get a user by primary key."""
        return await self.session.get(User, user_id)

    async def create(
        self,
        *,
        firstname: str,
        lastname: str,
        email: str,
        hashed_password: str,
    ) -> User:
        """Create a new user.

        Raises:
            DuplicateEmailError: If a user with the same email already exists.
            IntegrityError: Any other constraint violation.
        """
        email = email.lower()
        user = User(
            firstname=firstname,
            lastname=lastname,
            email=email,
            password=hashed_password,
        )
        self.session.add(user)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            await self.session.rollback()
            if EMAIL_UNIQUE_INDEX in str(exc.orig):
                raise DuplicateEmailError(email) from exc
            logger.error("Integrity error creating user %s: %s", email, exc.orig)
            raise
        await self.session.refresh(user)
        return user
