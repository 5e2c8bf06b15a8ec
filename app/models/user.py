"""User database model (the credential store)."""

from sqlalchemy import Index, String
from sqlalchemy.orm import Mapped, mapped_column

from app.models.base import Base, TimestampMixin, UUIDMixin

EMAIL_UNIQUE_INDEX = "ix_users_email"


class User(Base, UUIDMixin, TimestampMixin):
    """Registered account. ``password`` always holds a bcrypt hash."""

    __tablename__ = "users"

    firstname: Mapped[str] = mapped_column(String(20), nullable=False)
    lastname: Mapped[str] = mapped_column(String(20), nullable=False)
    # Stored lower-cased; uniqueness is enforced by the index, not a pre-check
    email: Mapped[str] = mapped_column(String(100), nullable=False)
    password: Mapped[str] = mapped_column(String(255), nullable=False)

    __table_args__ = (Index(EMAIL_UNIQUE_INDEX, "email", unique=True),)

    def __repr__(self) -> str:
        return f"<User {self.email}>"
