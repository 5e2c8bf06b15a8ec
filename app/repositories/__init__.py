"""Database repositories for data access."""
from app.repositories.user_repository import DuplicateEmailError, UserRepository

__all__ = [
    "DuplicateEmailError",
    "UserRepository",
]
