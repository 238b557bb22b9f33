from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from src.domain.entities import User


class DuplicateEmailError(Exception):
    """Raised when a user insert hits the unique email constraint"""


class IUserRepository(ABC):
    """User repository interface - application layer"""

    @abstractmethod
    async def get_by_email(self, email: str) -> Optional[User]:
        """Get user by email address"""
        pass

    @abstractmethod
    async def get_by_id(self, user_id: UUID) -> Optional[User]:
        """Get user by ID"""
        pass

    @abstractmethod
    async def create(self, user: User) -> User:
        """Create a new user, raises DuplicateEmailError on conflict"""
        pass

    @abstractmethod
    async def update_password(self, user_id: UUID, password_hash: str) -> None:
        """Replace the stored password hash of a user"""
        pass
