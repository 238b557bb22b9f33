from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional
from uuid import UUID

from src.domain.entities import ResetPasswordRequest


class ResetCodeConflictError(Exception):
    """Raised when a reset code is already held by another request"""


class IResetPasswordRequestRepository(ABC):
    """ResetPasswordRequest repository interface - application layer"""

    @abstractmethod
    async def get_by_code(self, code: str) -> Optional[ResetPasswordRequest]:
        """Get reset request by code"""
        pass

    @abstractmethod
    async def get_by_id(self, request_id: UUID) -> Optional[ResetPasswordRequest]:
        """Get reset request by ID"""
        pass

    @abstractmethod
    async def upsert_for_user(
        self, user_id: UUID, code: str, valid_until: datetime
    ) -> ResetPasswordRequest:
        """
        Create the user's reset request, or overwrite code and deadline
        of the existing one. Raises ResetCodeConflictError if the code is taken.
        """
        pass

    @abstractmethod
    async def delete(self, request: ResetPasswordRequest) -> None:
        """Delete a reset request"""
        pass
