from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from src.domain.entities import Admin


class IAdminRepository(ABC):
    """Admin repository interface - application layer"""

    @abstractmethod
    async def get_by_user_id(self, user_id: UUID) -> Optional[Admin]:
        """Get the admin record of a user, if any"""
        pass
