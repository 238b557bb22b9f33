from abc import ABC, abstractmethod

from src.app.repositories.admin_repository import IAdminRepository
from src.app.repositories.reset_password_request_repository import (
    IResetPasswordRequestRepository,
)
from src.app.repositories.user_repository import IUserRepository


class UnitOfWork(ABC):
    """Abstract UnitOfWork - defines repository access and transaction management"""

    # Repository properties (initialized in __aenter__)
    users: IUserRepository
    admins: IAdminRepository
    reset_password_requests: IResetPasswordRequestRepository

    @abstractmethod
    async def __aenter__(self):
        pass

    @abstractmethod
    async def __aexit__(self, *args):
        pass

    @abstractmethod
    async def commit(self):
        pass

    @abstractmethod
    async def rollback(self):
        pass
