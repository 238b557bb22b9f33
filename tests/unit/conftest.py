import pytest
from unittest.mock import AsyncMock, MagicMock

from src.adapter.services.bcrypt_password_hasher import BcryptPasswordHasher
from src.adapter.services.jwt_token_issuer import JwtTokenIssuer
from src.app.services.notification_service import INotificationService

TEST_SECRET = "unit-test-secret"


@pytest.fixture
def mock_uow():
    """Mock UnitOfWork with all repositories"""
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()

    uow.users = MagicMock()
    uow.users.get_by_email = AsyncMock(return_value=None)
    uow.users.get_by_id = AsyncMock(return_value=None)
    uow.users.create = AsyncMock(side_effect=lambda user: user)
    uow.users.update_password = AsyncMock()

    uow.admins = MagicMock()
    uow.admins.get_by_user_id = AsyncMock(return_value=None)

    uow.reset_password_requests = MagicMock()
    uow.reset_password_requests.get_by_code = AsyncMock(return_value=None)
    uow.reset_password_requests.get_by_id = AsyncMock(return_value=None)
    uow.reset_password_requests.upsert_for_user = AsyncMock()
    uow.reset_password_requests.delete = AsyncMock()

    return uow


@pytest.fixture(scope="session")
def password_hasher():
    # Low cost factor keeps the suite fast
    return BcryptPasswordHasher(rounds=4)


@pytest.fixture
def token_issuer():
    return JwtTokenIssuer(secret=TEST_SECRET, algorithm="HS256", expires_minutes=15)


@pytest.fixture
def notifications():
    return MagicMock(spec=INotificationService)
