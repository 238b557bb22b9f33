from typing import List, Tuple

import pytest
import pytest_asyncio
from httpx import AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession
from src.depends import get_notification_service, get_password_hasher, get_unit_of_work
from src.adapter.services.bcrypt_password_hasher import BcryptPasswordHasher
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.app.services.notification_service import INotificationService


class RecordingNotificationService(INotificationService):
    """Collects outgoing emails instead of sending them"""

    def __init__(self):
        self.register_emails: List[str] = []
        self.reset_emails: List[Tuple[str, str]] = []

    def send_register_email(self, email: str) -> None:
        self.register_emails.append(email)

    def send_reset_password_email(self, email: str, code: str) -> None:
        self.reset_emails.append((email, code))

    def last_reset_code(self) -> str:
        return self.reset_emails[-1][1]


@pytest.fixture(scope="session")
def password_hasher():
    return BcryptPasswordHasher(rounds=4)


@pytest.fixture
def notifications():
    return RecordingNotificationService()


@pytest_asyncio.fixture
async def engine(tmp_path):
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path}/test.db")
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(engine):
    Session = sessionmaker(
        engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
    )
    async with Session() as session:
        yield session


@pytest_asyncio.fixture
async def client(db_session, password_hasher, notifications):
    from httpx import ASGITransport
    from src.api.app import create_app
    from config import ApplicationConfig

    app = create_app(ApplicationConfig)

    async def override_get_unit_of_work():
        yield SqlAlchemyUnitOfWork(db_session)

    app.dependency_overrides[get_unit_of_work] = override_get_unit_of_work
    app.dependency_overrides[get_password_hasher] = lambda: password_hasher
    app.dependency_overrides[get_notification_service] = lambda: notifications

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def token_issuer_from_config():
    from src.depends import token_issuer

    return token_issuer
