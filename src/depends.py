from fastapi import Depends, Request, status
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession
from config import ApplicationConfig
from src.adapter.services.background_notification_service import (
    BackgroundNotificationService,
)
from src.adapter.services.bcrypt_password_hasher import BcryptPasswordHasher
from src.adapter.services.email_client import EmailClient
from src.adapter.services.jwt_token_issuer import JwtTokenIssuer
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.api.error import ClientError
from src.api.utils.session_cookie import SessionCookie
from src.app.services.notification_service import INotificationService
from src.app.services.password_hasher import IPasswordHasher
from src.app.services.token_issuer import ITokenIssuer, SessionClaims
from src.domain.result import Error

engine = create_async_engine(ApplicationConfig.DB_URI, echo=False, future=True)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)

password_hasher = BcryptPasswordHasher(rounds=ApplicationConfig.BCRYPT_ROUNDS)

token_issuer = JwtTokenIssuer(
    secret=ApplicationConfig.JWT_SECRET,
    algorithm=ApplicationConfig.JWT_ALGORITHM,
    expires_minutes=ApplicationConfig.SESSION_TOKEN_EXPIRE_MINUTES,
)

notification_service = BackgroundNotificationService(
    EmailClient(
        ApplicationConfig.EMAIL_SERVICE_URL,
        timeout=ApplicationConfig.EMAIL_TIMEOUT_SECONDS,
    )
)

session_cookie = SessionCookie(ApplicationConfig.SESSION_COOKIE_NAME)


async def get_unit_of_work():
    async with AsyncSessionLocal() as session:
        yield SqlAlchemyUnitOfWork(session)


def get_password_hasher() -> IPasswordHasher:
    return password_hasher


def get_token_issuer() -> ITokenIssuer:
    return token_issuer


def get_notification_service() -> INotificationService:
    return notification_service


def get_session_cookie() -> SessionCookie:
    return session_cookie


async def get_current_user(
    request: Request,
    cookie: SessionCookie = Depends(get_session_cookie),
    issuer: ITokenIssuer = Depends(get_token_issuer),
) -> SessionClaims:
    """
    Dependency to extract and verify the session token from its cookie.

    Returns:
        Claims carried by the token

    Raises:
        ClientError: 401 if the cookie is missing, or the token is invalid or expired
    """
    token = cookie.read(request)
    claims = issuer.verify(token) if token else None

    if claims is None:
        raise ClientError(
            Error("UNAUTHENTICATED", "Invalid or expired session"),
            status_code=status.HTTP_401_UNAUTHORIZED,
        )

    return claims
