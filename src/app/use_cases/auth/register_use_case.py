import logging
from typing import Any, Mapping

from src.app.repositories.user_repository import DuplicateEmailError
from src.app.services.notification_service import INotificationService
from src.app.services.password_hasher import IPasswordHasher
from src.app.services.token_issuer import ITokenIssuer, SessionClaims
from src.app.services.unit_of_work import UnitOfWork
from src.domain.color import generate_color
from src.domain.entities import User
from src.domain.result import Error, Result, Return
from .dtos import AuthSuccess
from .forms import RegisterForm, parse_form

logger = logging.getLogger(__name__)


class RegisterUseCase:
    """
    Register Use Case

    Business Logic:
    1. Validate form shape (email, names, password length)
    2. Reject mismatched password confirmation before touching the store
    3. Reject already registered email (DUPLICATE_USER)
    4. Pick a random display color and hash the password
    5. Create the User and commit
    6. Issue a session token (self-registered users are never admins)
    7. Queue the welcome email without waiting for it
    """

    def __init__(
        self,
        uow: UnitOfWork,
        password_hasher: IPasswordHasher,
        token_issuer: ITokenIssuer,
        notifications: INotificationService,
    ):
        self.uow = uow
        self.password_hasher = password_hasher
        self.token_issuer = token_issuer
        self.notifications = notifications

    async def execute(self, data: Mapping[str, Any]) -> Result[AuthSuccess]:
        parsed = parse_form(RegisterForm, data)
        if parsed.is_err():
            return parsed
        form = parsed.value

        if form.password != form.confirm_password:
            return Return.err(
                Error.for_field(
                    "PASSWORD_MISMATCH", "confirmPassword", "Passwords do not match"
                )
            )

        duplicate = Error.for_field("DUPLICATE_USER", "email", "User already exists")

        async with self.uow:
            existing_user = await self.uow.users.get_by_email(form.email)
            if existing_user:
                return Return.err(duplicate)

            user = User(
                email=form.email,
                first_name=form.first_name,
                last_name=form.last_name,
                password_hash=self.password_hasher.hash(form.password),
                color=generate_color(),
            )
            try:
                user = await self.uow.users.create(user)
            except DuplicateEmailError:
                # Lost a race with a concurrent registration for the same email
                return Return.err(duplicate)

            await self.uow.commit()

        token = self.token_issuer.issue(
            SessionClaims(
                id=str(user.id),
                email=user.email,
                first_name=user.first_name,
                last_name=user.last_name,
                color=user.color,
                is_admin=False,
            )
        )
        logger.info(f"Registered user {user.id}")

        self.notifications.send_register_email(user.email)

        return Return.ok(AuthSuccess(redirect_to="/", session_token=token))
