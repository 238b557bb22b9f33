"""
Login Use Case

Handles credential checks and issues the session token.
"""

import logging
from typing import Any, Mapping

from src.app.services.password_hasher import IPasswordHasher
from src.app.services.token_issuer import ITokenIssuer, SessionClaims
from src.app.services.unit_of_work import UnitOfWork
from src.domain.result import Error, Result, Return
from .dtos import AuthSuccess
from .forms import LoginForm, parse_form

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS_MESSAGE = "Invalid email or password"


class LoginUseCase:
    """
    Use case for user login and session token issuance.

    Business Rules:
    - Form is validated before the store is touched
    - Unknown email and wrong password give the same error, attached to
      the email field, so the response does not reveal registered emails
    - A dummy hash check runs for unknown emails to keep timing comparable
    - Admin flag comes from the presence of an admins row
    """

    def __init__(
        self,
        uow: UnitOfWork,
        password_hasher: IPasswordHasher,
        token_issuer: ITokenIssuer,
    ):
        self.uow = uow
        self.password_hasher = password_hasher
        self.token_issuer = token_issuer

    async def execute(self, data: Mapping[str, Any]) -> Result[AuthSuccess]:
        """
        Execute login use case.

        Args:
            data: Submitted form fields (email, password)

        Returns:
            Result with AuthSuccess, or Error VALIDATION_ERROR / INVALID_CREDENTIALS
        """
        parsed = parse_form(LoginForm, data)
        if parsed.is_err():
            return parsed
        form = parsed.value

        async with self.uow:
            user = await self.uow.users.get_by_email(form.email)

            if user is None:
                self.password_hasher.dummy_verify()
                return Return.err(
                    Error.for_field(
                        "INVALID_CREDENTIALS", "email", INVALID_CREDENTIALS_MESSAGE
                    )
                )

            if not self.password_hasher.verify(form.password, user.password_hash):
                logger.info(f"Failed login for user {user.id}")
                return Return.err(
                    Error.for_field(
                        "INVALID_CREDENTIALS", "email", INVALID_CREDENTIALS_MESSAGE
                    )
                )

            admin = await self.uow.admins.get_by_user_id(user.id)

            token = self.token_issuer.issue(
                SessionClaims(
                    id=str(user.id),
                    email=user.email,
                    first_name=user.first_name,
                    last_name=user.last_name,
                    color=user.color,
                    is_admin=admin is not None,
                )
            )
            logger.info(f"User {user.id} logged in")

            return Return.ok(AuthSuccess(redirect_to="/", session_token=token))
