"""
Request Password Reset Use Case

Issues a short numeric reset code and emails it to the user.
"""

import logging
from datetime import datetime, timedelta
from typing import Any, Callable, Mapping

from src.app.repositories.reset_password_request_repository import (
    ResetCodeConflictError,
)
from src.app.services.notification_service import INotificationService
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utc_now
from src.domain.reset_code import generate_reset_code
from src.domain.result import Error, Result, Return
from .dtos import ActionSuccess
from .forms import ResetEmailForm, parse_form

logger = logging.getLogger(__name__)

RESET_CODE_TTL = timedelta(minutes=10)
MAX_CODE_ATTEMPTS = 5


class RequestPasswordResetUseCase:
    """
    Use case for requesting a password reset code.

    Business Rules:
    - 5-digit code, valid for 10 minutes
    - One live request per user: a new request overwrites code and deadline
    - Unknown email is reported as USER_NOT_FOUND
    - A code already held by another user's request is regenerated; after
      MAX_CODE_ATTEMPTS the caller gets a retryable TRANSIENT_ERROR
    - The email is queued after the code is committed and is never awaited
    """

    def __init__(
        self,
        uow: UnitOfWork,
        notifications: INotificationService,
        clock: Callable[[], datetime] = utc_now,
        code_generator: Callable[[], str] = generate_reset_code,
        ttl: timedelta = RESET_CODE_TTL,
    ):
        self.uow = uow
        self.notifications = notifications
        self.clock = clock
        self.code_generator = code_generator
        self.ttl = ttl

    async def execute(self, data: Mapping[str, Any]) -> Result[ActionSuccess]:
        """
        Execute request password reset use case.

        Args:
            data: Submitted form fields (email)

        Returns:
            Result with ActionSuccess, or Error VALIDATION_ERROR /
            USER_NOT_FOUND / TRANSIENT_ERROR
        """
        parsed = parse_form(ResetEmailForm, data)
        if parsed.is_err():
            return parsed
        form = parsed.value

        async with self.uow:
            user = await self.uow.users.get_by_email(form.email)
            if user is None:
                return Return.err(
                    Error.for_field("USER_NOT_FOUND", "email", "User does not exist")
                )

            # Keep plain values, a rollback below expires loaded entities
            user_id = user.id
            email = user.email

            for attempt in range(1, MAX_CODE_ATTEMPTS + 1):
                code = self.code_generator()

                holder = await self.uow.reset_password_requests.get_by_code(code)
                if holder is not None and holder.user_id != user_id:
                    logger.warning(f"Reset code collision on attempt {attempt}")
                    continue

                try:
                    await self.uow.reset_password_requests.upsert_for_user(
                        user_id, code, self.clock() + self.ttl
                    )
                    await self.uow.commit()
                except ResetCodeConflictError:
                    logger.warning(f"Reset code taken concurrently on attempt {attempt}")
                    await self.uow.rollback()
                    continue
                break
            else:
                logger.error(f"Could not issue a reset code for user {user_id}")
                return Return.err(
                    Error(
                        "TRANSIENT_ERROR",
                        "Could not issue a reset code, please try again",
                    )
                )

        logger.info(f"Issued reset code for user {user_id}")
        self.notifications.send_reset_password_email(email, code)

        return Return.ok(ActionSuccess(redirect_to="/"))
