"""
Apply New Password Use Case

Final step of the password reset flow.
"""

import logging
from datetime import datetime
from typing import Any, Callable, Mapping
from uuid import UUID

from src.app.services.password_hasher import IPasswordHasher
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utc_now
from src.domain.result import Error, Result, Return
from .dtos import ActionSuccess
from .forms import NewPasswordForm, parse_form

logger = logging.getLogger(__name__)


class ApplyNewPasswordUseCase:
    """
    Use case for setting a new password through a verified reset request.

    Business Rules:
    - Reset request is identified by its id, never by the code
    - Mismatched confirmation is rejected before the store is touched
    - Request must still be within its validity window
    - Request is deleted once used, so the id and code cannot be replayed
    """

    def __init__(
        self,
        uow: UnitOfWork,
        password_hasher: IPasswordHasher,
        clock: Callable[[], datetime] = utc_now,
    ):
        self.uow = uow
        self.password_hasher = password_hasher
        self.clock = clock

    async def execute(
        self, reset_request_id: UUID, data: Mapping[str, Any]
    ) -> Result[ActionSuccess]:
        """
        Execute apply new password use case.

        Args:
            reset_request_id: Id handed out by the verify step
            data: Submitted form fields (password, confirmPassword)

        Returns:
            Result with ActionSuccess (no redirect), or Error

        Errors:
            - VALIDATION_ERROR: Form shape
            - PASSWORD_MISMATCH: Confirmation differs
            - INVALID_CODE: Reset request not found (unknown or already used)
            - EXPIRED_CODE: Reset request past its deadline
            - USER_NOT_FOUND: Owning user no longer exists
        """
        parsed = parse_form(NewPasswordForm, data)
        if parsed.is_err():
            return parsed
        form = parsed.value

        if form.password != form.confirm_password:
            return Return.err(
                Error.for_field(
                    "PASSWORD_MISMATCH", "confirmPassword", "Passwords do not match"
                )
            )

        async with self.uow:
            reset_request = await self.uow.reset_password_requests.get_by_id(
                reset_request_id
            )
            if reset_request is None:
                return Return.err(
                    Error.for_field(
                        "INVALID_CODE", "code", "Invalid or already used reset request"
                    )
                )

            if reset_request.is_expired(self.clock()):
                return Return.err(
                    Error.for_field("EXPIRED_CODE", "code", "Code has expired")
                )

            user = await self.uow.users.get_by_id(reset_request.user_id)
            if user is None:
                return Return.err(Error("USER_NOT_FOUND", "User does not exist"))

            user_id = user.id
            await self.uow.users.update_password(
                user_id, self.password_hasher.hash(form.password)
            )
            await self.uow.reset_password_requests.delete(reset_request)

            await self.uow.commit()

        logger.info(f"Password reset applied for user {user_id}")

        return Return.ok(ActionSuccess(redirect_to=None))
