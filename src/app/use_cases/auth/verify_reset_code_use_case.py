from datetime import datetime
from typing import Any, Callable, Mapping

from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utc_now
from src.domain.result import Error, Result, Return
from .dtos import ActionSuccess
from .forms import ResetCodeForm, parse_form


class VerifyResetCodeUseCase:
    """
    Checks a reset code and hands back the reset request id.

    The id, not the code, identifies the request in the final step, so the
    code does not have to be sent again.
    """

    def __init__(self, uow: UnitOfWork, clock: Callable[[], datetime] = utc_now):
        self.uow = uow
        self.clock = clock

    async def execute(self, data: Mapping[str, Any]) -> Result[ActionSuccess]:
        parsed = parse_form(ResetCodeForm, data)
        if parsed.is_err():
            return parsed
        form = parsed.value

        async with self.uow:
            reset_request = await self.uow.reset_password_requests.get_by_code(form.code)

            if reset_request is None:
                return Return.err(Error.for_field("INVALID_CODE", "code", "Invalid code"))

            if reset_request.is_expired(self.clock()):
                return Return.err(
                    Error.for_field("EXPIRED_CODE", "code", "Code has expired")
                )

            return Return.ok(
                ActionSuccess(redirect_to=f"/reset-code/{reset_request.id}")
            )
