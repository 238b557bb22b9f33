"""
Background Notification Service

Fire-and-forget delivery of transactional email.
"""

import asyncio
import logging
from typing import Awaitable, Set

from src.app.services.notification_service import INotificationService
from .email_client import EmailClient

logger = logging.getLogger(__name__)

REGISTER_SUBJECT = "Welcome to Practice Questions"
REGISTER_MESSAGE = "Your account has been created. Good luck with your practice!"
RESET_PASSWORD_SUBJECT = "Password reset"
RESET_PASSWORD_MESSAGE = "Use this code to reset your password: {code}"


class BackgroundNotificationService(INotificationService):
    """
    Schedules each email as a detached asyncio task.

    Callers return immediately. Delivery failures are logged and dropped;
    they never reach the request that triggered the email. Pending tasks are
    referenced until done so they are not garbage collected mid-flight.
    """

    def __init__(self, email_client: EmailClient):
        self.email_client = email_client
        self._pending: Set[asyncio.Task] = set()

    def send_register_email(self, email: str) -> None:
        self._dispatch(
            self.email_client.send(email, REGISTER_SUBJECT, REGISTER_MESSAGE),
            "register",
        )

    def send_reset_password_email(self, email: str, code: str) -> None:
        self._dispatch(
            self.email_client.send(
                email, RESET_PASSWORD_SUBJECT, RESET_PASSWORD_MESSAGE.format(code=code)
            ),
            "reset_password",
        )

    @property
    def pending(self) -> int:
        return len(self._pending)

    async def drain(self) -> None:
        """Wait for every queued email to finish"""
        while self._pending:
            await asyncio.gather(*list(self._pending), return_exceptions=True)

    def _dispatch(self, send: Awaitable[None], kind: str) -> None:
        task = asyncio.create_task(self._run(send, kind))
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)

    async def _run(self, send: Awaitable[None], kind: str) -> None:
        try:
            await send
        except Exception:
            logger.exception(f"Failed to send {kind} email")
