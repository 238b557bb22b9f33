"""
Email Client

Talks to the transactional email service over HTTP.
"""

import logging
from typing import Optional

import httpx

logger = logging.getLogger(__name__)


class EmailDeliveryError(Exception):
    """Raised when the email service rejects a message"""


class EmailClient:
    """
    POSTs {"email", "subject", "message"} to {base_url}/send-email.

    With an empty base_url nothing is sent and the message is logged instead,
    which is what local development runs with.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.transport = transport

    async def send(self, email: str, subject: str, message: str) -> None:
        if not self.base_url:
            logger.info(f"Email service not configured, skipping '{subject}' to {email}")
            return

        data = {"email": email, "subject": subject, "message": message}
        async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
            response = await client.post(f"{self.base_url}/send-email", json=data)

        if response.status_code >= 300:
            raise EmailDeliveryError(
                f"Email service returned {response.status_code}: {response.text}"
            )
