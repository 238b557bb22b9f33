"""
Authentication Use Case DTOs (Data Transfer Objects)

Success payloads of the auth workflow. Failures travel as Error values.
"""

from typing import Optional

from pydantic import BaseModel


class AuthSuccess(BaseModel):
    """Login/registration outcome: where to go next and the token to persist"""

    redirect_to: str
    session_token: str


class ActionSuccess(BaseModel):
    """Outcome of a password reset step"""

    redirect_to: Optional[str] = None
