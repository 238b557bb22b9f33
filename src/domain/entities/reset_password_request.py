"""
ResetPasswordRequest Entity

One-time password recovery codes.
"""

from datetime import datetime
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from src.domain.base import utc_now


class ResetPasswordRequest(SQLModel, table=True):
    """
    ResetPasswordRequest entity - one live recovery code per user.

    Business Rules:
    - At most one request per user: re-requesting overwrites code and deadline
    - Code is a 5-digit numeric string, unique across all requests
    - Usable only while now <= valid_until (10 minute window)
    - Deleted once the new password has been applied
    """

    __tablename__ = "reset_password_requests"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    user_id: UUID = Field(foreign_key="users.id", unique=True)
    code: str = Field(unique=True, index=True, max_length=5)

    valid_until: datetime = Field(sa_column=Column(DateTime, nullable=False))
    created_at: datetime = Field(
        default_factory=utc_now, sa_column=Column(DateTime)
    )

    __table_args__ = (Index("idx_reset_password_valid_until", "valid_until"),)

    def is_expired(self, now: datetime) -> bool:
        return self.valid_until < now
