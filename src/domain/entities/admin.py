"""
Admin Entity

Marks a user as an administrator (question reviewers).
"""

from datetime import datetime
from uuid import UUID

from sqlmodel import Column, DateTime, Field, SQLModel

from src.domain.base import utc_now


class Admin(SQLModel, table=True):
    """Presence of a row grants the admin flag in the session token."""

    __tablename__ = "admins"

    user_id: UUID = Field(foreign_key="users.id", primary_key=True)

    created_at: datetime = Field(
        default_factory=utc_now, sa_column=Column(DateTime)
    )
