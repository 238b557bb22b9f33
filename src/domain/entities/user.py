"""
User Entity

Represents a person practicing questions.
"""

from datetime import datetime
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, SQLModel

from src.domain.base import utc_now


class User(SQLModel, table=True):
    """
    User entity - identity record for a practicing user.

    Business Rules:
    - Email must be unique across all users (exact match)
    - Password stored as bcrypt hash (cost factor 12)
    - Color is a "#RRGGBB" display color picked at registration
    - Admin privilege comes from a row in the admins table
    """

    __tablename__ = "users"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    email: str = Field(unique=True, index=True, max_length=255)
    first_name: str = Field(max_length=255)
    last_name: str = Field(max_length=255)
    password_hash: str = Field(max_length=60)  # Bcrypt output is 60 chars
    color: str = Field(max_length=7)

    created_at: datetime = Field(
        default_factory=utc_now, sa_column=Column(DateTime)
    )
