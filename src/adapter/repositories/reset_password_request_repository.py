from datetime import datetime
from typing import Optional
from uuid import UUID

from sqlalchemy.exc import IntegrityError
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.reset_password_request_repository import (
    IResetPasswordRequestRepository,
    ResetCodeConflictError,
)
from src.domain.entities import ResetPasswordRequest


class ResetPasswordRequestRepository(IResetPasswordRequestRepository):
    """ResetPasswordRequest repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_code(self, code: str) -> Optional[ResetPasswordRequest]:
        """Get reset request by code"""
        stmt = select(ResetPasswordRequest).where(ResetPasswordRequest.code == code)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_id(self, request_id: UUID) -> Optional[ResetPasswordRequest]:
        """Get reset request by ID"""
        stmt = select(ResetPasswordRequest).where(ResetPasswordRequest.id == request_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def upsert_for_user(
        self, user_id: UUID, code: str, valid_until: datetime
    ) -> ResetPasswordRequest:
        """Create or overwrite the reset request keyed by user"""
        stmt = select(ResetPasswordRequest).where(
            ResetPasswordRequest.user_id == user_id
        )
        result = await self.session.exec(stmt)
        request = result.one_or_none()

        if request is None:
            request = ResetPasswordRequest(
                user_id=user_id, code=code, valid_until=valid_until
            )
        else:
            request.code = code
            request.valid_until = valid_until

        self.session.add(request)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise ResetCodeConflictError(code) from exc
        await self.session.refresh(request)
        return request

    async def delete(self, request: ResetPasswordRequest) -> None:
        """Delete a reset request"""
        await self.session.delete(request)
        await self.session.flush()
