from fastapi import APIRouter, Depends, status
from pydantic import BaseModel

from src.app.services.token_issuer import SessionClaims
from src.depends import get_current_user
from src.domain.color import is_color_dark, shift_color

router = APIRouter(tags=["User"])


class MeResponse(BaseModel):
    """GET /me response payload"""

    id: str
    email: str
    first_name: str
    last_name: str
    is_admin: bool
    color: str
    accent_color: str
    is_dark: bool


@router.get("/me", status_code=status.HTTP_200_OK, response_model=MeResponse)
async def get_me(current_user: SessionClaims = Depends(get_current_user)):
    """
    Current Session

    Returns the identity carried by the session cookie, with the display
    colors the UI derives from the user's color.

    Raises:
        - 401 Unauthorized: Missing, invalid or expired session cookie
    """
    return MeResponse(
        **current_user.model_dump(),
        accent_color=shift_color(current_user.color),
        is_dark=is_color_dark(current_user.color),
    )
