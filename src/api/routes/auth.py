from datetime import timedelta
from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Request, Response, status
from pydantic import BaseModel

from config import ApplicationConfig

from src.api.error import raise_for_error
from src.api.utils.session_cookie import SessionCookie
from src.app.services.notification_service import INotificationService
from src.app.services.password_hasher import IPasswordHasher
from src.app.services.token_issuer import ITokenIssuer
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.auth import (
    ApplyNewPasswordUseCase,
    LoginUseCase,
    RegisterUseCase,
    RequestPasswordResetUseCase,
    VerifyResetCodeUseCase,
)
from src.depends import (
    get_notification_service,
    get_password_hasher,
    get_session_cookie,
    get_token_issuer,
    get_unit_of_work,
)

router = APIRouter(prefix="/auth", tags=["Authentication"])


class WorkflowResponse(BaseModel):
    """Success body shared by every auth form endpoint"""

    success: bool = True
    redirect_to: Optional[str] = None


async def read_form(request: Request) -> dict:
    form = await request.form()
    return dict(form)


@router.post("/login", status_code=status.HTTP_200_OK, response_model=WorkflowResponse)
async def login(
    response: Response,
    form: dict = Depends(read_form),
    uow: UnitOfWork = Depends(get_unit_of_work),
    password_hasher: IPasswordHasher = Depends(get_password_hasher),
    token_issuer: ITokenIssuer = Depends(get_token_issuer),
    cookie: SessionCookie = Depends(get_session_cookie),
):
    """
    User Login

    Form fields: email, password.
    Sets the session cookie on success.

    Raises:
        - 401 Unauthorized: Invalid email or password
        - 422 Unprocessable Entity: Malformed form
    """
    use_case = LoginUseCase(uow, password_hasher, token_issuer)
    result = await use_case.execute(form)

    if result.is_err():
        raise_for_error(result.error)

    cookie.set(response, result.value.session_token)
    return WorkflowResponse(redirect_to=result.value.redirect_to)


@router.post(
    "/register", status_code=status.HTTP_201_CREATED, response_model=WorkflowResponse
)
async def register(
    response: Response,
    form: dict = Depends(read_form),
    uow: UnitOfWork = Depends(get_unit_of_work),
    password_hasher: IPasswordHasher = Depends(get_password_hasher),
    token_issuer: ITokenIssuer = Depends(get_token_issuer),
    notifications: INotificationService = Depends(get_notification_service),
    cookie: SessionCookie = Depends(get_session_cookie),
):
    """
    User Registration

    Form fields: email, firstName, lastName, password, confirmPassword.
    Creates the account, sets the session cookie and queues a welcome email.

    Raises:
        - 400 Bad Request: Passwords do not match
        - 409 Conflict: Email already registered
        - 422 Unprocessable Entity: Malformed form
    """
    use_case = RegisterUseCase(uow, password_hasher, token_issuer, notifications)
    result = await use_case.execute(form)

    if result.is_err():
        raise_for_error(result.error)

    cookie.set(response, result.value.session_token)
    return WorkflowResponse(redirect_to=result.value.redirect_to)


@router.post("/logout", status_code=status.HTTP_200_OK, response_model=WorkflowResponse)
async def logout(response: Response, cookie: SessionCookie = Depends(get_session_cookie)):
    """Clear the session cookie. Tokens are not revoked server side."""
    cookie.clear(response)
    return WorkflowResponse(redirect_to="/login")


@router.post(
    "/reset-password", status_code=status.HTTP_200_OK, response_model=WorkflowResponse
)
async def request_password_reset(
    form: dict = Depends(read_form),
    uow: UnitOfWork = Depends(get_unit_of_work),
    notifications: INotificationService = Depends(get_notification_service),
):
    """
    Request Password Reset

    Form fields: email.
    Stores a 5-digit code valid for RESET_CODE_TTL_MINUTES and emails it.

    Raises:
        - 404 Not Found: No user with that email
        - 422 Unprocessable Entity: Malformed form
        - 503 Service Unavailable: No free reset code, retry
    """
    use_case = RequestPasswordResetUseCase(
        uow,
        notifications,
        ttl=timedelta(minutes=ApplicationConfig.RESET_CODE_TTL_MINUTES),
    )
    result = await use_case.execute(form)

    if result.is_err():
        raise_for_error(result.error)

    return WorkflowResponse(redirect_to=result.value.redirect_to)


@router.post(
    "/reset-password/verify",
    status_code=status.HTTP_200_OK,
    response_model=WorkflowResponse,
)
async def verify_reset_code(
    form: dict = Depends(read_form),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Verify Reset Code

    Form fields: code.
    Redirects to /reset-code/{reset_id}, the handle for the final step.

    Raises:
        - 400 Bad Request: Unknown code
        - 410 Gone: Code has expired
        - 422 Unprocessable Entity: Malformed form
    """
    use_case = VerifyResetCodeUseCase(uow)
    result = await use_case.execute(form)

    if result.is_err():
        raise_for_error(result.error)

    return WorkflowResponse(redirect_to=result.value.redirect_to)


@router.post(
    "/reset-password/{reset_id}",
    status_code=status.HTTP_200_OK,
    response_model=WorkflowResponse,
)
async def apply_new_password(
    reset_id: UUID,
    form: dict = Depends(read_form),
    uow: UnitOfWork = Depends(get_unit_of_work),
    password_hasher: IPasswordHasher = Depends(get_password_hasher),
):
    """
    Apply New Password

    Form fields: password, confirmPassword.
    The reset request is consumed on success.

    Raises:
        - 400 Bad Request: Passwords do not match, or unknown/used reset request
        - 410 Gone: Reset request has expired
        - 422 Unprocessable Entity: Malformed form
    """
    use_case = ApplyNewPasswordUseCase(uow, password_hasher)
    result = await use_case.execute(reset_id, form)

    if result.is_err():
        raise_for_error(result.error)

    return WorkflowResponse(redirect_to=result.value.redirect_to)
