"""
Unit tests for ApplyNewPasswordUseCase
"""
from datetime import datetime, timedelta
from uuid import uuid4

import pytest

from src.app.use_cases.auth.apply_new_password_use_case import ApplyNewPasswordUseCase
from src.domain.entities import ResetPasswordRequest, User

NOW = datetime(2025, 3, 1, 12, 0, 0)

VALID_FORM = {"password": "NewPass123", "confirmPassword": "NewPass123"}


@pytest.fixture
def user():
    return User(
        id=uuid4(),
        email="user@example.com",
        first_name="Ada",
        last_name="Lovelace",
        password_hash="old_hash",
        color="#ABCDEF",
    )


@pytest.fixture
def reset_request(user):
    return ResetPasswordRequest(
        id=uuid4(), user_id=user.id, code="12345", valid_until=NOW + timedelta(minutes=5)
    )


@pytest.fixture
def use_case(mock_uow, password_hasher):
    return ApplyNewPasswordUseCase(mock_uow, password_hasher, clock=lambda: NOW)


@pytest.mark.asyncio
async def test_successful_password_reset(use_case, mock_uow, password_hasher, user, reset_request):
    """Password is re-hashed and the reset request is consumed"""
    mock_uow.reset_password_requests.get_by_id.return_value = reset_request
    mock_uow.users.get_by_id.return_value = user

    result = await use_case.execute(reset_request.id, VALID_FORM)

    assert result.is_ok()
    assert result.value.redirect_to is None

    mock_uow.reset_password_requests.get_by_id.assert_called_once_with(reset_request.id)
    mock_uow.users.get_by_id.assert_called_once_with(user.id)

    mock_uow.users.update_password.assert_called_once()
    user_id, new_hash = mock_uow.users.update_password.call_args.args
    assert user_id == user.id
    assert new_hash != "NewPass123"
    assert password_hasher.verify("NewPass123", new_hash)

    mock_uow.reset_password_requests.delete.assert_called_once_with(reset_request)
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_password_mismatch_no_store_access(use_case, mock_uow, reset_request):
    result = await use_case.execute(
        reset_request.id, {"password": "abcdefgh", "confirmPassword": "different"}
    )

    assert result.is_err()
    assert result.error.code == "PASSWORD_MISMATCH"
    assert result.error.fields == {"confirmPassword": ["Passwords do not match"]}
    mock_uow.__aenter__.assert_not_called()
    mock_uow.users.update_password.assert_not_called()


@pytest.mark.asyncio
async def test_short_password(use_case, mock_uow, reset_request):
    result = await use_case.execute(
        reset_request.id, {"password": "short", "confirmPassword": "short"}
    )

    assert result.is_err()
    assert result.error.code == "VALIDATION_ERROR"
    assert set(result.error.fields) == {"password", "confirmPassword"}
    mock_uow.reset_password_requests.get_by_id.assert_not_called()


@pytest.mark.asyncio
async def test_unknown_or_used_reset_request(use_case, mock_uow):
    """Once consumed, the id no longer resolves and cannot be replayed"""
    mock_uow.reset_password_requests.get_by_id.return_value = None

    result = await use_case.execute(uuid4(), VALID_FORM)

    assert result.is_err()
    assert result.error.code == "INVALID_CODE"
    mock_uow.users.update_password.assert_not_called()
    mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
async def test_expired_reset_request(use_case, mock_uow, user):
    expired = ResetPasswordRequest(
        id=uuid4(), user_id=user.id, code="12345", valid_until=NOW - timedelta(seconds=1)
    )
    mock_uow.reset_password_requests.get_by_id.return_value = expired

    result = await use_case.execute(expired.id, VALID_FORM)

    assert result.is_err()
    assert result.error.code == "EXPIRED_CODE"
    mock_uow.users.update_password.assert_not_called()


@pytest.mark.asyncio
async def test_owner_missing(use_case, mock_uow, reset_request):
    mock_uow.reset_password_requests.get_by_id.return_value = reset_request
    mock_uow.users.get_by_id.return_value = None

    result = await use_case.execute(reset_request.id, VALID_FORM)

    assert result.is_err()
    assert result.error.code == "USER_NOT_FOUND"
    mock_uow.users.update_password.assert_not_called()
    mock_uow.reset_password_requests.delete.assert_not_called()


@pytest.mark.asyncio
async def test_password_over_bcrypt_limit(use_case, mock_uow, reset_request):
    long_password = "p" * 80

    result = await use_case.execute(
        reset_request.id, {"password": long_password, "confirmPassword": long_password}
    )

    assert result.is_err()
    assert result.error.code == "VALIDATION_ERROR"
    assert result.error.fields["password"] == ["Password must be at most 72 bytes"]
    mock_uow.reset_password_requests.get_by_id.assert_not_called()
    mock_uow.users.update_password.assert_not_called()


@pytest.mark.asyncio
async def test_password_at_bcrypt_limit(use_case, mock_uow, password_hasher, user, reset_request):
    mock_uow.reset_password_requests.get_by_id.return_value = reset_request
    mock_uow.users.get_by_id.return_value = user
    password = "p" * 72

    result = await use_case.execute(
        reset_request.id, {"password": password, "confirmPassword": password}
    )

    assert result.is_ok()
    _, new_hash = mock_uow.users.update_password.call_args.args
    assert password_hasher.verify(password, new_hash)
