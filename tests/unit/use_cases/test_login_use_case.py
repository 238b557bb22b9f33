"""
Unit tests for LoginUseCase

Tests business logic with a mocked unit of work.
"""
from uuid import uuid4

import pytest

from src.app.use_cases.auth.login_use_case import LoginUseCase
from src.domain.entities import Admin, User


def make_user(password_hasher, password="password123", **overrides):
    fields = dict(
        id=uuid4(),
        email="a@x.com",
        first_name="A",
        last_name="B",
        password_hash=password_hasher.hash(password),
        color="#1A2B3C",
    )
    fields.update(overrides)
    return User(**fields)


@pytest.mark.asyncio
async def test_successful_login(mock_uow, password_hasher, token_issuer):
    """Valid credentials issue a session token and redirect home"""
    # Arrange
    user = make_user(password_hasher)
    mock_uow.users.get_by_email.return_value = user

    use_case = LoginUseCase(mock_uow, password_hasher, token_issuer)

    # Act
    result = await use_case.execute({"email": "a@x.com", "password": "password123"})

    # Assert
    assert result.is_ok()
    assert result.success is True
    assert result.value.redirect_to == "/"

    claims = token_issuer.verify(result.value.session_token)
    assert claims is not None
    assert claims.id == str(user.id)
    assert claims.email == "a@x.com"
    assert claims.first_name == "A"
    assert claims.last_name == "B"
    assert claims.color == "#1A2B3C"
    assert claims.is_admin is False

    mock_uow.users.get_by_email.assert_called_once_with("a@x.com")
    mock_uow.admins.get_by_user_id.assert_called_once_with(user.id)


@pytest.mark.asyncio
async def test_login_admin_flag_from_admin_record(mock_uow, password_hasher, token_issuer):
    """Users with an admins row get is_admin=True"""
    user = make_user(password_hasher)
    mock_uow.users.get_by_email.return_value = user
    mock_uow.admins.get_by_user_id.return_value = Admin(user_id=user.id)

    use_case = LoginUseCase(mock_uow, password_hasher, token_issuer)
    result = await use_case.execute({"email": "a@x.com", "password": "password123"})

    assert result.is_ok()
    assert token_issuer.verify(result.value.session_token).is_admin is True


@pytest.mark.asyncio
async def test_login_wrong_password(mock_uow, password_hasher, token_issuer):
    """Wrong password gives the generic error on the email field"""
    mock_uow.users.get_by_email.return_value = make_user(password_hasher)

    use_case = LoginUseCase(mock_uow, password_hasher, token_issuer)
    result = await use_case.execute({"email": "a@x.com", "password": "wrongpassword"})

    assert result.is_err()
    assert result.success is False
    assert result.error.code == "INVALID_CREDENTIALS"
    assert result.error.fields == {"email": ["Invalid email or password"]}
    mock_uow.admins.get_by_user_id.assert_not_called()


@pytest.mark.asyncio
async def test_login_unknown_email_same_error(mock_uow, password_hasher, token_issuer):
    """Unknown email is indistinguishable from a wrong password"""
    mock_uow.users.get_by_email.return_value = None

    use_case = LoginUseCase(mock_uow, password_hasher, token_issuer)
    result = await use_case.execute({"email": "nobody@x.com", "password": "password123"})

    assert result.is_err()
    assert result.error.code == "INVALID_CREDENTIALS"
    assert result.error.fields == {"email": ["Invalid email or password"]}


@pytest.mark.asyncio
async def test_login_invalid_email_format_skips_store(mock_uow, password_hasher, token_issuer):
    """Malformed email is rejected before any store access"""
    use_case = LoginUseCase(mock_uow, password_hasher, token_issuer)
    result = await use_case.execute({"email": "not-an-email", "password": "password123"})

    assert result.is_err()
    assert result.error.code == "VALIDATION_ERROR"
    assert "email" in result.error.fields
    mock_uow.__aenter__.assert_not_called()
    mock_uow.users.get_by_email.assert_not_called()


@pytest.mark.asyncio
async def test_login_short_password(mock_uow, password_hasher, token_issuer):
    use_case = LoginUseCase(mock_uow, password_hasher, token_issuer)
    result = await use_case.execute({"email": "a@x.com", "password": "short"})

    assert result.is_err()
    assert result.error.code == "VALIDATION_ERROR"
    assert result.error.fields["password"] == ["Password must be at least 8 characters"]
    mock_uow.users.get_by_email.assert_not_called()


@pytest.mark.asyncio
async def test_login_missing_fields(mock_uow, password_hasher, token_issuer):
    use_case = LoginUseCase(mock_uow, password_hasher, token_issuer)
    result = await use_case.execute({})

    assert result.is_err()
    assert set(result.error.fields) == {"email", "password"}
