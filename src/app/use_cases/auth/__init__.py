"""
Authentication Use Cases

All authentication-related business logic.
"""

from .login_use_case import LoginUseCase
from .register_use_case import RegisterUseCase
from .request_password_reset_use_case import RequestPasswordResetUseCase
from .verify_reset_code_use_case import VerifyResetCodeUseCase
from .apply_new_password_use_case import ApplyNewPasswordUseCase
from .dtos import ActionSuccess, AuthSuccess

__all__ = [
    # Use Cases
    "LoginUseCase",
    "RegisterUseCase",
    "RequestPasswordResetUseCase",
    "VerifyResetCodeUseCase",
    "ApplyNewPasswordUseCase",
    # DTOs - Responses
    "AuthSuccess",
    "ActionSuccess",
]
