"""
Use Cases

Organized by domain folder:
- auth/: Login, registration and password reset flows
"""

from .auth import (
    LoginUseCase,
    RegisterUseCase,
    RequestPasswordResetUseCase,
    VerifyResetCodeUseCase,
    ApplyNewPasswordUseCase,
)

__all__ = [
    "LoginUseCase",
    "RegisterUseCase",
    "RequestPasswordResetUseCase",
    "VerifyResetCodeUseCase",
    "ApplyNewPasswordUseCase",
]
