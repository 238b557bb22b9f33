"""
Domain Entities

All domain entities organized by model.
Each entity in its own file for better maintainability.
"""

from .user import User
from .admin import Admin
from .reset_password_request import ResetPasswordRequest

__all__ = [
    "User",
    "Admin",
    "ResetPasswordRequest",
]
