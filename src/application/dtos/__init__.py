"""Data Transfer Objects (DTOs) for application layer.

DTOs are response/result dataclasses returned by command and query handlers.
They transfer data from the application layer to the presentation layer.

Note:
    DTOs are NOT API schemas (Pydantic models live in src/schemas).
"""

from src.application.dtos.auth_dtos import (
    AccessTokenResult,
    AuthResult,
    PasswordResetConfirmResponse,
    PasswordResetRequestResponse,
    TokenValidation,
)
from src.application.dtos.user_dtos import UserWithProfile

__all__ = [
    "AccessTokenResult",
    "AuthResult",
    "PasswordResetConfirmResponse",
    "PasswordResetRequestResponse",
    "TokenValidation",
    "UserWithProfile",
]
