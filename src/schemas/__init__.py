"""Request/response schemas for API endpoints.

All Pydantic models for HTTP request validation and response serialization.
Schemas are kept separate from domain entities (HTTP-layer concerns only).

Usage:
    from src.schemas import RegisterRequest, AuthResponse
"""

from src.schemas.auth_schemas import (
    AuthResponse,
    LoginRequest,
    MessageResponse,
    PasswordResetConfirmRequest,
    PasswordResetRequest,
    RefreshRequest,
    RefreshResponse,
    RegisterRequest,
    UserResponse,
    ValidateTokenRequest,
    ValidateTokenResponse,
)
from src.schemas.user_schemas import (
    PreferencesResponse,
    PreferencesUpdateRequest,
    ProfileResponse,
    ProfileUpdateRequest,
    UserWithProfileResponse,
)

__all__ = [
    # Auth
    "AuthResponse",
    "LoginRequest",
    "MessageResponse",
    "PasswordResetConfirmRequest",
    "PasswordResetRequest",
    "RefreshRequest",
    "RefreshResponse",
    "RegisterRequest",
    "UserResponse",
    "ValidateTokenRequest",
    "ValidateTokenResponse",
    # Users
    "PreferencesResponse",
    "PreferencesUpdateRequest",
    "ProfileResponse",
    "ProfileUpdateRequest",
    "UserWithProfileResponse",
]
