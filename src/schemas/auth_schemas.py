"""Authentication request/response schemas.

Pydantic models for API request validation and response serialization.
Kept separate from domain entities - these are HTTP-layer concerns.

Email shape and password length are checked by the handlers, not here, so
those failures are reported as INVALID_EMAIL / WEAK_PASSWORD (400) rather
than schema errors (422).

Endpoints:
    POST /auth/register                - Create account (201)
    POST /auth/login                   - Issue token pair
    POST /auth/refresh                 - Exchange refresh token for access token
    POST /auth/validate                - Introspect a token
    POST /auth/request-password-reset  - Issue reset ticket
    POST /auth/reset-password          - Consume reset ticket
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from src.application.dtos import AuthResult
from src.domain.entities.account import Account


# =============================================================================
# Shared
# =============================================================================


class UserResponse(BaseModel):
    """Public account representation (never includes the password hash)."""

    id: UUID = Field(..., description="Account ID")
    email: str = Field(..., description="Email address")
    username: str = Field(..., description="Username")
    is_active: bool = Field(..., description="Whether the account is active")
    created_at: datetime = Field(..., description="Creation timestamp")
    updated_at: datetime = Field(..., description="Last update timestamp")

    @classmethod
    def from_entity(cls, account: Account) -> "UserResponse":
        return cls(
            id=account.id,
            email=account.email,
            username=account.username,
            is_active=account.is_active,
            created_at=account.created_at,
            updated_at=account.updated_at,
        )


class AuthResponse(BaseModel):
    """Account plus token pair (register and login)."""

    user: UserResponse
    access_token: str = Field(..., description="JWT access token (24h expiry)")
    refresh_token: str = Field(..., description="JWT refresh token (7 day expiry)")
    token_type: str = Field(
        default="bearer", description="Token type for Authorization header"
    )

    @classmethod
    def from_result(cls, result: AuthResult) -> "AuthResponse":
        return cls(
            user=UserResponse.from_entity(result.account),
            access_token=result.access_token,
            refresh_token=result.refresh_token,
        )


# =============================================================================
# Registration / Login
# =============================================================================


class RegisterRequest(BaseModel):
    """Request schema for registration.

    POST /auth/register
    Returns: 201 Created
    """

    email: str = Field(..., description="Email address", examples=["alice@example.com"])
    password: str = Field(
        ..., description="Password (at least 8 characters)", examples=["password123"]
    )
    username: str = Field(
        ..., min_length=1, max_length=255, description="Unique username", examples=["alice"]
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "email": "alice@example.com",
                "password": "password123",
                "username": "alice",
            }
        }
    )


class LoginRequest(BaseModel):
    """Request schema for login.

    POST /auth/login
    Returns: 200 OK
    """

    email: str = Field(..., description="Email address", examples=["alice@example.com"])
    password: str = Field(..., description="Password", examples=["password123"])


# =============================================================================
# Tokens
# =============================================================================


class RefreshRequest(BaseModel):
    """Request schema for access token refresh (POST /auth/refresh)."""

    refresh_token: str = Field(..., min_length=1, description="Refresh JWT")


class RefreshResponse(BaseModel):
    """New access token (the refresh token is not rotated)."""

    token: str = Field(..., description="New JWT access token")


class ValidateTokenRequest(BaseModel):
    """Request schema for token introspection (POST /auth/validate)."""

    token: str = Field(..., min_length=1, description="JWT of either type")


class ValidateTokenResponse(BaseModel):
    """Identity carried by a valid token."""

    valid: bool = Field(..., description="Always true on 200")
    user_id: UUID = Field(..., description="Account ID (sub claim)")
    email: str = Field(..., description="Email at issuance")
    username: str = Field(..., description="Username at issuance")


# =============================================================================
# Password Reset
# =============================================================================


class PasswordResetRequest(BaseModel):
    """Request schema for reset ticket creation.

    POST /auth/request-password-reset
    Returns: 200 OK (always, to prevent email enumeration)
    """

    email: str = Field(..., description="Email address", examples=["alice@example.com"])


class PasswordResetConfirmRequest(BaseModel):
    """Request schema for reset confirmation (POST /auth/reset-password)."""

    token: str = Field(..., min_length=1, description="Reset secret from delivery")
    new_password: str = Field(..., description="New password (at least 8 characters)")


class MessageResponse(BaseModel):
    """Plain acknowledgement message."""

    message: str = Field(..., description="Human-readable message")
