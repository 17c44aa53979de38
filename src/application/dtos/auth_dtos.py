"""Authentication DTOs (Data Transfer Objects).

Response/result dataclasses for authentication handlers. These carry data
from handlers back to the presentation layer.

DTOs:
    - AuthResult: RegisterUser / LoginUser
    - AccessTokenResult: RefreshAccessToken
    - TokenValidation: ValidateToken
    - PasswordResetRequestResponse: RequestPasswordReset
    - PasswordResetConfirmResponse: ConfirmPasswordReset
"""

from dataclasses import dataclass
from uuid import UUID

from src.domain.entities.account import Account

RESET_REQUESTED_MESSAGE = "If the email exists, a password reset link has been sent"
RESET_CONFIRMED_MESSAGE = "Password has been reset successfully"


@dataclass(frozen=True, kw_only=True)
class AuthResult:
    """Account plus a fresh token pair.

    Attributes:
        account: Account (never carries the password hash).
        access_token: Access JWT (24h by default).
        refresh_token: Refresh JWT (7 days by default).
    """

    account: Account
    access_token: str
    refresh_token: str


@dataclass(frozen=True, kw_only=True)
class AccessTokenResult:
    """New access token issued from a refresh token."""

    access_token: str


@dataclass(frozen=True, kw_only=True)
class TokenValidation:
    """Identity carried by a valid token."""

    user_id: UUID
    email: str
    username: str
    valid: bool = True


@dataclass(frozen=True, kw_only=True)
class PasswordResetRequestResponse:
    """Generic acknowledgement (same for known and unknown emails)."""

    message: str = RESET_REQUESTED_MESSAGE


@dataclass(frozen=True, kw_only=True)
class PasswordResetConfirmResponse:
    """Acknowledgement of a completed reset."""

    message: str = RESET_CONFIRMED_MESSAGE
