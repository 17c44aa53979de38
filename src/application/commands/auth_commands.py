"""Authentication commands (CQRS write operations).

Commands represent user intent to change system state.
All commands are immutable (frozen=True) and use keyword-only arguments (kw_only=True).

Pattern:
- Commands are data containers (no logic)
- Handlers validate input and execute business logic
- Handlers return Result types
"""

from dataclasses import dataclass


@dataclass(frozen=True, kw_only=True)
class RegisterUser:
    """Register a new account.

    Creates the account with its default profile and preferences and
    returns a fresh token pair.

    Attributes:
        email: Email address (must match the email shape).
        password: Plaintext password (at least 8 characters, will be hashed).
        username: Unique username.

    Example:
        >>> command = RegisterUser(
        ...     email="alice@example.com",
        ...     password="password123",
        ...     username="alice",
        ... )
        >>> result = await handler.handle(command)
    """

    email: str
    password: str
    username: str


@dataclass(frozen=True, kw_only=True)
class LoginUser:
    """Authenticate credentials and issue a token pair.

    Attributes:
        email: Email address as registered.
        password: Plaintext password.
    """

    email: str
    password: str


@dataclass(frozen=True, kw_only=True)
class RefreshAccessToken:
    """Exchange a refresh token for a new access token.

    The refresh token is not rotated.

    Attributes:
        refresh_token: Refresh JWT issued at register/login.
    """

    refresh_token: str


@dataclass(frozen=True, kw_only=True)
class RequestPasswordReset:
    """Request a password reset ticket.

    Always succeeds with the same generic message whether or not the email
    belongs to an account.

    Attributes:
        email: Email address to send the reset secret to.
    """

    email: str


@dataclass(frozen=True, kw_only=True)
class ConfirmPasswordReset:
    """Set a new password using a reset secret.

    Attributes:
        token: Plaintext reset secret delivered out of band.
        new_password: New plaintext password (at least 8 characters).
    """

    token: str
    new_password: str
