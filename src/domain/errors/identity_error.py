"""Identity domain errors.

Pre-built error values for every failure the identity service reports.
These are NOT exceptions - they are returned inside ``Failure`` (railway-oriented
programming). The error class sets the severity; the code is the stable
identifier clients branch on.

Usage:
    from src.domain.errors import IdentityError
    from src.core.result import Failure

    if credentials is None:
        return Failure(error=IdentityError.INVALID_CREDENTIALS)

    match result:
        case Failure(error=error) if error.code is ErrorCode.EXPIRED_TOKEN:
            ...
"""

from src.core.enums import ErrorCode
from src.core.errors import (
    AuthenticationError,
    AuthorizationError,
    ConflictError,
    InfrastructureError,
    NotFoundError,
    ValidationError,
)


class IdentityError:
    """Identity error constants.

    Error Categories:
        - Validation (400): INVALID_EMAIL, WEAK_PASSWORD, INVALID_RESET_TOKEN,
          RESET_TOKEN_EXPIRED
        - Authentication (401): INVALID_CREDENTIALS, EXPIRED_TOKEN,
          INVALID_TOKEN, INVALID_REFRESH_TOKEN
        - Authorization (403): UNAUTHORIZED
        - Not found (404): USER_NOT_FOUND, PROFILE_NOT_FOUND,
          PREFERENCES_NOT_FOUND
        - Conflict (409): EMAIL_TAKEN, USERNAME_TAKEN
        - Infrastructure (500): DATABASE_ERROR, INTERNAL_ERROR
    """

    INVALID_EMAIL = ValidationError(
        code=ErrorCode.INVALID_EMAIL,
        message="Invalid email format",
        field="email",
    )
    WEAK_PASSWORD = ValidationError(
        code=ErrorCode.WEAK_PASSWORD,
        message="Password must be at least 8 characters long",
        field="password",
    )
    INVALID_RESET_TOKEN = ValidationError(
        code=ErrorCode.INVALID_RESET_TOKEN,
        message="Invalid or expired reset token",
        field="token",
    )
    RESET_TOKEN_EXPIRED = ValidationError(
        code=ErrorCode.RESET_TOKEN_EXPIRED,
        message="Reset token has expired",
        field="token",
    )

    EMAIL_TAKEN = ConflictError(
        code=ErrorCode.EMAIL_TAKEN,
        message="Email is already registered",
        resource_type="Account",
        conflicting_field="email",
    )
    USERNAME_TAKEN = ConflictError(
        code=ErrorCode.USERNAME_TAKEN,
        message="Username is already taken",
        resource_type="Account",
        conflicting_field="username",
    )

    INVALID_CREDENTIALS = AuthenticationError(
        code=ErrorCode.INVALID_CREDENTIALS,
        message="Invalid email or password",
    )
    EXPIRED_TOKEN = AuthenticationError(
        code=ErrorCode.EXPIRED_TOKEN,
        message="Token has expired",
    )
    INVALID_TOKEN = AuthenticationError(
        code=ErrorCode.INVALID_TOKEN,
        message="Invalid token",
    )
    INVALID_REFRESH_TOKEN = AuthenticationError(
        code=ErrorCode.INVALID_TOKEN,
        message="Invalid refresh token",
    )

    UNAUTHORIZED = AuthorizationError(
        code=ErrorCode.UNAUTHORIZED,
        message="Access denied",
    )

    USER_NOT_FOUND = NotFoundError(
        code=ErrorCode.USER_NOT_FOUND,
        message="User not found",
        resource_type="Account",
    )
    PROFILE_NOT_FOUND = NotFoundError(
        code=ErrorCode.USER_NOT_FOUND,
        message="User profile not found",
        resource_type="Profile",
    )
    PREFERENCES_NOT_FOUND = NotFoundError(
        code=ErrorCode.USER_NOT_FOUND,
        message="User preferences not found",
        resource_type="Preferences",
    )

    DATABASE_ERROR = InfrastructureError(
        code=ErrorCode.DATABASE_ERROR,
        message="A database error occurred",
    )
    INTERNAL_ERROR = InfrastructureError(
        code=ErrorCode.INTERNAL_ERROR,
        message="Internal server error",
    )
