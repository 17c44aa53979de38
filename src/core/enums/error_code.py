"""Domain-level error codes (machine-readable).

Codes are stable identifiers surfaced to API clients in the ``code`` field of
Problem Details responses. The HTTP status is decided by the error class that
carries the code (see src/core/errors/common_errors.py), not by the code.

Categories:
- Validation errors (INVALID_EMAIL, WEAK_PASSWORD, *_RESET_TOKEN*)
- Conflict errors (*_TAKEN)
- Authentication errors (INVALID_CREDENTIALS, *_TOKEN)
- Authorization errors (UNAUTHORIZED)
- Resource errors (USER_NOT_FOUND)
- Infrastructure errors (DATABASE_ERROR, INTERNAL_ERROR)
"""

from enum import Enum


class ErrorCode(Enum):
    """Domain-level error codes (machine-readable)."""

    # Validation errors
    INVALID_EMAIL = "INVALID_EMAIL"
    WEAK_PASSWORD = "WEAK_PASSWORD"
    INVALID_RESET_TOKEN = "INVALID_RESET_TOKEN"
    RESET_TOKEN_EXPIRED = "RESET_TOKEN_EXPIRED"

    # Conflict errors
    EMAIL_TAKEN = "EMAIL_TAKEN"
    USERNAME_TAKEN = "USERNAME_TAKEN"

    # Authentication errors
    INVALID_CREDENTIALS = "INVALID_CREDENTIALS"
    EXPIRED_TOKEN = "EXPIRED_TOKEN"
    INVALID_TOKEN = "INVALID_TOKEN"

    # Authorization errors
    UNAUTHORIZED = "UNAUTHORIZED"

    # Resource errors
    USER_NOT_FOUND = "USER_NOT_FOUND"

    # Infrastructure errors
    DATABASE_ERROR = "DATABASE_ERROR"
    INTERNAL_ERROR = "INTERNAL_ERROR"
