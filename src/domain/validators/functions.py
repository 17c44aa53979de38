"""Input validation functions.

Validation runs before any store access, so a rejected request never reveals
whether an account exists. Validators are pure and return a Result.

Rules:
    - Email: ``local@domain.tld`` shape (non-empty local part, domain with a dot,
      no whitespace). The value is returned unchanged: emails are stored and
      compared exactly as given.
    - Password: at least 8 characters.
"""

import re

from src.core.constants import PASSWORD_MIN_LENGTH
from src.core.errors import ValidationError
from src.core.result import Failure, Result, Success
from src.domain.errors import IdentityError

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


def validate_email(v: str) -> Result[str, ValidationError]:
    """Validate email shape.

    Args:
        v: Email address to validate.

    Returns:
        Success(email) unchanged, or Failure(INVALID_EMAIL).

    Example:
        >>> validate_email("alice@example.com")
        Success(value='alice@example.com')
        >>> validate_email("alice@localhost")
        Failure(error=ValidationError(code=<ErrorCode.INVALID_EMAIL: ...>, ...))
    """
    if not EMAIL_PATTERN.fullmatch(v):
        return Failure(error=IdentityError.INVALID_EMAIL)
    return Success(value=v)


def validate_password(v: str) -> Result[str, ValidationError]:
    """Validate password length.

    Args:
        v: Plaintext password.

    Returns:
        Success(password) unchanged, or Failure(WEAK_PASSWORD).
    """
    if len(v) < PASSWORD_MIN_LENGTH:
        return Failure(error=IdentityError.WEAK_PASSWORD)
    return Success(value=v)
