"""Domain validators package."""

from src.domain.validators.functions import (
    EMAIL_PATTERN,
    validate_email,
    validate_password,
)

__all__ = ["EMAIL_PATTERN", "validate_email", "validate_password"]
