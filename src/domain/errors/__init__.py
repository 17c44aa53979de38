"""Domain errors package.

Usage:
    from src.domain.errors import IdentityError
"""

from src.domain.errors.identity_error import IdentityError

__all__ = ["IdentityError"]
