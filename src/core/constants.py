"""Centralized constants for internal implementation details.

Environment-specific settings live in ``src/core/config.py``; the values here
are fixed properties of the implementation.
"""

TOKEN_BYTES: int = 32
"""Number of random bytes in a reset secret (32 bytes = 256 bits)."""

BCRYPT_MAX_BYTES: int = 72
"""bcrypt only consumes the first 72 bytes of its input."""

PASSWORD_MIN_LENGTH: int = 8
"""Minimum accepted password length."""
