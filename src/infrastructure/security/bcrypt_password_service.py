"""Bcrypt password hashing service (adapter).

This service implements the PasswordHashingProtocol using bcrypt.

Architecture:
    - Implements PasswordHashingProtocol (no inheritance required)
    - Structural typing via Protocol
    - Injected via dependency container

Security:
    - Salted, adaptive hashing (cost factor from settings, default 10)
    - Constant-time comparison
    - bcrypt only reads the first 72 bytes of input; inputs are truncated to
      that window explicitly so hashing and verification agree
"""

import bcrypt

from src.core.constants import BCRYPT_MAX_BYTES


class BcryptPasswordService:
    """Bcrypt password hashing service.

    Also used to hash password-reset secrets before they are stored.

    Usage:
        from src.core.container import get_password_service

        password_service = get_password_service()
        password_hash = password_service.hash_password("password123")
        is_valid = password_service.verify_password("password123", password_hash)
    """

    def __init__(self, cost_factor: int = 10) -> None:
        """Initialize bcrypt password service.

        Args:
            cost_factor: Bcrypt cost factor (default: 10, ~60ms per hash).
                Logarithmic: each +1 doubles computation time.

        Raises:
            ValueError: If cost_factor is outside 10..20.
        """
        if cost_factor < 10:
            msg = "Cost factor must be at least 10 for security"
            raise ValueError(msg)
        if cost_factor > 20:
            msg = "Cost factor above 20 is impractically slow"
            raise ValueError(msg)

        self._cost_factor = cost_factor

    def hash_password(self, password: str) -> str:
        """Hash a plaintext value using bcrypt.

        Args:
            password: Plaintext password or reset secret.

        Returns:
            60-character bcrypt string ($2b$<cost>$<salt><hash>).
            Each call produces a different digest (random salt).
        """
        salt = bcrypt.gensalt(rounds=self._cost_factor)
        password_hash = bcrypt.hashpw(_encode(password), salt)
        return password_hash.decode("utf-8")

    def verify_password(self, password: str, password_hash: str) -> bool:
        """Verify a plaintext value against a bcrypt digest.

        Args:
            password: Plaintext to verify.
            password_hash: Digest from the database.

        Returns:
            True if they match. False otherwise, including malformed digests.
        """
        try:
            return bcrypt.checkpw(_encode(password), password_hash.encode("utf-8"))
        except (ValueError, AttributeError):
            return False


def _encode(value: str) -> bytes:
    return value.encode("utf-8")[:BCRYPT_MAX_BYTES]
