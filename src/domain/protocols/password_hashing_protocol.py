"""Password hashing protocol for domain layer.

Defines the credential verifier: one-way salted hashing and comparison.
The same primitive protects passwords and reset-ticket secrets at rest.

Architecture:
    - Domain defines protocol (port)
    - Infrastructure implements adapter (BcryptPasswordService)
    - No framework dependencies in domain
"""

from typing import Protocol


class PasswordHashingProtocol(Protocol):
    """Password hashing and verification interface.

    Implementations:
        - BcryptPasswordService: bcrypt, cost factor from settings

    Usage:
        password_hash = password_service.hash_password("password123")
        is_valid = password_service.verify_password("password123", password_hash)
    """

    def hash_password(self, password: str) -> str:
        """Hash a plaintext value.

        Args:
            password: Plaintext password (or reset secret).

        Returns:
            Salted digest. Same input produces different digests.
        """
        ...

    def verify_password(self, password: str, password_hash: str) -> bool:
        """Compare plaintext against a digest in constant time.

        Args:
            password: Plaintext to verify.
            password_hash: Digest produced by ``hash_password``.

        Returns:
            True if they match, False otherwise (including malformed digests).
        """
        ...
