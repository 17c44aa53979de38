"""ResetTokenServiceProtocol - generation of one-time reset secrets.

Following hexagonal architecture:
- Domain defines what it needs (protocol/port)
- Infrastructure provides implementation (PasswordResetTokenService)
"""

from datetime import datetime
from typing import Protocol


class ResetTokenServiceProtocol(Protocol):
    """Protocol for reset secret generation.

    Implementations:
        - PasswordResetTokenService: src/infrastructure/security/password_reset_token_service.py
    """

    def generate_token(self) -> str:
        """Generate a high-entropy one-time secret.

        Returns:
            Random hex string.
        """
        ...

    def calculate_expiration(self) -> datetime:
        """Calculate the expiry instant for a ticket issued now.

        Returns:
            Expiration datetime (UTC).
        """
        ...
