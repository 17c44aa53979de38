"""Password reset secret service.

Generates the one-time secret handed to the account owner and computes the
ticket's expiry. The secret itself is never stored: the request handler
hashes it with the password service before persisting the ticket.

Token Strategy:
    - 32-byte random hex string (64 characters)
    - 60-minute expiration by default
    - One-time use (ticket deleted on successful confirmation)
"""

import secrets
from datetime import UTC, datetime, timedelta

from src.core.constants import TOKEN_BYTES


class PasswordResetTokenService:
    """Password reset secret generation service.

    Usage:
        service = PasswordResetTokenService(expiration_minutes=60)

        token = service.generate_token()
        await reset_ticket_repo.save(
            account_id=account.id,
            secret_hash=password_service.hash_password(token),
            expires_at=service.calculate_expiration(),
        )
    """

    def __init__(self, expiration_minutes: int = 60) -> None:
        """Initialize password reset token service.

        Args:
            expiration_minutes: Ticket lifetime in minutes (default: 60).
        """
        self._expiration_minutes = expiration_minutes

    def generate_token(self) -> str:
        """Generate a reset secret.

        Returns:
            64-character hex string (256 bits of entropy).

        Example:
            >>> token = PasswordResetTokenService().generate_token()
            >>> len(token)
            64
        """
        return secrets.token_hex(TOKEN_BYTES)

    def calculate_expiration(self) -> datetime:
        """Calculate expiration timestamp for a ticket issued now.

        Returns:
            Expiration datetime (UTC).
        """
        return datetime.now(UTC) + timedelta(minutes=self._expiration_minutes)
