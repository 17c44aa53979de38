"""Reset ticket domain entity.

A reset ticket authorizes one password change without the old password.

Lifecycle:
    Issued -> Consumed (deleted after a successful confirmation)
    Issued -> Expired  (``expires_at`` passed; never honored again)

Only the bcrypt digest of the one-time secret is stored.
"""

from dataclasses import dataclass
from datetime import UTC, datetime
from uuid import UUID


@dataclass(frozen=True)
class ResetTicket:
    """Stored password-reset ticket.

    Attributes:
        id: Ticket identifier.
        account_id: Account whose password the ticket may reset.
        secret_hash: bcrypt digest of the one-time secret.
        expires_at: Absolute expiry instant (UTC).
        created_at: Creation timestamp, newest ticket wins on ties.
    """

    id: UUID
    account_id: UUID
    secret_hash: str
    expires_at: datetime
    created_at: datetime

    def is_expired(self, now: datetime | None = None) -> bool:
        """Check whether the ticket is past its expiry instant.

        Args:
            now: Reference instant (defaults to current UTC time).

        Returns:
            bool: True if ``now`` is at or after ``expires_at``.
        """
        reference = now or datetime.now(UTC)
        return reference >= self.expires_at
