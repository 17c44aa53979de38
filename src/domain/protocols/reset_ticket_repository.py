"""ResetTicketRepository protocol (port) for domain layer.

Ticket Lifecycle:
    1. Created during a reset request (expires one hour later)
    2. Matched during confirmation by comparing the secret against stored digests
    3. Consumed (deleted) exactly once after a successful confirmation
"""

from datetime import datetime
from typing import Protocol
from uuid import UUID

from src.domain.entities.reset_ticket import ResetTicket


class ResetTicketRepository(Protocol):
    """Protocol for reset ticket persistence operations.

    Implementations:
        - ResetTicketRepository (SQLAlchemy): src/infrastructure/persistence/repositories/
    """

    async def save(
        self,
        account_id: UUID,
        secret_hash: str,
        expires_at: datetime,
    ) -> ResetTicket:
        """Persist a new ticket.

        Args:
            account_id: Account the ticket belongs to.
            secret_hash: bcrypt digest of the one-time secret.
            expires_at: Absolute expiry instant (UTC).

        Returns:
            Created ResetTicket.
        """
        ...

    async def find_active(self, now: datetime) -> list[ResetTicket]:
        """List tickets whose expiry is still in the future.

        Args:
            now: Reference instant.

        Returns:
            Tickets ordered by ``created_at`` descending (newest first).
        """
        ...

    async def consume(self, ticket_id: UUID) -> bool:
        """Atomically delete the ticket if it still exists.

        Two concurrent confirmations of the same ticket race on this call;
        exactly one observes True.

        Args:
            ticket_id: Ticket identifier.

        Returns:
            True if this call deleted the ticket, False if it was already gone.
        """
        ...
