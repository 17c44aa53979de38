"""ResetTicketRepository - SQLAlchemy implementation for reset ticket persistence."""

from datetime import datetime
from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.entities.reset_ticket import ResetTicket
from src.infrastructure.persistence.models.reset_ticket import ResetTicketModel


def _to_domain(model: ResetTicketModel) -> ResetTicket:
    """Convert database model to domain entity."""
    return ResetTicket(
        id=model.id,
        account_id=model.account_id,
        secret_hash=model.secret_hash,
        expires_at=model.expires_at,
        created_at=model.created_at,
    )


class ResetTicketRepository:
    """SQLAlchemy implementation for reset ticket persistence.

    Supports:
    - Ticket creation (digest of the secret only)
    - Active-ticket scan for secret matching (newest first)
    - Single-use consumption via conditional delete

    Attributes:
        session: SQLAlchemy async session for database operations.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def save(
        self,
        account_id: UUID,
        secret_hash: str,
        expires_at: datetime,
    ) -> ResetTicket:
        """Create new reset ticket.

        Args:
            account_id: Account the ticket belongs to.
            secret_hash: bcrypt digest of the secret.
            expires_at: Expiration timestamp.

        Returns:
            Created ResetTicket.
        """
        model = ResetTicketModel(
            account_id=account_id,
            secret_hash=secret_hash,
            expires_at=expires_at,
        )
        self.session.add(model)
        await self.session.flush()
        await self.session.refresh(model)
        return _to_domain(model)

    async def find_active(self, now: datetime) -> list[ResetTicket]:
        """List non-expired tickets, newest first.

        Args:
            now: Reference instant.

        Returns:
            Tickets with expires_at > now, ordered by created_at descending.
        """
        stmt = (
            select(ResetTicketModel)
            .where(ResetTicketModel.expires_at > now)
            .order_by(ResetTicketModel.created_at.desc(), ResetTicketModel.id.desc())
        )
        result = await self.session.execute(stmt)
        return [_to_domain(model) for model in result.scalars().all()]

    async def consume(self, ticket_id: UUID) -> bool:
        """Delete the ticket if it still exists.

        A single DELETE ... WHERE id = :id; the database serializes concurrent
        deletes so only one caller sees a row count of 1.

        Args:
            ticket_id: Ticket identifier.

        Returns:
            True if this call deleted the ticket.
        """
        stmt = delete(ResetTicketModel).where(ResetTicketModel.id == ticket_id)
        result = await self.session.execute(
            stmt, execution_options={"synchronize_session": False}
        )
        return result.rowcount == 1
