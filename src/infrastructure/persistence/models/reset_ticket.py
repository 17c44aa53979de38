"""Reset ticket database model.

Security:
    - secret_hash: bcrypt digest of the one-time secret (the secret is never stored)
    - expires_at: absolute expiry, indexed for the active-ticket scan
    - Consumed by deletion, so a ticket can be honored at most once
"""

from datetime import datetime
from uuid import UUID

from sqlalchemy import DateTime, ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from src.infrastructure.persistence.base import BaseModel


class ResetTicketModel(BaseModel):
    """Password reset ticket.

    Immutable (inherits BaseModel, not BaseMutableModel): created once,
    deleted once.

    Indexes:
        - ix_reset_tickets_account_id
        - ix_reset_tickets_expires_at

    Foreign Keys:
        - account_id: References accounts(id) ON DELETE CASCADE
    """

    __tablename__ = "reset_tickets"

    account_id: Mapped[UUID] = mapped_column(
        ForeignKey("accounts.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    secret_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    expires_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        index=True,
    )

    account: Mapped["AccountModel"] = relationship(back_populates="reset_tickets")  # noqa: F821

    def __repr__(self) -> str:
        return (
            f"<ResetTicketModel(id={self.id}, account_id={self.account_id}, "
            f"expires_at={self.expires_at})>"
        )
