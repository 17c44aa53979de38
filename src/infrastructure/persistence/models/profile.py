"""Profile database model (one row per account)."""

from uuid import UUID

from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from src.domain.entities.profile import (
    DEFAULT_EXPERIENCE,
    DEFAULT_LEVEL,
    DEFAULT_LOSSES,
    DEFAULT_WINS,
)
from src.infrastructure.persistence.base import BaseMutableModel


class ProfileModel(BaseMutableModel):
    """Player profile.

    Foreign Keys:
        - account_id: References accounts(id) ON DELETE CASCADE, unique
    """

    __tablename__ = "profiles"

    account_id: Mapped[UUID] = mapped_column(
        ForeignKey("accounts.id", ondelete="CASCADE"),
        nullable=False,
        unique=True,
    )
    avatar_url: Mapped[str | None] = mapped_column(String(2048), nullable=True)
    level: Mapped[int] = mapped_column(
        Integer, nullable=False, default=DEFAULT_LEVEL, server_default=str(DEFAULT_LEVEL)
    )
    experience: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        default=DEFAULT_EXPERIENCE,
        server_default=str(DEFAULT_EXPERIENCE),
    )
    wins: Mapped[int] = mapped_column(
        Integer, nullable=False, default=DEFAULT_WINS, server_default=str(DEFAULT_WINS)
    )
    losses: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        default=DEFAULT_LOSSES,
        server_default=str(DEFAULT_LOSSES),
    )

    account: Mapped["AccountModel"] = relationship(back_populates="profile")  # noqa: F821
