"""Preferences database model (one row per account)."""

from uuid import UUID

from sqlalchemy import Boolean, ForeignKey, String, true
from sqlalchemy.orm import Mapped, mapped_column, relationship

from src.domain.entities.preferences import (
    DEFAULT_LANGUAGE,
    DEFAULT_NOTIFICATIONS_ENABLED,
    DEFAULT_THEME,
)
from src.infrastructure.persistence.base import BaseMutableModel


class PreferencesModel(BaseMutableModel):
    """User preferences.

    Foreign Keys:
        - account_id: References accounts(id) ON DELETE CASCADE, unique
    """

    __tablename__ = "preferences"

    account_id: Mapped[UUID] = mapped_column(
        ForeignKey("accounts.id", ondelete="CASCADE"),
        nullable=False,
        unique=True,
    )
    notifications_enabled: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=DEFAULT_NOTIFICATIONS_ENABLED,
        server_default=true(),
    )
    language: Mapped[str] = mapped_column(
        String(16), nullable=False, default=DEFAULT_LANGUAGE, server_default=DEFAULT_LANGUAGE
    )
    theme: Mapped[str] = mapped_column(
        String(32), nullable=False, default=DEFAULT_THEME, server_default=DEFAULT_THEME
    )

    account: Mapped["AccountModel"] = relationship(back_populates="preferences")  # noqa: F821
