"""Account database model.

Security:
    - password_hash: bcrypt digest, never the plaintext
    - email/username: unique constraints (uq_accounts_email, uq_accounts_username)
"""

from sqlalchemy import Boolean, String, true
from sqlalchemy.orm import Mapped, mapped_column, relationship

from src.infrastructure.persistence.base import BaseMutableModel


class AccountModel(BaseMutableModel):
    """Registered account (credentials + identity).

    Fields:
        id, created_at, updated_at: from BaseMutableModel
        email: Unique, stored exactly as given (case-sensitive comparison)
        username: Unique display handle
        password_hash: bcrypt digest
        is_active: Defaults to True

    Relationships:
        profile, preferences: one-to-one, deleted with the account
        reset_tickets: one-to-many, deleted with the account
    """

    __tablename__ = "accounts"

    email: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    username: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    is_active: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=True, server_default=true()
    )

    profile: Mapped["ProfileModel"] = relationship(  # noqa: F821
        back_populates="account", cascade="all, delete-orphan", passive_deletes=True
    )
    preferences: Mapped["PreferencesModel"] = relationship(  # noqa: F821
        back_populates="account", cascade="all, delete-orphan", passive_deletes=True
    )
    reset_tickets: Mapped[list["ResetTicketModel"]] = relationship(  # noqa: F821
        back_populates="account", cascade="all, delete-orphan", passive_deletes=True
    )

    def __repr__(self) -> str:
        return f"<AccountModel(id={self.id}, username={self.username})>"
