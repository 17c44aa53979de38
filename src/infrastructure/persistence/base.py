"""Declarative base for the identity tables.

- BaseModel: id (UUIDv7) and created_at for every table
- BaseMutableModel: adds updated_at, refreshed by the database on UPDATE

Rows are mapped to domain entities by the repositories; domain code never
sees these classes.

    BaseModel
        ├── BaseMutableModel
        │   ├── AccountModel      (accounts)
        │   ├── ProfileModel      (profiles)
        │   └── PreferencesModel  (preferences)
        └── ResetTicketModel      (reset_tickets, deleted on use)
"""

from datetime import datetime
from uuid import UUID as PythonUUID

from sqlalchemy import DateTime, MetaData, Uuid, func
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column
from uuid_extensions import uuid7

# AccountRepository.create matches on the generated uq_* names.
NAMING_CONVENTION = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}


class BaseModel(DeclarativeBase):
    """Abstract base: UUIDv7 primary key plus database-assigned created_at."""

    __abstract__ = True

    metadata = MetaData(naming_convention=NAMING_CONVENTION)

    id: Mapped[PythonUUID] = mapped_column(Uuid, primary_key=True, default=uuid7)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}(id={self.id})>"


class BaseMutableModel(BaseModel):
    """Abstract base for rows that are updated in place."""

    __abstract__ = True

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )
