"""Account domain entity.

Pure business data, no framework dependencies.

The public ``Account`` never carries the password hash. Login is the only flow
that needs the hash, and it receives an ``AccountCredentials`` pair instead, so
a hash cannot leak into a response by accident.
"""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass
class Account:
    """Registered identity.

    Attributes:
        id: Opaque unique identifier.
        email: Unique email address, stored exactly as registered.
        username: Unique display handle.
        is_active: Account active status.
        created_at: Timestamp when account was created.
        updated_at: Timestamp of the last password change.

    Example:
        >>> account = Account(
        ...     id=uuid7(),
        ...     email="alice@example.com",
        ...     username="alice",
        ...     is_active=True,
        ...     created_at=datetime.now(UTC),
        ...     updated_at=datetime.now(UTC),
        ... )
    """

    id: UUID
    email: str
    username: str
    is_active: bool
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True)
class AccountCredentials:
    """Account paired with its bcrypt password hash (login only)."""

    account: Account
    password_hash: str
