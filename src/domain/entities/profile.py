"""Profile domain entity (one-to-one with Account)."""

from dataclasses import dataclass, fields
from datetime import datetime
from typing import Any
from uuid import UUID

DEFAULT_LEVEL = 1
DEFAULT_EXPERIENCE = 0
DEFAULT_WINS = 0
DEFAULT_LOSSES = 0


@dataclass
class Profile:
    """Player profile created alongside the account at registration.

    Attributes:
        id: Profile identifier.
        account_id: Owning account.
        avatar_url: Optional avatar reference.
        level: Player level (starts at 1).
        experience: Experience points (starts at 0).
        wins: Win counter.
        losses: Loss counter.
        created_at: Creation timestamp.
        updated_at: Last update timestamp.
    """

    id: UUID
    account_id: UUID
    avatar_url: str | None
    level: int
    experience: int
    wins: int
    losses: int
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True, kw_only=True)
class ProfileChanges:
    """Partial profile update. ``None`` means "leave unchanged"."""

    avatar_url: str | None = None
    level: int | None = None
    experience: int | None = None
    wins: int | None = None
    losses: int | None = None

    def as_dict(self) -> dict[str, Any]:
        """Return only the fields that were supplied."""
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if getattr(self, f.name) is not None
        }
