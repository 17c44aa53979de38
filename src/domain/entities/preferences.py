"""Preferences domain entity (one-to-one with Account)."""

from dataclasses import dataclass, fields
from datetime import datetime
from typing import Any
from uuid import UUID

DEFAULT_NOTIFICATIONS_ENABLED = True
DEFAULT_LANGUAGE = "en"
DEFAULT_THEME = "light"


@dataclass
class Preferences:
    """User preferences created alongside the account at registration.

    Attributes:
        id: Preferences identifier.
        account_id: Owning account.
        notifications_enabled: Notification opt-in (default on).
        language: Language code (default "en").
        theme: Theme name (default "light").
        created_at: Creation timestamp.
        updated_at: Last update timestamp.
    """

    id: UUID
    account_id: UUID
    notifications_enabled: bool
    language: str
    theme: str
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True, kw_only=True)
class PreferencesChanges:
    """Partial preferences update. ``None`` means "leave unchanged"."""

    notifications_enabled: bool | None = None
    language: str | None = None
    theme: str | None = None

    def as_dict(self) -> dict[str, Any]:
        """Return only the fields that were supplied."""
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if getattr(self, f.name) is not None
        }
