"""Profile and preferences commands (CQRS write operations).

Partial updates: only the fields present in ``changes`` are applied.
"""

from dataclasses import dataclass
from uuid import UUID

from src.domain.entities.preferences import PreferencesChanges
from src.domain.entities.profile import ProfileChanges


@dataclass(frozen=True, kw_only=True)
class UpdateProfile:
    """Update the caller's profile.

    Attributes:
        user_id: Account whose profile changes.
        changes: Supplied profile fields.
    """

    user_id: UUID
    changes: ProfileChanges


@dataclass(frozen=True, kw_only=True)
class UpdatePreferences:
    """Update the caller's preferences.

    Attributes:
        user_id: Account whose preferences change.
        changes: Supplied preference fields.
    """

    user_id: UUID
    changes: PreferencesChanges
