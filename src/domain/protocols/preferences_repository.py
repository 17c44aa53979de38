"""PreferencesRepository protocol (port) for domain layer."""

from typing import Protocol
from uuid import UUID

from src.domain.entities.preferences import Preferences, PreferencesChanges


class PreferencesRepository(Protocol):
    """Protocol for preferences persistence (one row per account).

    Implementations:
        - PreferencesRepository (SQLAlchemy): src/infrastructure/persistence/repositories/
    """

    async def create(self, account_id: UUID) -> Preferences:
        """Create the account's preferences with default values.

        Args:
            account_id: Owning account.

        Returns:
            Created Preferences (notifications on, "en", "light").
        """
        ...

    async def find_by_account_id(self, account_id: UUID) -> Preferences | None:
        """Find the account's preferences.

        Args:
            account_id: Owning account.

        Returns:
            Preferences if found, None otherwise.
        """
        ...

    async def update(
        self, account_id: UUID, changes: PreferencesChanges
    ) -> Preferences | None:
        """Apply supplied fields and always touch ``updated_at``.

        Args:
            account_id: Owning account.
            changes: Fields to change (unset fields are left alone).

        Returns:
            Updated Preferences, or None if the account has none.
        """
        ...
