"""ProfileRepository protocol (port) for domain layer."""

from typing import Protocol
from uuid import UUID

from src.domain.entities.profile import Profile, ProfileChanges


class ProfileRepository(Protocol):
    """Protocol for profile persistence (one row per account).

    Implementations:
        - ProfileRepository (SQLAlchemy): src/infrastructure/persistence/repositories/
    """

    async def create(self, account_id: UUID) -> Profile:
        """Create the account's profile with default values.

        Args:
            account_id: Owning account.

        Returns:
            Created Profile (level 1, zero experience and counters).
        """
        ...

    async def find_by_account_id(self, account_id: UUID) -> Profile | None:
        """Find the account's profile.

        Args:
            account_id: Owning account.

        Returns:
            Profile if found, None otherwise.
        """
        ...

    async def update(self, account_id: UUID, changes: ProfileChanges) -> Profile | None:
        """Apply supplied fields and always touch ``updated_at``.

        Args:
            account_id: Owning account.
            changes: Fields to change (unset fields are left alone).

        Returns:
            Updated Profile, or None if the account has no profile.
        """
        ...
