"""ProfileRepository - SQLAlchemy implementation of ProfileRepository protocol."""

from datetime import UTC, datetime
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.entities.profile import Profile, ProfileChanges
from src.infrastructure.persistence.models.profile import ProfileModel


class ProfileRepository:
    """SQLAlchemy implementation of ProfileRepository protocol.

    Attributes:
        session: SQLAlchemy async session for database operations.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def create(self, account_id: UUID) -> Profile:
        """Create profile with defaults (level 1, zero counters)."""
        model = ProfileModel(account_id=account_id)
        self.session.add(model)
        await self.session.flush()
        await self.session.refresh(model)
        return self._to_domain(model)

    async def find_by_account_id(self, account_id: UUID) -> Profile | None:
        model = await self._find_model(account_id)
        return self._to_domain(model) if model is not None else None

    async def update(self, account_id: UUID, changes: ProfileChanges) -> Profile | None:
        """Apply supplied fields and always touch updated_at.

        Args:
            account_id: Owning account.
            changes: Partial update.

        Returns:
            Updated Profile, or None if the account has no profile.
        """
        model = await self._find_model(account_id)
        if model is None:
            return None

        for field_name, value in changes.as_dict().items():
            setattr(model, field_name, value)
        model.updated_at = datetime.now(UTC)

        await self.session.flush()
        return self._to_domain(model)

    async def _find_model(self, account_id: UUID) -> ProfileModel | None:
        stmt = select(ProfileModel).where(ProfileModel.account_id == account_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    def _to_domain(self, model: ProfileModel) -> Profile:
        return Profile(
            id=model.id,
            account_id=model.account_id,
            avatar_url=model.avatar_url,
            level=model.level,
            experience=model.experience,
            wins=model.wins,
            losses=model.losses,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )
