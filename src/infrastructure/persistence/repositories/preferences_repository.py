"""PreferencesRepository - SQLAlchemy implementation of PreferencesRepository protocol."""

from datetime import UTC, datetime
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.entities.preferences import Preferences, PreferencesChanges
from src.infrastructure.persistence.models.preferences import PreferencesModel


class PreferencesRepository:
    """SQLAlchemy implementation of PreferencesRepository protocol.

    Attributes:
        session: SQLAlchemy async session for database operations.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def create(self, account_id: UUID) -> Preferences:
        """Create preferences with defaults (notifications on, "en", "light")."""
        model = PreferencesModel(account_id=account_id)
        self.session.add(model)
        await self.session.flush()
        await self.session.refresh(model)
        return self._to_domain(model)

    async def find_by_account_id(self, account_id: UUID) -> Preferences | None:
        model = await self._find_model(account_id)
        return self._to_domain(model) if model is not None else None

    async def update(
        self, account_id: UUID, changes: PreferencesChanges
    ) -> Preferences | None:
        """Apply supplied fields and always touch updated_at.

        Returns:
            Updated Preferences, or None if the account has none.
        """
        model = await self._find_model(account_id)
        if model is None:
            return None

        for field_name, value in changes.as_dict().items():
            setattr(model, field_name, value)
        model.updated_at = datetime.now(UTC)

        await self.session.flush()
        return self._to_domain(model)

    async def _find_model(self, account_id: UUID) -> PreferencesModel | None:
        stmt = select(PreferencesModel).where(PreferencesModel.account_id == account_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    def _to_domain(self, model: PreferencesModel) -> Preferences:
        return Preferences(
            id=model.id,
            account_id=model.account_id,
            notifications_enabled=model.notifications_enabled,
            language=model.language,
            theme=model.theme,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )
