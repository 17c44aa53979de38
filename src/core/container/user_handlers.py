"""User profile handler dependency factories (request-scoped)."""

from typing import TYPE_CHECKING

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from src.core.container.infrastructure import get_db_session, get_logger

if TYPE_CHECKING:
    from src.application.commands.handlers.update_preferences_handler import (
        UpdatePreferencesHandler,
    )
    from src.application.commands.handlers.update_profile_handler import (
        UpdateProfileHandler,
    )
    from src.application.queries.handlers.get_user_profile_handler import (
        GetUserProfileHandler,
    )


async def get_user_profile_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "GetUserProfileHandler":
    """Get GetUserProfile query handler (request-scoped)."""
    from src.application.queries.handlers.get_user_profile_handler import (
        GetUserProfileHandler,
    )
    from src.infrastructure.persistence.repositories import (
        AccountRepository,
        PreferencesRepository,
        ProfileRepository,
    )

    return GetUserProfileHandler(
        account_repo=AccountRepository(session=session),
        profile_repo=ProfileRepository(session=session),
        preferences_repo=PreferencesRepository(session=session),
        logger=get_logger(),
    )


async def get_update_profile_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "UpdateProfileHandler":
    """Get UpdateProfile command handler (request-scoped)."""
    from src.application.commands.handlers.update_profile_handler import (
        UpdateProfileHandler,
    )
    from src.infrastructure.persistence.repositories import (
        AccountRepository,
        PreferencesRepository,
        ProfileRepository,
    )

    return UpdateProfileHandler(
        account_repo=AccountRepository(session=session),
        profile_repo=ProfileRepository(session=session),
        preferences_repo=PreferencesRepository(session=session),
        logger=get_logger(),
    )


async def get_update_preferences_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "UpdatePreferencesHandler":
    """Get UpdatePreferences command handler (request-scoped)."""
    from src.application.commands.handlers.update_preferences_handler import (
        UpdatePreferencesHandler,
    )
    from src.infrastructure.persistence.repositories import (
        AccountRepository,
        PreferencesRepository,
        ProfileRepository,
    )

    return UpdatePreferencesHandler(
        account_repo=AccountRepository(session=session),
        profile_repo=ProfileRepository(session=session),
        preferences_repo=PreferencesRepository(session=session),
        logger=get_logger(),
    )
