"""Update profile handler.

Flow:
1. Load the account (absent: USER_NOT_FOUND)
2. Apply supplied profile fields, touching updated_at
3. Re-read preferences
4. Return Success(UserWithProfile)
"""

from src.application.commands.profile_commands import UpdateProfile
from src.application.dtos import UserWithProfile
from src.core.errors import DomainError
from src.core.result import Failure, Result, Success
from src.domain.errors import IdentityError
from src.domain.protocols import (
    AccountRepository,
    LoggerProtocol,
    PreferencesRepository,
    ProfileRepository,
)


class UpdateProfileHandler:
    """Handler for profile update command."""

    def __init__(
        self,
        account_repo: AccountRepository,
        profile_repo: ProfileRepository,
        preferences_repo: PreferencesRepository,
        logger: LoggerProtocol,
    ) -> None:
        self._account_repo = account_repo
        self._profile_repo = profile_repo
        self._preferences_repo = preferences_repo
        self._logger = logger

    async def handle(self, cmd: UpdateProfile) -> Result[UserWithProfile, DomainError]:
        """Handle profile update.

        Returns:
            Success(UserWithProfile) with the updated profile.
            Failure(USER_NOT_FOUND | DATABASE_ERROR).
        """
        try:
            account = await self._account_repo.find_by_id(cmd.user_id)
            if account is None:
                return Failure(error=IdentityError.USER_NOT_FOUND)

            profile = await self._profile_repo.update(cmd.user_id, cmd.changes)
            if profile is None:
                return Failure(error=IdentityError.PROFILE_NOT_FOUND)

            preferences = await self._preferences_repo.find_by_account_id(cmd.user_id)
            if preferences is None:
                return Failure(error=IdentityError.PREFERENCES_NOT_FOUND)
        except Exception as e:
            self._logger.error("profile_update_failed", error=e, user_id=str(cmd.user_id))
            return Failure(error=IdentityError.DATABASE_ERROR)

        self._logger.info(
            "profile_updated",
            user_id=str(cmd.user_id),
            fields=sorted(cmd.changes.as_dict()),
        )
        return Success(
            value=UserWithProfile(account=account, profile=profile, preferences=preferences)
        )
