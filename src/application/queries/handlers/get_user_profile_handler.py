"""Get user profile query handler.

Returns the account together with its profile and preferences. A missing
account or a missing sub-record is reported as USER_NOT_FOUND.
"""

from src.application.dtos import UserWithProfile
from src.application.queries.user_queries import GetUserProfile
from src.core.errors import DomainError
from src.core.result import Failure, Result, Success
from src.domain.errors import IdentityError
from src.domain.protocols import (
    AccountRepository,
    LoggerProtocol,
    PreferencesRepository,
    ProfileRepository,
)


class GetUserProfileHandler:
    """Handler for GetUserProfile query."""

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

    async def handle(self, query: GetUserProfile) -> Result[UserWithProfile, DomainError]:
        """Handle get user profile query.

        Args:
            query: GetUserProfile query.

        Returns:
            Success(UserWithProfile), or Failure(USER_NOT_FOUND | DATABASE_ERROR).
        """
        try:
            account = await self._account_repo.find_by_id(query.user_id)
            if account is None:
                return Failure(error=IdentityError.USER_NOT_FOUND)

            profile = await self._profile_repo.find_by_account_id(query.user_id)
            if profile is None:
                return Failure(error=IdentityError.PROFILE_NOT_FOUND)

            preferences = await self._preferences_repo.find_by_account_id(query.user_id)
            if preferences is None:
                return Failure(error=IdentityError.PREFERENCES_NOT_FOUND)
        except Exception as e:
            self._logger.error("get_profile_failed", error=e, user_id=str(query.user_id))
            return Failure(error=IdentityError.DATABASE_ERROR)

        return Success(
            value=UserWithProfile(account=account, profile=profile, preferences=preferences)
        )
