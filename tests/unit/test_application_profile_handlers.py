"""Unit tests for profile and preferences handlers.

Tests cover:
- GetUserProfileHandler: all three records, USER_NOT_FOUND for any gap
- UpdateProfileHandler / UpdatePreferencesHandler: partial changes passed
  through, other sub-record re-read, USER_NOT_FOUND, DATABASE_ERROR
"""

from unittest.mock import AsyncMock, Mock

import pytest
from uuid_extensions import uuid7

from src.application.commands.handlers.update_preferences_handler import (
    UpdatePreferencesHandler,
)
from src.application.commands.handlers.update_profile_handler import (
    UpdateProfileHandler,
)
from src.application.commands.profile_commands import UpdatePreferences, UpdateProfile
from src.application.queries.handlers.get_user_profile_handler import (
    GetUserProfileHandler,
)
from src.application.queries.user_queries import GetUserProfile
from src.core.enums import ErrorCode
from src.core.result import Failure, Success
from src.domain.entities import PreferencesChanges, ProfileChanges
from src.domain.errors import IdentityError
from tests.conftest import make_account, make_preferences, make_profile


def _repos(account=None, profile=None, preferences=None):
    account_repo = AsyncMock()
    account_repo.find_by_id.return_value = account
    profile_repo = AsyncMock()
    profile_repo.find_by_account_id.return_value = profile
    profile_repo.update.return_value = profile
    preferences_repo = AsyncMock()
    preferences_repo.find_by_account_id.return_value = preferences
    preferences_repo.update.return_value = preferences
    return account_repo, profile_repo, preferences_repo


def _full_repos():
    account = make_account()
    return (
        account,
        *_repos(
            account=account,
            profile=make_profile(account.id),
            preferences=make_preferences(account.id),
        ),
    )


@pytest.mark.unit
class TestGetUserProfileHandler:
    @pytest.mark.asyncio
    async def test_returns_account_profile_and_preferences(self):
        account, account_repo, profile_repo, preferences_repo = _full_repos()
        handler = GetUserProfileHandler(
            account_repo=account_repo,
            profile_repo=profile_repo,
            preferences_repo=preferences_repo,
            logger=Mock(),
        )

        result = await handler.handle(GetUserProfile(user_id=account.id))

        assert isinstance(result, Success)
        assert result.value.account is account
        assert result.value.profile.account_id == account.id
        assert result.value.preferences.account_id == account.id

    @pytest.mark.asyncio
    async def test_missing_account(self):
        handler = GetUserProfileHandler(*_repos(), logger=Mock())

        result = await handler.handle(GetUserProfile(user_id=uuid7()))

        assert result == Failure(error=IdentityError.USER_NOT_FOUND)

    @pytest.mark.asyncio
    async def test_missing_profile_is_user_not_found(self):
        account = make_account()
        repos = _repos(account=account, preferences=make_preferences(account.id))
        handler = GetUserProfileHandler(*repos, logger=Mock())

        result = await handler.handle(GetUserProfile(user_id=account.id))

        assert isinstance(result, Failure)
        assert result.error.code is ErrorCode.USER_NOT_FOUND

    @pytest.mark.asyncio
    async def test_missing_preferences_is_user_not_found(self):
        account = make_account()
        repos = _repos(account=account, profile=make_profile(account.id))
        handler = GetUserProfileHandler(*repos, logger=Mock())

        result = await handler.handle(GetUserProfile(user_id=account.id))

        assert isinstance(result, Failure)
        assert result.error.code is ErrorCode.USER_NOT_FOUND

    @pytest.mark.asyncio
    async def test_store_failure_is_database_error(self):
        account_repo, profile_repo, preferences_repo = _repos()
        account_repo.find_by_id.side_effect = RuntimeError("db down")
        logger = Mock()
        handler = GetUserProfileHandler(
            account_repo, profile_repo, preferences_repo, logger=logger
        )

        result = await handler.handle(GetUserProfile(user_id=uuid7()))

        assert result == Failure(error=IdentityError.DATABASE_ERROR)
        logger.error.assert_called_once()


@pytest.mark.unit
class TestUpdateProfileHandler:
    @pytest.mark.asyncio
    async def test_passes_partial_changes_and_rereads_preferences(self):
        account, account_repo, profile_repo, preferences_repo = _full_repos()
        handler = UpdateProfileHandler(
            account_repo, profile_repo, preferences_repo, logger=Mock()
        )
        changes = ProfileChanges(level=5, experience=1000)

        result = await handler.handle(UpdateProfile(user_id=account.id, changes=changes))

        assert isinstance(result, Success)
        profile_repo.update.assert_awaited_once_with(account.id, changes)
        preferences_repo.find_by_account_id.assert_awaited_once_with(account.id)

    @pytest.mark.asyncio
    async def test_missing_account_skips_update(self):
        account_repo, profile_repo, preferences_repo = _repos()
        handler = UpdateProfileHandler(
            account_repo, profile_repo, preferences_repo, logger=Mock()
        )

        result = await handler.handle(
            UpdateProfile(user_id=uuid7(), changes=ProfileChanges(level=2))
        )

        assert result == Failure(error=IdentityError.USER_NOT_FOUND)
        profile_repo.update.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_store_failure_is_database_error(self):
        account, account_repo, profile_repo, preferences_repo = _full_repos()
        profile_repo.update.side_effect = RuntimeError("db down")
        handler = UpdateProfileHandler(
            account_repo, profile_repo, preferences_repo, logger=Mock()
        )

        result = await handler.handle(
            UpdateProfile(user_id=account.id, changes=ProfileChanges(wins=1))
        )

        assert result == Failure(error=IdentityError.DATABASE_ERROR)


@pytest.mark.unit
class TestUpdatePreferencesHandler:
    @pytest.mark.asyncio
    async def test_passes_partial_changes_and_rereads_profile(self):
        account, account_repo, profile_repo, preferences_repo = _full_repos()
        handler = UpdatePreferencesHandler(
            account_repo, profile_repo, preferences_repo, logger=Mock()
        )
        changes = PreferencesChanges(theme="dark")

        result = await handler.handle(
            UpdatePreferences(user_id=account.id, changes=changes)
        )

        assert isinstance(result, Success)
        preferences_repo.update.assert_awaited_once_with(account.id, changes)
        profile_repo.find_by_account_id.assert_awaited_once_with(account.id)

    @pytest.mark.asyncio
    async def test_missing_preferences_row_is_user_not_found(self):
        account = make_account()
        account_repo, profile_repo, preferences_repo = _repos(
            account=account, profile=make_profile(account.id)
        )
        handler = UpdatePreferencesHandler(
            account_repo, profile_repo, preferences_repo, logger=Mock()
        )

        result = await handler.handle(
            UpdatePreferences(user_id=account.id, changes=PreferencesChanges(language="fr"))
        )

        assert isinstance(result, Failure)
        assert result.error.code is ErrorCode.USER_NOT_FOUND
