"""Integration tests for ProfileRepository and PreferencesRepository.

Tests cover:
- Defaults at creation
- Partial updates leave other fields unchanged and touch updated_at
- Missing rows return None
- Cascade delete with the owning account

Architecture:
- Integration tests with REAL PostgreSQL database (TEST_DATABASE_URL)
"""

import pytest
from sqlalchemy import delete
from uuid_extensions import uuid7

from src.domain.entities import PreferencesChanges, ProfileChanges
from src.infrastructure.persistence.models import AccountModel
from src.infrastructure.persistence.repositories import (
    AccountRepository,
    PreferencesRepository,
    ProfileRepository,
)


async def _create_account(test_database):
    async with test_database.get_session() as session:
        account = (
            await AccountRepository(session).create(
                email="alice@example.com", username="alice", password_hash="d"
            )
        ).value
        await ProfileRepository(session).create(account.id)
        await PreferencesRepository(session).create(account.id)
    return account


@pytest.mark.integration
class TestProfileRepository:
    @pytest.mark.asyncio
    async def test_defaults(self, test_database):
        account = await _create_account(test_database)

        async with test_database.get_session() as session:
            profile = await ProfileRepository(session).find_by_account_id(account.id)

        assert profile.avatar_url is None
        assert (profile.level, profile.experience, profile.wins, profile.losses) == (
            1,
            0,
            0,
            0,
        )

    @pytest.mark.asyncio
    async def test_partial_update(self, test_database):
        account = await _create_account(test_database)
        async with test_database.get_session() as session:
            before = await ProfileRepository(session).find_by_account_id(account.id)

        async with test_database.get_session() as session:
            updated = await ProfileRepository(session).update(
                account.id, ProfileChanges(level=5, experience=1000)
            )

        assert updated.level == 5
        assert updated.experience == 1000
        assert updated.wins == before.wins
        assert updated.losses == before.losses
        assert updated.avatar_url == before.avatar_url
        assert updated.updated_at >= before.updated_at

    @pytest.mark.asyncio
    async def test_update_missing_returns_none(self, test_database):
        async with test_database.get_session() as session:
            assert await ProfileRepository(session).update(uuid7(), ProfileChanges(wins=1)) is None

    @pytest.mark.asyncio
    async def test_cascade_delete_with_account(self, test_database):
        account = await _create_account(test_database)

        async with test_database.get_session() as session:
            await session.execute(delete(AccountModel).where(AccountModel.id == account.id))

        async with test_database.get_session() as session:
            assert await ProfileRepository(session).find_by_account_id(account.id) is None
            assert await PreferencesRepository(session).find_by_account_id(account.id) is None


@pytest.mark.integration
class TestPreferencesRepository:
    @pytest.mark.asyncio
    async def test_defaults(self, test_database):
        account = await _create_account(test_database)

        async with test_database.get_session() as session:
            preferences = await PreferencesRepository(session).find_by_account_id(account.id)

        assert preferences.notifications_enabled is True
        assert preferences.language == "en"
        assert preferences.theme == "light"

    @pytest.mark.asyncio
    async def test_partial_update_with_false(self, test_database):
        account = await _create_account(test_database)

        async with test_database.get_session() as session:
            updated = await PreferencesRepository(session).update(
                account.id, PreferencesChanges(notifications_enabled=False)
            )

        assert updated.notifications_enabled is False
        assert updated.language == "en"
        assert updated.theme == "light"
