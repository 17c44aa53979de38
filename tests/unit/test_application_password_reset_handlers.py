"""Unit tests for the password reset handlers.

Tests cover:
- RequestPasswordResetHandler: identical response for known/unknown emails,
  secret hashed before storage, plaintext handed to delivery, store failures
  swallowed
- ConfirmPasswordResetHandler: weak password short-circuit, secret matching,
  expiry re-check, atomic consume + password update, lost consume race
"""

from datetime import UTC, datetime, timedelta
from unittest.mock import AsyncMock, Mock

import pytest
from uuid_extensions import uuid7

from src.application.commands.auth_commands import (
    ConfirmPasswordReset,
    RequestPasswordReset,
)
from src.application.commands.handlers.confirm_password_reset_handler import (
    ConfirmPasswordResetHandler,
)
from src.application.commands.handlers.request_password_reset_handler import (
    RequestPasswordResetHandler,
)
from src.application.dtos import (
    PasswordResetConfirmResponse,
    PasswordResetRequestResponse,
)
from src.core.result import Failure, Success
from src.domain.entities import ResetTicket
from src.domain.errors import IdentityError
from tests.conftest import make_account
from tests.utils.in_memory import RecordingUnitOfWork

GENERIC_MESSAGE = "If the email exists, a password reset link has been sent"


def _ticket(secret_hash="digest", expires_in=timedelta(minutes=30)) -> ResetTicket:
    now = datetime.now(UTC)
    return ResetTicket(
        id=uuid7(),
        account_id=uuid7(),
        secret_hash=secret_hash,
        expires_at=now + expires_in,
        created_at=now,
    )


@pytest.mark.unit
class TestRequestPasswordResetHandler:
    def _build(self, account=None):
        account_repo = AsyncMock()
        account_repo.find_by_email.return_value = account
        ticket_repo = AsyncMock()
        ticket_repo.save.return_value = _ticket()
        token_service = Mock()
        token_service.generate_token.return_value = "a" * 64
        expires_at = datetime.now(UTC) + timedelta(hours=1)
        token_service.calculate_expiration.return_value = expires_at
        password_service = Mock()
        password_service.hash_password.return_value = "secret-digest"
        delivery = AsyncMock()

        handler = RequestPasswordResetHandler(
            account_repo=account_repo,
            reset_ticket_repo=ticket_repo,
            reset_token_service=token_service,
            password_service=password_service,
            delivery=delivery,
            logger=Mock(),
        )
        return handler, account_repo, ticket_repo, delivery, expires_at

    @pytest.mark.asyncio
    async def test_known_email_stores_digest_and_delivers_plaintext(self):
        account = make_account()
        handler, _, ticket_repo, delivery, expires_at = self._build(account=account)

        result = await handler.handle(RequestPasswordReset(email=account.email))

        assert result == Success(value=PasswordResetRequestResponse())
        ticket_repo.save.assert_awaited_once_with(
            account_id=account.id,
            secret_hash="secret-digest",
            expires_at=expires_at,
        )
        delivery.send_reset_token.assert_awaited_once_with(account.email, "a" * 64)

    @pytest.mark.asyncio
    async def test_unknown_email_returns_identical_response(self):
        known, *_ = self._build(account=make_account())
        unknown, _, ticket_repo, delivery, _ = self._build(account=None)

        known_result = await known.handle(RequestPasswordReset(email="alice@example.com"))
        unknown_result = await unknown.handle(
            RequestPasswordReset(email="nobody@example.com")
        )

        assert unknown_result == known_result
        assert unknown_result.value.message == GENERIC_MESSAGE
        ticket_repo.save.assert_not_awaited()
        delivery.send_reset_token.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_store_failure_still_returns_generic_success(self):
        handler, account_repo, _, _, _ = self._build()
        account_repo.find_by_email.side_effect = RuntimeError("db down")

        result = await handler.handle(RequestPasswordReset(email="alice@example.com"))

        assert isinstance(result, Success)
        assert result.value.message == GENERIC_MESSAGE


@pytest.mark.unit
class TestConfirmPasswordResetHandler:
    def _build(self, tickets=(), matching_hash="digest", consumed=True):
        account_repo = AsyncMock()
        ticket_repo = AsyncMock()
        ticket_repo.find_active.return_value = list(tickets)
        ticket_repo.consume.return_value = consumed
        password_service = Mock()
        password_service.verify_password.side_effect = (
            lambda secret, digest: digest == matching_hash
        )
        password_service.hash_password.return_value = "new-digest"
        unit_of_work = RecordingUnitOfWork()

        handler = ConfirmPasswordResetHandler(
            account_repo=account_repo,
            reset_ticket_repo=ticket_repo,
            unit_of_work=unit_of_work,
            password_service=password_service,
            logger=Mock(),
        )
        return handler, account_repo, ticket_repo, unit_of_work

    @pytest.mark.asyncio
    async def test_valid_secret_consumes_ticket_and_updates_password(self):
        ticket = _ticket()
        handler, account_repo, ticket_repo, unit_of_work = self._build(tickets=[ticket])

        result = await handler.handle(
            ConfirmPasswordReset(token="secret", new_password="newpassword123")
        )

        assert result == Success(value=PasswordResetConfirmResponse())
        assert result.value.message == "Password has been reset successfully"
        ticket_repo.consume.assert_awaited_once_with(ticket.id)
        account_repo.update_password.assert_awaited_once_with(
            ticket.account_id, "new-digest"
        )
        assert unit_of_work.scopes == 1
        assert unit_of_work.rolled_back is False

    @pytest.mark.asyncio
    async def test_first_matching_ticket_wins(self):
        newer = _ticket(secret_hash="other")
        older = _ticket(secret_hash="digest")
        handler, account_repo, ticket_repo, _ = self._build(tickets=[newer, older])

        await handler.handle(ConfirmPasswordReset(token="secret", new_password="password123"))

        ticket_repo.consume.assert_awaited_once_with(older.id)

    @pytest.mark.asyncio
    async def test_weak_password_rejected_before_store_access(self):
        handler, _, ticket_repo, _ = self._build(tickets=[_ticket()])

        result = await handler.handle(ConfirmPasswordReset(token="secret", new_password="short"))

        assert result == Failure(error=IdentityError.WEAK_PASSWORD)
        ticket_repo.find_active.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_no_matching_ticket_is_invalid_reset_token(self):
        handler, account_repo, _, _ = self._build(tickets=[_ticket(secret_hash="other")])

        result = await handler.handle(
            ConfirmPasswordReset(token="secret", new_password="password123")
        )

        assert result == Failure(error=IdentityError.INVALID_RESET_TOKEN)
        account_repo.update_password.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_ticket_expired_between_scan_and_check(self):
        expired = _ticket(expires_in=timedelta(seconds=-1))
        handler, account_repo, ticket_repo, _ = self._build(tickets=[expired])

        result = await handler.handle(
            ConfirmPasswordReset(token="secret", new_password="password123")
        )

        assert result == Failure(error=IdentityError.RESET_TOKEN_EXPIRED)
        ticket_repo.consume.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_lost_consume_race_rolls_back_and_is_invalid(self):
        handler, account_repo, _, unit_of_work = self._build(
            tickets=[_ticket()], consumed=False
        )

        result = await handler.handle(
            ConfirmPasswordReset(token="secret", new_password="password123")
        )

        assert result == Failure(error=IdentityError.INVALID_RESET_TOKEN)
        account_repo.update_password.assert_not_awaited()
        assert unit_of_work.rolled_back is True

    @pytest.mark.asyncio
    async def test_update_failure_rolls_back_and_is_database_error(self):
        handler, account_repo, _, unit_of_work = self._build(tickets=[_ticket()])
        account_repo.update_password.side_effect = RuntimeError("db down")

        result = await handler.handle(
            ConfirmPasswordReset(token="secret", new_password="password123")
        )

        assert result == Failure(error=IdentityError.DATABASE_ERROR)
        assert unit_of_work.rolled_back is True
