"""Confirm Password Reset handler.

Flow:
1. Reject new passwords shorter than 8 characters (no store access)
2. Scan non-expired tickets newest first; the first whose digest matches the
   supplied secret is the candidate
3. Re-check the candidate's expiry against the current instant
4. Hash the new password
5. In one transaction scope: consume the ticket (conditional delete) and
   update the account's password hash
6. Return Success(PasswordResetConfirmResponse)

Concurrency:
    Two confirmations of the same secret both reach step 5; the database lets
    only one delete the ticket. The other sees zero deleted rows and fails with
    INVALID_RESET_TOKEN, and its scope is rolled back so the password is
    changed exactly once.
"""

from datetime import UTC, datetime

from src.application.commands.auth_commands import ConfirmPasswordReset
from src.application.dtos import PasswordResetConfirmResponse
from src.core.errors import DomainError
from src.core.result import Failure, Result, Success
from src.domain.entities.reset_ticket import ResetTicket
from src.domain.errors import IdentityError
from src.domain.protocols import (
    AccountRepository,
    LoggerProtocol,
    PasswordHashingProtocol,
    ResetTicketRepository,
    UnitOfWorkProtocol,
)
from src.domain.validators import validate_password


class TicketAlreadyConsumed(Exception):
    """Raised inside the transaction scope to roll back a lost consume race."""


class ConfirmPasswordResetHandler:
    """Handler for password reset confirmation command."""

    def __init__(
        self,
        account_repo: AccountRepository,
        reset_ticket_repo: ResetTicketRepository,
        unit_of_work: UnitOfWorkProtocol,
        password_service: PasswordHashingProtocol,
        logger: LoggerProtocol,
    ) -> None:
        """Initialize password reset confirmation handler.

        Args:
            account_repo: Password update.
            reset_ticket_repo: Ticket lookup and consumption.
            unit_of_work: Transaction scope for consume + password update.
            password_service: Secret matching and new password hashing.
            logger: Structured logger.
        """
        self._account_repo = account_repo
        self._reset_ticket_repo = reset_ticket_repo
        self._unit_of_work = unit_of_work
        self._password_service = password_service
        self._logger = logger

    async def handle(
        self, cmd: ConfirmPasswordReset
    ) -> Result[PasswordResetConfirmResponse, DomainError]:
        """Handle password reset confirmation.

        Returns:
            Success(PasswordResetConfirmResponse).
            Failure(WEAK_PASSWORD | INVALID_RESET_TOKEN | RESET_TOKEN_EXPIRED
            | DATABASE_ERROR).
        """
        validation = validate_password(cmd.new_password)
        if isinstance(validation, Failure):
            return validation

        try:
            ticket = await self._find_matching_ticket(cmd.token)
            if ticket is None:
                self._logger.info("password_reset_rejected", reason="no_matching_ticket")
                return Failure(error=IdentityError.INVALID_RESET_TOKEN)

            if ticket.is_expired(datetime.now(UTC)):
                self._logger.info(
                    "password_reset_rejected",
                    reason="ticket_expired",
                    ticket_id=str(ticket.id),
                )
                return Failure(error=IdentityError.RESET_TOKEN_EXPIRED)

            password_hash = self._password_service.hash_password(cmd.new_password)

            async with self._unit_of_work.begin():
                if not await self._reset_ticket_repo.consume(ticket.id):
                    raise TicketAlreadyConsumed(str(ticket.id))
                await self._account_repo.update_password(ticket.account_id, password_hash)

        except TicketAlreadyConsumed:
            self._logger.info(
                "password_reset_rejected",
                reason="ticket_already_consumed",
                ticket_id=str(ticket.id),
            )
            return Failure(error=IdentityError.INVALID_RESET_TOKEN)
        except Exception as e:
            self._logger.error("password_reset_confirm_failed", error=e)
            return Failure(error=IdentityError.DATABASE_ERROR)

        self._logger.info("password_reset_completed", user_id=str(ticket.account_id))
        return Success(value=PasswordResetConfirmResponse())

    async def _find_matching_ticket(self, token: str) -> ResetTicket | None:
        """Return the newest active ticket whose digest matches ``token``."""
        for candidate in await self._reset_ticket_repo.find_active(datetime.now(UTC)):
            if self._password_service.verify_password(token, candidate.secret_hash):
                return candidate
        return None
