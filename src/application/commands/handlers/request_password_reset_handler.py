"""Request Password Reset handler.

Flow:
1. Look up account by exact email
2. Account absent: log and return the generic response
3. Account present: generate a secret, store its bcrypt digest with a
   one-hour expiry, hand the plaintext secret to the delivery adapter
4. Return the generic response

Security:
    The response is identical for known and unknown emails, and store
    failures are logged then answered with the same response, so the
    endpoint cannot be used to enumerate accounts.
"""

from src.application.commands.auth_commands import RequestPasswordReset
from src.application.dtos import PasswordResetRequestResponse
from src.core.errors import DomainError
from src.core.result import Result, Success
from src.domain.protocols import (
    AccountRepository,
    LoggerProtocol,
    PasswordHashingProtocol,
    ResetTicketRepository,
    ResetTokenDeliveryProtocol,
    ResetTokenServiceProtocol,
)


class RequestPasswordResetHandler:
    """Handler for password reset request command."""

    def __init__(
        self,
        account_repo: AccountRepository,
        reset_ticket_repo: ResetTicketRepository,
        reset_token_service: ResetTokenServiceProtocol,
        password_service: PasswordHashingProtocol,
        delivery: ResetTokenDeliveryProtocol,
        logger: LoggerProtocol,
    ) -> None:
        """Initialize password reset request handler.

        Args:
            account_repo: Account lookup by email.
            reset_ticket_repo: Ticket persistence.
            reset_token_service: Secret generation and expiry.
            password_service: Hashes the secret before it is stored.
            delivery: Out-of-band delivery of the plaintext secret.
            logger: Structured logger.
        """
        self._account_repo = account_repo
        self._reset_ticket_repo = reset_ticket_repo
        self._reset_token_service = reset_token_service
        self._password_service = password_service
        self._delivery = delivery
        self._logger = logger

    async def handle(
        self, cmd: RequestPasswordReset
    ) -> Result[PasswordResetRequestResponse, DomainError]:
        """Handle password reset request.

        Returns:
            Always Success(PasswordResetRequestResponse).
        """
        try:
            account = await self._account_repo.find_by_email(cmd.email)
            if account is None:
                self._logger.info("password_reset_requested_unknown_email")
                return Success(value=PasswordResetRequestResponse())

            token = self._reset_token_service.generate_token()
            ticket = await self._reset_ticket_repo.save(
                account_id=account.id,
                secret_hash=self._password_service.hash_password(token),
                expires_at=self._reset_token_service.calculate_expiration(),
            )
            await self._delivery.send_reset_token(account.email, token)

            self._logger.info(
                "password_reset_requested",
                user_id=str(account.id),
                ticket_id=str(ticket.id),
            )
        except Exception as e:
            self._logger.error("password_reset_request_failed", error=e)

        return Success(value=PasswordResetRequestResponse())
