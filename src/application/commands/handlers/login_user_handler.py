"""Login handler.

Flow:
1. Validate email shape
2. Look up credentials by email
3. Verify password
4. Issue access + refresh tokens
5. Return Success(AuthResult)

An unknown email and a wrong password produce the same INVALID_CREDENTIALS
failure so responses never reveal which emails are registered.
"""

from src.application.commands.auth_commands import LoginUser
from src.application.dtos import AuthResult
from src.core.errors import DomainError
from src.core.result import Failure, Result, Success
from src.domain.errors import IdentityError
from src.domain.protocols import (
    AccountRepository,
    LoggerProtocol,
    PasswordHashingProtocol,
    TokenCodecProtocol,
)
from src.domain.validators import validate_email


class LoginUserHandler:
    """Handler for user login command."""

    def __init__(
        self,
        account_repo: AccountRepository,
        password_service: PasswordHashingProtocol,
        token_service: TokenCodecProtocol,
        logger: LoggerProtocol,
    ) -> None:
        self._account_repo = account_repo
        self._password_service = password_service
        self._token_service = token_service
        self._logger = logger

    async def handle(self, cmd: LoginUser) -> Result[AuthResult, DomainError]:
        """Handle login command.

        Args:
            cmd: LoginUser command.

        Returns:
            Success(AuthResult) on valid credentials.
            Failure(INVALID_EMAIL | INVALID_CREDENTIALS | DATABASE_ERROR) otherwise.
        """
        validation = validate_email(cmd.email)
        if isinstance(validation, Failure):
            return validation

        try:
            credentials = await self._account_repo.find_credentials_by_email(cmd.email)
        except Exception as e:
            self._logger.error("login_lookup_failed", error=e)
            return Failure(error=IdentityError.DATABASE_ERROR)

        if credentials is None or not self._password_service.verify_password(
            cmd.password, credentials.password_hash
        ):
            self._logger.info("login_failed")
            return Failure(error=IdentityError.INVALID_CREDENTIALS)

        account = credentials.account
        self._logger.info("login_succeeded", user_id=str(account.id))

        return Success(
            value=AuthResult(
                account=account,
                access_token=self._token_service.generate_access_token(
                    account.id, account.email, account.username
                ),
                refresh_token=self._token_service.generate_refresh_token(
                    account.id, account.email, account.username
                ),
            )
        )
