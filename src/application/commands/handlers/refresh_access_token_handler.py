"""Refresh access token handler.

Flow:
1. Verify the refresh token (signature, expiry, type == refresh)
2. Load the account named by the token
3. Issue a new access token (the refresh token is not rotated)

Any verification failure, including an expired refresh token or an access
token presented in its place, is reported as "Invalid refresh token".
"""

from src.application.commands.auth_commands import RefreshAccessToken
from src.application.dtos import AccessTokenResult
from src.core.errors import DomainError
from src.core.result import Failure, Result, Success
from src.domain.enums import TokenType
from src.domain.errors import IdentityError
from src.domain.protocols import AccountRepository, LoggerProtocol, TokenCodecProtocol


class RefreshAccessTokenHandler:
    """Handler for refresh access token command."""

    def __init__(
        self,
        account_repo: AccountRepository,
        token_service: TokenCodecProtocol,
        logger: LoggerProtocol,
    ) -> None:
        self._account_repo = account_repo
        self._token_service = token_service
        self._logger = logger

    async def handle(
        self, cmd: RefreshAccessToken
    ) -> Result[AccessTokenResult, DomainError]:
        """Handle refresh command.

        Returns:
            Success(AccessTokenResult).
            Failure(INVALID_REFRESH_TOKEN | USER_NOT_FOUND | DATABASE_ERROR).
        """
        verified = self._token_service.verify(
            cmd.refresh_token, expected_type=TokenType.REFRESH
        )
        if isinstance(verified, Failure):
            self._logger.info("token_refresh_rejected", reason=verified.error.code.value)
            return Failure(error=IdentityError.INVALID_REFRESH_TOKEN)

        claims = verified.value

        try:
            account = await self._account_repo.find_by_id(claims.user_id)
        except Exception as e:
            self._logger.error("token_refresh_lookup_failed", error=e)
            return Failure(error=IdentityError.DATABASE_ERROR)

        if account is None:
            return Failure(error=IdentityError.USER_NOT_FOUND)

        access_token = self._token_service.generate_access_token(
            account.id, account.email, account.username
        )
        self._logger.info("access_token_refreshed", user_id=str(account.id))
        return Success(value=AccessTokenResult(access_token=access_token))
