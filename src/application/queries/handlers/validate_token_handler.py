"""Validate token query handler.

Stateless: verifies signature and expiry of a token of either type and
reports the identity it carries. No database access.
"""

from src.application.dtos import TokenValidation
from src.application.queries.user_queries import ValidateToken
from src.core.errors import DomainError
from src.core.result import Failure, Result, Success
from src.domain.protocols import TokenCodecProtocol


class ValidateTokenHandler:
    """Handler for ValidateToken query."""

    def __init__(self, token_service: TokenCodecProtocol) -> None:
        self._token_service = token_service

    async def handle(self, query: ValidateToken) -> Result[TokenValidation, DomainError]:
        """Handle token validation.

        Returns:
            Success(TokenValidation), or Failure(EXPIRED_TOKEN | INVALID_TOKEN).
        """
        verified = self._token_service.verify(query.token)
        if isinstance(verified, Failure):
            return verified

        claims = verified.value
        return Success(
            value=TokenValidation(
                user_id=claims.user_id,
                email=claims.email,
                username=claims.username,
            )
        )
