"""Token codec protocol for domain layer.

Signs and verifies compact, self-contained bearer tokens carrying identity
claims and a type tag (access vs refresh).

Architecture:
    - Domain defines protocol (port)
    - Infrastructure implements adapter (JWTService)
    - Stateless validation (no database lookup)
"""

from datetime import timedelta
from typing import Protocol
from uuid import UUID

from src.core.errors import AuthenticationError
from src.core.result import Result
from src.domain.enums import TokenType
from src.domain.value_objects import TokenClaims


class TokenCodecProtocol(Protocol):
    """Bearer token issuance and verification interface.

    Implementations:
        - JWTService: HMAC-SHA256 JWT (production)

    Usage:
        token = codec.generate_access_token(
            user_id=account.id, email=account.email, username=account.username
        )
        match codec.verify(token, expected_type=TokenType.ACCESS):
            case Success(value=claims):
                ...
            case Failure(error=error):
                ...  # EXPIRED_TOKEN or INVALID_TOKEN
    """

    def issue(
        self,
        user_id: UUID,
        email: str,
        username: str,
        token_type: TokenType,
        ttl: timedelta | None = None,
    ) -> str:
        """Issue a signed token.

        Args:
            user_id: Account identifier.
            email: Account email.
            username: Account username.
            token_type: Access or refresh.
            ttl: Lifetime override; defaults to the configured TTL for the type.

        Returns:
            Signed token string.
        """
        ...

    def generate_access_token(self, user_id: UUID, email: str, username: str) -> str:
        """Issue an access token with the configured access TTL."""
        ...

    def generate_refresh_token(self, user_id: UUID, email: str, username: str) -> str:
        """Issue a refresh token with the configured refresh TTL."""
        ...

    def verify(
        self, token: str, expected_type: TokenType | None = None
    ) -> Result[TokenClaims, AuthenticationError]:
        """Verify signature, expiry and claim shape.

        Args:
            token: Token string.
            expected_type: If given, tokens of another type are rejected.

        Returns:
            Success(TokenClaims), Failure(EXPIRED_TOKEN) or Failure(INVALID_TOKEN).
        """
        ...

    def decode(self, token: str) -> TokenClaims | None:
        """Read claims without verifying signature or expiry.

        Introspection only. Never use the result for authorization.

        Args:
            token: Token string.

        Returns:
            TokenClaims, or None if the payload cannot be read.
        """
        ...
