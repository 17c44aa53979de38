"""JWT token codec (adapter).

This service implements the TokenCodecProtocol using PyJWT with HMAC-SHA256.

Architecture:
    - Implements TokenCodecProtocol (no inheritance required)
    - Structural typing via Protocol
    - Injected via dependency container

Claims:
    - sub: account id (UUID string)
    - email, username: identity at issuance
    - type: "access" or "refresh"
    - iat, exp: issued-at and expiry (seconds since epoch)
    - jti: unique token id (UUIDv7)

Performance:
    - Stateless validation (no database lookup)
    - No side effects beyond reading the clock
"""

from datetime import UTC, datetime, timedelta
from typing import Any
from uuid import UUID

import jwt
from jwt.exceptions import ExpiredSignatureError, InvalidTokenError
from uuid_extensions import uuid7

from src.core.errors import AuthenticationError
from src.core.result import Failure, Result, Success
from src.domain.enums import TokenType
from src.domain.errors import IdentityError
from src.domain.value_objects import TokenClaims

_REQUIRED_CLAIMS = ["sub", "exp", "iat"]


class JWTService:
    """JWT token generation and validation service.

    Usage:
        from src.core.container import get_token_service

        token_service = get_token_service()
        token = token_service.generate_access_token(
            user_id=account.id, email=account.email, username=account.username
        )
        result = token_service.verify(token, expected_type=TokenType.ACCESS)
    """

    def __init__(
        self,
        secret_key: str,
        access_expiration_minutes: int = 60 * 24,
        refresh_expiration_days: int = 7,
    ) -> None:
        """Initialize JWT service.

        Args:
            secret_key: Secret key for HMAC-SHA256 signing.
                MUST be at least 256 bits (32 bytes).
            access_expiration_minutes: Access token lifetime (default: 24h).
            refresh_expiration_days: Refresh token lifetime (default: 7 days).

        Raises:
            ValueError: If secret_key is too short (< 32 bytes).
        """
        if len(secret_key.encode("utf-8")) < 32:
            msg = "JWT secret key must be at least 32 bytes (256 bits)"
            raise ValueError(msg)

        self._secret_key = secret_key
        self._algorithm = "HS256"
        self._default_ttl = {
            TokenType.ACCESS: timedelta(minutes=access_expiration_minutes),
            TokenType.REFRESH: timedelta(days=refresh_expiration_days),
        }

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
            ttl: Lifetime override (defaults to the configured TTL for the type).

        Returns:
            JWT string (header.payload.signature).

        Example:
            >>> service = JWTService(secret_key="x" * 32)
            >>> token = service.issue(uuid7(), "a@x.io", "alice", TokenType.ACCESS)
            >>> len(token.split("."))
            3
        """
        now = datetime.now(UTC)
        expires_at = now + (ttl if ttl is not None else self._default_ttl[token_type])

        payload = {
            "sub": str(user_id),
            "email": email,
            "username": username,
            "type": token_type.value,
            "iat": int(now.timestamp()),
            "exp": int(expires_at.timestamp()),
            "jti": str(uuid7()),
        }

        token: str = jwt.encode(payload, self._secret_key, algorithm=self._algorithm)
        return token

    def generate_access_token(self, user_id: UUID, email: str, username: str) -> str:
        """Issue an access token with the configured access TTL."""
        return self.issue(user_id, email, username, TokenType.ACCESS)

    def generate_refresh_token(self, user_id: UUID, email: str, username: str) -> str:
        """Issue a refresh token with the configured refresh TTL."""
        return self.issue(user_id, email, username, TokenType.REFRESH)

    def verify(
        self, token: str, expected_type: TokenType | None = None
    ) -> Result[TokenClaims, AuthenticationError]:
        """Verify token signature, expiry and claim shape.

        Args:
            token: JWT string.
            expected_type: If given, tokens of any other type are rejected.

        Returns:
            Success(TokenClaims) if valid.
            Failure(EXPIRED_TOKEN) if ``exp`` has passed.
            Failure(INVALID_TOKEN) for any other defect.

        Note:
            - Returns Failure (not exceptions) for invalid tokens
            - A refresh token never verifies as an access token
        """
        try:
            payload: dict[str, Any] = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self._algorithm],
                options={"require": _REQUIRED_CLAIMS},
            )
        except ExpiredSignatureError:
            return Failure(error=IdentityError.EXPIRED_TOKEN)
        except InvalidTokenError:
            return Failure(error=IdentityError.INVALID_TOKEN)

        claims = _claims_from_payload(payload)
        if claims is None:
            return Failure(error=IdentityError.INVALID_TOKEN)

        if expected_type is not None and claims.token_type is not expected_type:
            return Failure(error=IdentityError.INVALID_TOKEN)

        return Success(value=claims)

    def decode(self, token: str) -> TokenClaims | None:
        """Read claims without verifying signature or expiry.

        Introspection only. Never use the result for authorization.

        Args:
            token: JWT string.

        Returns:
            TokenClaims, or None if the payload cannot be read.
        """
        try:
            payload: dict[str, Any] = jwt.decode(
                token,
                options={"verify_signature": False, "verify_exp": False},
            )
        except InvalidTokenError:
            return None
        return _claims_from_payload(payload)


def _claims_from_payload(payload: dict[str, Any]) -> TokenClaims | None:
    """Build TokenClaims from a decoded payload, or None if any claim is ill-typed."""
    try:
        user_id = UUID(str(payload["sub"]))
        token_type = TokenType(payload["type"])
        expires_at = datetime.fromtimestamp(int(payload["exp"]), tz=UTC)
        email = payload["email"]
        username = payload["username"]
    except (KeyError, ValueError, TypeError, OverflowError, OSError):
        return None

    if not isinstance(email, str) or not isinstance(username, str):
        return None

    return TokenClaims(
        user_id=user_id,
        email=email,
        username=username,
        token_type=token_type,
        expires_at=expires_at,
    )
