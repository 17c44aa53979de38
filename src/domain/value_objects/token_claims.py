"""Token claims value object.

The decoded payload of a bearer token. Not persisted: it is rebuilt from the
signed token on every request.
"""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from src.domain.enums import TokenType


@dataclass(frozen=True, slots=True, kw_only=True)
class TokenClaims:
    """Identity claims embedded in a bearer token.

    Attributes:
        user_id: Account identifier (``sub`` claim).
        email: Account email at issuance.
        username: Account username at issuance.
        token_type: Access or refresh.
        expires_at: Embedded expiry (``exp`` claim), UTC.
    """

    user_id: UUID
    email: str
    username: str
    token_type: TokenType
    expires_at: datetime
