"""Bearer token type discriminator."""

from enum import Enum


class TokenType(str, Enum):
    """Kind of bearer token, embedded in the ``type`` claim.

    ACCESS tokens authorize API calls. REFRESH tokens are only exchanged for
    new access tokens.
    """

    ACCESS = "access"
    REFRESH = "refresh"
