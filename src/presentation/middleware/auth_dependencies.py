"""Bearer token authentication dependencies.

FastAPI dependencies for extracting and validating access tokens, and for
enforcing that callers only touch their own user resources.

Usage:
    @router.get("/users/{user_id}")
    async def get_user(
        current_user: Annotated[CurrentUser, Depends(require_owner)],
    ):
        ...
"""

from dataclasses import dataclass
from typing import Annotated
from uuid import UUID

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from src.core.container import get_token_service
from src.core.errors import AuthenticationError
from src.core.enums import ErrorCode
from src.core.result import Failure, Success
from src.domain.enums import TokenType
from src.domain.errors import IdentityError
from src.domain.protocols import TokenCodecProtocol
from src.presentation.errors import DomainHTTPException

# auto_error=False: missing credentials are reported as 401 below, not the
# framework's default status.
bearer_scheme = HTTPBearer(auto_error=False)

_BEARER_CHALLENGE = {"WWW-Authenticate": "Bearer"}

MISSING_CREDENTIALS = AuthenticationError(
    code=ErrorCode.INVALID_TOKEN,
    message="Missing or invalid authorization header",
)


@dataclass(frozen=True, slots=True, kw_only=True)
class CurrentUser:
    """Authenticated caller identity from a verified access token.

    Attributes:
        user_id: Account identifier (``sub`` claim).
        email: Email at token issuance.
        username: Username at token issuance.
    """

    user_id: UUID
    email: str
    username: str


async def get_current_user(
    credentials: Annotated[
        HTTPAuthorizationCredentials | None, Depends(bearer_scheme)
    ],
    token_service: Annotated[TokenCodecProtocol, Depends(get_token_service)],
) -> CurrentUser:
    """Get current authenticated user from the bearer access token.

    Refresh tokens are rejected here; they are only accepted by /auth/refresh.

    Raises:
        DomainHTTPException 401: If the token is missing, invalid, expired,
            or not an access token.
    """
    if credentials is None:
        raise DomainHTTPException(MISSING_CREDENTIALS, headers=_BEARER_CHALLENGE)

    result = token_service.verify(
        credentials.credentials, expected_type=TokenType.ACCESS
    )

    match result:
        case Success(value=claims):
            return CurrentUser(
                user_id=claims.user_id,
                email=claims.email,
                username=claims.username,
            )
        case Failure(error=error):
            raise DomainHTTPException(error, headers=_BEARER_CHALLENGE)


async def require_owner(
    user_id: UUID,
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
) -> CurrentUser:
    """Require the caller to be the owner of the ``{user_id}`` path resource.

    Runs before the route body, so a mismatch is rejected without touching
    the store.

    Raises:
        DomainHTTPException 403: If the caller id differs from the path id.
    """
    if current_user.user_id != user_id:
        raise DomainHTTPException(IdentityError.UNAUTHORIZED)
    return current_user
