"""User queries (CQRS read operations).

Queries represent requests for information. They are immutable dataclasses
with question-like names. Queries NEVER change state.
"""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True, kw_only=True)
class GetUserProfile:
    """Get an account with its profile and preferences.

    Attributes:
        user_id: Account identifier.

    Example:
        >>> query = GetUserProfile(user_id=UUID("0190..."))
        >>> result = await handler.handle(query)
    """

    user_id: UUID


@dataclass(frozen=True, kw_only=True)
class ValidateToken:
    """Check a bearer token and report the identity it carries.

    Attributes:
        token: JWT of either type.
    """

    token: str
