"""Result types for railway-oriented programming.

Every handler, the token codec and the validators return a Result instead of
raising, so callers branch explicitly on the outcome.

Usage:
    def verify(token: str) -> Result[TokenClaims, DomainError]:
        if not token:
            return Failure(error=IdentityError.INVALID_TOKEN)
        return Success(value=claims)

    match verify(token):
        case Success(value=claims):
            print(claims.user_id)
        case Failure(error=error):
            print(error.code)
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Successful outcome carrying ``value``."""

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Failed outcome carrying ``error``."""

    error: E


type Result[T, E] = Success[T] | Failure[E]
