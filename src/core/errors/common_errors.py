"""Common error classes, one per HTTP-equivalent severity class.

Error Types:
- ValidationError: Input validation failures (400)
- AuthenticationError: Credential or token failures (401)
- AuthorizationError: Caller lacks access to the resource (403)
- NotFoundError: Resource not found (404)
- ConflictError: Uniqueness conflicts (409)
- InfrastructureError: Store or unexpected failures (500)

Usage:
    from src.core.errors import ValidationError
    from src.core.enums import ErrorCode
    from src.core.result import Failure

    return Failure(error=ValidationError(
        code=ErrorCode.INVALID_EMAIL,
        message="Invalid email format",
        field="email",
    ))
"""

from dataclasses import dataclass

from src.core.errors.domain_error import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class ValidationError(DomainError):
    """Input validation failure.

    Attributes:
        field: Field name that failed validation.
    """

    field: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class NotFoundError(DomainError):
    """Resource not found.

    Attributes:
        resource_type: Type of resource (User, Profile, Preferences).
    """

    resource_type: str


@dataclass(frozen=True, slots=True, kw_only=True)
class ConflictError(DomainError):
    """Resource conflict (duplicate unique value).

    Attributes:
        resource_type: Type of resource in conflict.
        conflicting_field: Field that has conflict (email, username).
    """

    resource_type: str
    conflicting_field: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class AuthenticationError(DomainError):
    """Authentication failure (invalid credentials, token expired)."""

    pass


@dataclass(frozen=True, slots=True, kw_only=True)
class AuthorizationError(DomainError):
    """Authorization failure (caller is not the resource owner)."""

    pass


@dataclass(frozen=True, slots=True, kw_only=True)
class InfrastructureError(DomainError):
    """Store or unexpected failure. Message must not leak internals."""

    pass
