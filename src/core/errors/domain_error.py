"""Base error value for Result-returning code.

Errors are returned inside ``Failure``, never raised. The concrete subclass
(see common_errors) carries the severity; ``code`` is the stable identifier
clients branch on; ``message`` is safe to put in a response body.

Usage:
    from src.core.errors import DomainError

    def describe(error: DomainError) -> str:
        return str(error)  # "INVALID_EMAIL: Invalid email format"
"""

from dataclasses import dataclass

from src.core.enums import ErrorCode


@dataclass(frozen=True, slots=True, kw_only=True)
class DomainError:
    """Base error (not an Exception).

    Attributes:
        code: Machine-readable error code.
        message: Client-safe description.
    """

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"
