"""Shared kernel: Result types, error values and error codes.

Imported by every layer; imports nothing outside ``src.core``.
"""

from src.core.enums import ErrorCode
from src.core.errors import (
    AuthenticationError,
    AuthorizationError,
    ConflictError,
    DomainError,
    InfrastructureError,
    NotFoundError,
    ValidationError,
)
from src.core.result import Failure, Result, Success

__all__ = [
    "AuthenticationError",
    "AuthorizationError",
    "ConflictError",
    "DomainError",
    "ErrorCode",
    "Failure",
    "InfrastructureError",
    "NotFoundError",
    "Result",
    "Success",
    "ValidationError",
]
