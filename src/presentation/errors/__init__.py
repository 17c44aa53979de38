"""RFC 9457 error response schemas and exception handlers.

Exports:
    DomainHTTPException: HTTPException carrying a DomainError
    ErrorDetail: Individual field-specific error
    ErrorResponseBuilder: Utility for building RFC 9457 responses
    ProblemDetails: RFC 9457 error response schema
    register_exception_handlers: Register global exception handlers with FastAPI
"""

from src.presentation.errors.error_response_builder import (
    DomainHTTPException,
    ErrorResponseBuilder,
)
from src.presentation.errors.exception_handlers import register_exception_handlers
from src.presentation.errors.problem_details import ErrorDetail, ProblemDetails

__all__ = [
    "DomainHTTPException",
    "ErrorDetail",
    "ErrorResponseBuilder",
    "ProblemDetails",
    "register_exception_handlers",
]
