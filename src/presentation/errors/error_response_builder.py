"""Error response builder for RFC 9457 Problem Details.

Converts DomainError values returned by handlers into JSON responses. The
HTTP status comes from the error's class; the ``code`` field carries the
stable ErrorCode.

Exports:
    ErrorResponseBuilder: Utility class for building RFC 9457 responses
    DomainHTTPException: HTTPException carrying a DomainError (dependencies)
"""

from fastapi import HTTPException, Request, status
from fastapi.responses import JSONResponse

from src.core.config import settings
from src.core.errors import (
    AuthenticationError,
    AuthorizationError,
    ConflictError,
    DomainError,
    NotFoundError,
    ValidationError,
)
from src.presentation.errors.problem_details import ErrorDetail, ProblemDetails

# Ordered: first matching class wins.
_STATUS_BY_ERROR_CLASS: tuple[tuple[type[DomainError], int, str], ...] = (
    (ValidationError, status.HTTP_400_BAD_REQUEST, "Validation Failed"),
    (AuthenticationError, status.HTTP_401_UNAUTHORIZED, "Authentication Required"),
    (AuthorizationError, status.HTTP_403_FORBIDDEN, "Access Denied"),
    (NotFoundError, status.HTTP_404_NOT_FOUND, "Resource Not Found"),
    (ConflictError, status.HTTP_409_CONFLICT, "Resource Conflict"),
)


class DomainHTTPException(HTTPException):
    """HTTPException raised by FastAPI dependencies with a DomainError attached.

    Rendered by the HTTPException handler through ErrorResponseBuilder so the
    response carries the error code.
    """

    def __init__(
        self, error: DomainError, headers: dict[str, str] | None = None
    ) -> None:
        super().__init__(
            status_code=ErrorResponseBuilder.get_status_code(error),
            detail=error.message,
            headers=headers,
        )
        self.error = error


class ErrorResponseBuilder:
    """Build RFC 9457 Problem Details error responses.

    Example:
        >>> response = ErrorResponseBuilder.from_domain_error(
        ...     error=IdentityError.EMAIL_TAKEN,
        ...     request=request,
        ...     trace_id="550e8400-e29b-41d4-a716-446655440000",
        ... )
        >>> response.status_code
        409
    """

    @staticmethod
    def from_domain_error(
        error: DomainError,
        request: Request,
        trace_id: str | None,
        headers: dict[str, str] | None = None,
    ) -> JSONResponse:
        """Convert DomainError to RFC 9457 JSON response.

        Args:
            error: Error returned by a handler.
            request: FastAPI Request object (for instance path).
            trace_id: Request trace ID.
            headers: Extra response headers (e.g. WWW-Authenticate).

        Returns:
            JSONResponse with ProblemDetails content.
        """
        status_code = ErrorResponseBuilder.get_status_code(error)

        problem = ProblemDetails(
            type=f"{settings.api_base_url}/errors/{_slug(error.code.value)}",
            title=ErrorResponseBuilder.get_title(error),
            status=status_code,
            detail=error.message,
            instance=str(request.url.path),
            code=error.code.value,
            trace_id=trace_id,
        )

        if isinstance(error, ValidationError) and error.field:
            problem.errors = [
                ErrorDetail(
                    field=error.field,
                    code=error.code.value,
                    message=error.message,
                )
            ]

        return JSONResponse(
            status_code=status_code,
            content=problem.model_dump(exclude_none=True),
            headers=headers,
        )

    @staticmethod
    def get_status_code(error: DomainError) -> int:
        """Map error class to HTTP status code (500 for anything unmapped)."""
        for error_class, status_code, _ in _STATUS_BY_ERROR_CLASS:
            if isinstance(error, error_class):
                return status_code
        return status.HTTP_500_INTERNAL_SERVER_ERROR

    @staticmethod
    def get_title(error: DomainError) -> str:
        """Human-readable title for the error class."""
        for error_class, _, title in _STATUS_BY_ERROR_CLASS:
            if isinstance(error, error_class):
                return title
        return "Internal Server Error"


def _slug(code: str) -> str:
    return code.lower().replace("_", "-")
