"""RFC 9457 Problem Details for HTTP APIs.

Pydantic models for structured error responses.

RFC 9457: https://www.rfc-editor.org/rfc/rfc9457

Exports:
    ErrorDetail: Individual field-specific error
    ProblemDetails: RFC 9457 error response schema (plus ``code`` and ``trace_id``)
"""

from pydantic import BaseModel, Field


class ErrorDetail(BaseModel):
    """Individual field-specific error.

    Attributes:
        field: Name of the field with error
        code: Machine-readable error code
        message: Human-readable error message
    """

    field: str = Field(..., description="Field name")
    code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error message")


class ProblemDetails(BaseModel):
    """RFC 9457 Problem Details.

    Attributes:
        type: URI reference identifying the problem type
        title: Short, human-readable summary of the problem type
        status: HTTP status code for this occurrence
        detail: Human-readable explanation specific to this occurrence
        instance: Request path of this occurrence
        code: Stable error code (e.g. INVALID_CREDENTIALS)
        errors: Optional list of field-specific errors
        trace_id: Request trace ID for debugging

    Examples:
        >>> problem = ProblemDetails(
        ...     type="http://localhost:8000/errors/email-taken",
        ...     title="Resource Conflict",
        ...     status=409,
        ...     detail="Email is already registered",
        ...     instance="/auth/register",
        ...     code="EMAIL_TAKEN",
        ... )
    """

    type: str = Field(
        ...,
        description="URI reference identifying the problem type",
        examples=["http://localhost:8000/errors/invalid-credentials"],
    )
    title: str = Field(..., description="Short, human-readable summary")
    status: int = Field(..., description="HTTP status code", examples=[401])
    detail: str = Field(
        ...,
        description="Human-readable explanation",
        examples=["Invalid email or password"],
    )
    instance: str = Field(
        ...,
        description="URI reference identifying this occurrence",
        examples=["/auth/login"],
    )
    code: str | None = Field(
        None,
        description="Stable machine-readable error code",
        examples=["INVALID_CREDENTIALS"],
    )
    errors: list[ErrorDetail] | None = Field(
        None,
        description="List of field-specific errors",
    )
    trace_id: str | None = Field(
        None,
        description="Request trace ID for debugging",
    )
