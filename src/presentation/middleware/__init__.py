"""HTTP middleware and request dependencies."""

from src.presentation.middleware.auth_dependencies import (
    CurrentUser,
    get_current_user,
    require_owner,
)
from src.presentation.middleware.trace_middleware import TraceMiddleware, get_trace_id

__all__ = [
    "CurrentUser",
    "TraceMiddleware",
    "get_current_user",
    "get_trace_id",
    "require_owner",
]
