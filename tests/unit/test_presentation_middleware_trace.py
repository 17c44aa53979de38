"""Unit tests for TraceMiddleware (request tracing).

Tests cover:
- Trace ID generation for new requests
- Trace ID taken from an incoming X-Trace-Id header
- Trace ID visible through get_trace_id() and structlog contextvars during the request
- Context cleared afterwards

Architecture:
- Unit tests with mocked Starlette Request/Response
"""

from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock
from uuid import UUID

import pytest
import structlog

from src.presentation.middleware.trace_middleware import TraceMiddleware, get_trace_id


def _request(headers: dict[str, str] | None = None) -> MagicMock:
    request = MagicMock()
    request.headers = headers or {}
    request.state = SimpleNamespace()
    return request


def _response() -> MagicMock:
    response = MagicMock()
    response.headers = {}
    return response


@pytest.mark.unit
class TestTraceMiddleware:
    @pytest.mark.asyncio
    async def test_generates_trace_id_when_missing(self):
        middleware = TraceMiddleware(app=MagicMock())
        request = _request()

        response = await middleware.dispatch(request, AsyncMock(return_value=_response()))

        trace_id = response.headers["X-Trace-Id"]
        UUID(trace_id)
        assert request.state.trace_id == trace_id

    @pytest.mark.asyncio
    async def test_reuses_incoming_trace_id(self):
        middleware = TraceMiddleware(app=MagicMock())

        response = await middleware.dispatch(
            _request({"X-Trace-Id": "abc-123"}), AsyncMock(return_value=_response())
        )

        assert response.headers["X-Trace-Id"] == "abc-123"

    @pytest.mark.asyncio
    async def test_trace_id_visible_during_request_and_cleared_after(self):
        middleware = TraceMiddleware(app=MagicMock())
        seen = {}

        async def call_next(request):
            seen["trace_id"] = get_trace_id()
            seen["log_context"] = structlog.contextvars.get_contextvars().get("trace_id")
            return _response()

        await middleware.dispatch(_request({"X-Trace-Id": "abc-123"}), call_next)

        assert seen == {"trace_id": "abc-123", "log_context": "abc-123"}
        assert get_trace_id() is None
        assert "trace_id" not in structlog.contextvars.get_contextvars()

    @pytest.mark.asyncio
    async def test_context_cleared_when_downstream_raises(self):
        middleware = TraceMiddleware(app=MagicMock())

        with pytest.raises(RuntimeError):
            await middleware.dispatch(_request(), AsyncMock(side_effect=RuntimeError("boom")))

        assert get_trace_id() is None
