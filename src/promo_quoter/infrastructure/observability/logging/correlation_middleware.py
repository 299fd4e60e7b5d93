"""ASGI middleware that scopes structlog context to one HTTP request.

Every log line written while a request is handled carries its correlation id
(taken from ``X-Correlation-ID`` or generated), the endpoint, the method and,
on confirmations, the ``Idempotency-Key``. The correlation id is echoed back
on the response.
"""

from __future__ import annotations

import time
from typing import Any
from uuid import uuid4

import structlog
from starlette.datastructures import Headers, MutableHeaders
from starlette.types import ASGIApp, Message, Receive, Scope, Send

logger = structlog.get_logger()

CORRELATION_HEADER = "x-correlation-id"
IDEMPOTENCY_HEADER = "idempotency-key"


class CorrelationMiddleware:

    def __init__(self, app: ASGIApp) -> None:
        self.app = app

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        request_context = _request_context(scope)
        correlation_id = request_context["correlation_id"]
        outcome = {"status": 500}
        started = time.perf_counter()

        async def send_with_correlation(message: Message) -> None:
            if message["type"] == "http.response.start":
                outcome["status"] = message["status"]
                MutableHeaders(scope=message).append(CORRELATION_HEADER, correlation_id)
            await send(message)

        structlog.contextvars.clear_contextvars()
        with structlog.contextvars.bound_contextvars(**request_context):
            try:
                await self.app(scope, receive, send_with_correlation)
            finally:
                status = outcome["status"]
                logger.info(
                    "Request processed",
                    http_status=status,
                    processing_status="SUCCESS" if status < 400 else "ERROR",
                    processing_duration_ms=round((time.perf_counter() - started) * 1000, 2),
                )


def _request_context(scope: Scope) -> dict[str, Any]:
    headers = Headers(scope=scope)
    context: dict[str, Any] = {
        "correlation_id": headers.get(CORRELATION_HEADER) or str(uuid4()),
        "context_endpoint": scope.get("path", "/"),
        "context_method": scope.get("method", "UNKNOWN"),
    }
    idempotency_key = headers.get(IDEMPOTENCY_HEADER, "").strip()
    if idempotency_key:
        context["idempotency_key"] = idempotency_key
    return context
