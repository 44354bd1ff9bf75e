"""Request logging middleware.

Logs one line per HTTP request: method, path, status, duration, request ID
and (when tracing is on) the trace ID. Bodies and headers are never logged.
"""

import logging
import time
from typing import Callable

from lawdesk.shared.telemetry.tracing import get_trace_id

logger = logging.getLogger("lawdesk.requests")


def RequestLoggingMiddleware(app: Callable, skip_paths: frozenset[str] = frozenset({"/health"})) -> Callable:
    """Log each request after the response completes. Raw ASGI."""

    async def asgi_app(scope: dict, receive: Callable, send: Callable) -> None:
        if scope["type"] != "http" or scope.get("path") in skip_paths:
            await app(scope, receive, send)
            return
        start = time.perf_counter()
        status_code = 500

        async def send_wrapper(message: dict) -> None:
            nonlocal status_code
            if message["type"] == "http.response.start":
                status_code = message["status"]
            await send(message)

        try:
            await app(scope, receive, send_wrapper)
        finally:
            duration_ms = (time.perf_counter() - start) * 1000
            level = logging.WARNING if status_code >= 500 else logging.INFO
            logger.log(
                level,
                "%s %s -> %s (%.1f ms) request_id=%s trace_id=%s",
                scope.get("method", ""),
                scope.get("path", ""),
                status_code,
                duration_ms,
                scope.get("state", {}).get("request_id", "-"),
                get_trace_id() or "-",
            )

    return asgi_app
