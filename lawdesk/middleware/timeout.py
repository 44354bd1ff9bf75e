"""Request timeout middleware.

Cancels the request if it runs longer than the configured timeout (asyncio.wait_for).
A 504 is sent only if the response has not started yet.
"""

import asyncio
import logging
from typing import Callable

from lawdesk.middleware._asgi import send_json_error

logger = logging.getLogger(__name__)


def TimeoutMiddleware(app: Callable, timeout_seconds: int) -> Callable:
    """Cancel request after timeout_seconds (sends 504 on timeout). Raw ASGI."""

    async def asgi_app(scope: dict, receive: Callable, send: Callable) -> None:
        if scope["type"] != "http":
            await app(scope, receive, send)
            return
        started = False

        async def send_wrapper(message: dict) -> None:
            nonlocal started
            if message["type"] == "http.response.start":
                started = True
            await send(message)

        try:
            await asyncio.wait_for(
                app(scope, receive, send_wrapper),
                timeout=float(timeout_seconds),
            )
        except asyncio.TimeoutError:
            logger.warning(
                "Request timed out after %s seconds: %s %s",
                timeout_seconds,
                scope.get("method", ""),
                scope.get("path", ""),
            )
            if not started:
                await send_json_error(
                    send,
                    504,
                    {"error": f"Request timed out after {timeout_seconds} seconds"},
                )

    return asgi_app
