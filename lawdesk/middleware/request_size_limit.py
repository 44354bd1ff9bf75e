"""Request body size limit middleware.

Rejects requests whose body exceeds the configured maximum, for both
Content-Length and Transfer-Encoding: chunked bodies.
Uses raw ASGI (no BaseHTTPMiddleware) for production-safe streaming and background tasks.
"""

from typing import Callable

from lawdesk.middleware._asgi import get_header, send_json_error


async def _send_413(send: Callable, max_bytes: int) -> None:
    await send_json_error(
        send, 413, {"error": f"Request body must be at most {max_bytes} bytes"}
    )


def RequestSizeLimitMiddleware(app: Callable, max_bytes: int) -> Callable:
    """Reject requests whose body exceeds max_bytes (Content-Length or chunked). Raw ASGI."""

    async def asgi_app(scope: dict, receive: Callable, send: Callable) -> None:
        if scope["type"] != "http":
            await app(scope, receive, send)
            return

        content_length = get_header(scope, "content-length")
        if content_length is not None:
            try:
                if int(content_length) > max_bytes:
                    await _send_413(send, max_bytes)
                    return
            except ValueError:
                pass
            await app(scope, receive, send)
            return

        # No Content-Length: buffer the body, then replay it to the app.
        chunks: list[bytes] = []
        total = 0
        while True:
            message = await receive()
            if message["type"] != "http.request":
                break
            body = message.get("body", b"")
            total += len(body)
            if total > max_bytes:
                await _send_413(send, max_bytes)
                return
            chunks.append(body)
            if not message.get("more_body", False):
                break

        body = b"".join(chunks)
        replayed = False

        async def replay_receive() -> dict:
            nonlocal replayed
            if not replayed:
                replayed = True
                return {"type": "http.request", "body": body, "more_body": False}
            return await receive()

        await app(scope, replay_receive, send)

    return asgi_app
