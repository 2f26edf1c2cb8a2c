"""Request Logging middleware — one access-log line per HTTP request.

Logs method, path, status and duration after the response starts.
Uses raw ASGI (no BaseHTTPMiddleware) so streaming and static files pass through untouched.
"""

import logging
import time
from typing import Callable

logger = logging.getLogger("lessons_api.access")


def RequestLoggingMiddleware(app: Callable) -> Callable:
    """Log every HTTP request once its response status is known. Raw ASGI."""

    async def asgi_app(scope: dict, receive: Callable, send: Callable) -> None:
        if scope["type"] != "http":
            await app(scope, receive, send)
            return
        started = time.perf_counter()
        status_code = 500

        async def send_wrapper(message: dict) -> None:
            nonlocal status_code
            if message["type"] == "http.response.start":
                status_code = message["status"]
            await send(message)

        try:
            await app(scope, receive, send_wrapper)
        finally:
            duration_ms = round((time.perf_counter() - started) * 1000, 3)
            client = scope.get("client")
            logger.info(
                f"{scope['method']} {scope['path']} {status_code} - {duration_ms} ms",
                extra={
                    "method": scope["method"],
                    "path": scope["path"],
                    "status_code": status_code,
                    "duration_ms": duration_ms,
                    "client": client[0] if client else None,
                },
            )

    return asgi_app
