"""ASGI request logging middleware."""

import time

import structlog
from starlette.types import ASGIApp, Message, Receive, Scope, Send

logger = structlog.get_logger()

QUIET_PATHS: set[str] = {"/health", "/docs", "/openapi.json", "/redoc"}


class RequestLoggingMiddleware:
    """Pure ASGI middleware that logs one line per HTTP request."""

    def __init__(self, app: ASGIApp) -> None:
        self.app = app

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        path = scope["path"]
        if path in QUIET_PATHS:
            await self.app(scope, receive, send)
            return

        status_code = 500
        started = time.perf_counter()

        async def send_wrapper(message: Message) -> None:
            nonlocal status_code
            if message["type"] == "http.response.start":
                status_code = message["status"]
            await send(message)

        try:
            await self.app(scope, receive, send_wrapper)
        finally:
            duration_ms = round((time.perf_counter() - started) * 1000, 2)
            log = logger.warning if status_code >= 500 else logger.info
            log(
                "HTTP request",
                method=scope.get("method", ""),
                path=path,
                status=status_code,
                duration_ms=duration_ms,
            )
