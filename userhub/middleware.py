import logging
import time

from starlette.types import ASGIApp, Message, Receive, Scope, Send

logger = logging.getLogger(__name__)


class TimingMiddleware:
    """
    Adds ``X-Response-Time-Ms`` to every HTTP response and logs one access
    line per request at DEBUG.
    """

    def __init__(self, app: ASGIApp) -> None:
        self.app = app

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        start = time.perf_counter()
        status = 0

        async def send_wrapper(message: Message) -> None:
            nonlocal status
            if message["type"] == "http.response.start":
                status = message["status"]
                elapsed_ms = round((time.perf_counter() - start) * 1000, 2)
                headers = list(message.get("headers", []))
                headers.append((b"x-response-time-ms", str(elapsed_ms).encode()))
                message["headers"] = headers
            await send(message)

        await self.app(scope, receive, send_wrapper)
        logger.debug(
            "%s %s -> %d in %.2f ms",
            scope["method"],
            scope["path"],
            status,
            (time.perf_counter() - start) * 1000,
        )
