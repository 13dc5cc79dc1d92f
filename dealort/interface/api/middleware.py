"""Transport-level timeout middleware.

Guards non-RPC HTTP paths (auth passthrough, uploads, liveness) with a
deadline. On expiry the client gets a 504 JSON body and anything the
downstream app writes afterwards is dropped.
"""

from typing import Sequence

import logfire
from starlette.responses import JSONResponse
from starlette.types import ASGIApp, Message, Receive, Scope, Send

from dealort.util.deadline import RequestTimeoutError, race_deadline
from dealort.util.timeouts import Timeouts, matches_route_pattern

LIVENESS_TIMEOUT_MS = 120_000

DEFAULT_RULES: tuple[tuple[str, int], ...] = (
    ("/api/auth/*", Timeouts.LIGHT),
    ("/api/uploadthing/*", Timeouts.MODERATE_HEAVY),
    ("/", LIVENESS_TIMEOUT_MS),
)


class TransportTimeoutMiddleware:
    """Pure ASGI middleware applying ``(pattern, timeout_ms)`` rules to paths.

    The first matching rule wins. Paths without a rule pass through untouched.
    """

    def __init__(
        self, app: ASGIApp, rules: Sequence[tuple[str, int]] | None = None
    ) -> None:
        self.app = app
        self.rules = tuple(DEFAULT_RULES if rules is None else rules)

    def timeout_for(self, path: str) -> int | None:
        for pattern, timeout_ms in self.rules:
            if matches_route_pattern(path, pattern):
                return timeout_ms
        return None

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        path = scope["path"]
        timeout_ms = self.timeout_for(path)
        if timeout_ms is None:
            await self.app(scope, receive, send)
            return

        expired = False
        response_started = False

        async def guarded_send(message: Message) -> None:
            nonlocal response_started
            if expired:
                return
            if message["type"] == "http.response.start":
                response_started = True
            await send(message)

        try:
            await race_deadline(
                lambda: self.app(scope, receive, guarded_send),
                timeout_ms,
                route_key=path,
            )
        except RequestTimeoutError as e:
            expired = True
            logfire.warn("Transport timeout", path=path, timeout_ms=timeout_ms)
            if response_started:
                return
            response = JSONResponse(
                status_code=504, content={"error": "TIMEOUT", "message": e.message}
            )
            await response(scope, receive, send)
