"""Unit tests for the transport timeout middleware."""

import asyncio
import json

import pytest

from dealort.interface.api.middleware import (
    DEFAULT_RULES,
    LIVENESS_TIMEOUT_MS,
    TransportTimeoutMiddleware,
)
from dealort.util.timeouts import Timeouts


def http_scope(path: str) -> dict:
    return {
        "type": "http",
        "method": "GET",
        "path": path,
        "headers": [],
        "query_string": b"",
    }


async def receive():
    return {"type": "http.request", "body": b"", "more_body": False}


def respond_after(delay: float, body: bytes = b"OK"):
    """ASGI app that answers 200 after ``delay`` seconds."""

    async def app(scope, receive, send):
        await asyncio.sleep(delay)
        await send({"type": "http.response.start", "status": 200, "headers": []})
        await send({"type": "http.response.body", "body": body})

    return app


class Recorder:
    def __init__(self):
        self.messages = []

    async def __call__(self, message):
        self.messages.append(message)

    @property
    def status(self):
        return self.messages[0]["status"]

    @property
    def body(self):
        return b"".join(
            m.get("body", b"") for m in self.messages if m["type"] == "http.response.body"
        )


class TestRuleMatching:
    def test_default_rules(self):
        middleware = TransportTimeoutMiddleware(respond_after(0))

        assert DEFAULT_RULES[0] == ("/api/auth/*", Timeouts.LIGHT)
        assert middleware.timeout_for("/api/auth/get-session") == Timeouts.LIGHT
        assert (
            middleware.timeout_for("/api/uploadthing/upload") == Timeouts.MODERATE_HEAVY
        )
        assert middleware.timeout_for("/") == LIVENESS_TIMEOUT_MS == 120_000

    def test_unmatched_path_has_no_timeout(self):
        middleware = TransportTimeoutMiddleware(respond_after(0))

        assert middleware.timeout_for("/rpc/products/list") is None


class TestTransportTimeout:
    @pytest.mark.asyncio
    async def test_fast_response_passes_through(self):
        middleware = TransportTimeoutMiddleware(respond_after(0), rules=[("/", 1_000)])
        send = Recorder()

        await middleware(http_scope("/"), receive, send)

        assert send.status == 200
        assert send.body == b"OK"

    @pytest.mark.asyncio
    async def test_slow_response_gets_504_json(self):
        middleware = TransportTimeoutMiddleware(
            respond_after(0.2), rules=[("/api/auth/*", 10)]
        )
        send = Recorder()

        await middleware(http_scope("/api/auth/get-session"), receive, send)

        assert send.status == 504
        headers = dict(send.messages[0]["headers"])
        assert headers[b"content-type"] == b"application/json"
        payload = json.loads(send.body)
        assert payload["error"] == "TIMEOUT"
        assert payload["message"].startswith("Request timeout")

    @pytest.mark.asyncio
    async def test_late_writes_are_dropped(self):
        middleware = TransportTimeoutMiddleware(
            respond_after(0.03, body=b"late"), rules=[("/", 5)]
        )
        send = Recorder()

        await middleware(http_scope("/"), receive, send)
        await asyncio.sleep(0.1)

        assert send.status == 504
        assert b"late" not in send.body
        starts = [m for m in send.messages if m["type"] == "http.response.start"]
        assert len(starts) == 1

    @pytest.mark.asyncio
    async def test_unmatched_path_is_not_timed(self):
        middleware = TransportTimeoutMiddleware(
            respond_after(0.05), rules=[("/api/auth/*", 5)]
        )
        send = Recorder()

        await middleware(http_scope("/rpc/healthCheck"), receive, send)

        assert send.status == 200

    @pytest.mark.asyncio
    async def test_non_http_scope_passes_through(self):
        seen = []

        async def app(scope, receive, send):
            seen.append(scope["type"])

        middleware = TransportTimeoutMiddleware(app, rules=[("*", 5)])
        await middleware({"type": "lifespan"}, receive, Recorder())

        assert seen == ["lifespan"]
