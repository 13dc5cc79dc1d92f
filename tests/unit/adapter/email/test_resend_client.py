"""Unit tests for the Resend email client."""

import json

import httpx
import pytest

from dealort.adapter.email import resend
from dealort.adapter.email.resend import ResendEmailClient
from dealort.adapter.error import ProviderError
from dealort.domain.service import EmailMessage

MESSAGE = EmailMessage(
    to="ada@example.com", subject="Hello", html="<p>Hi</p>", text="Hi"
)


def use_transport(monkeypatch, handler) -> None:
    """Route every AsyncClient the adapter opens through ``handler``."""
    real_client = httpx.AsyncClient

    def client_factory(*args, **kwargs):
        return real_client(*args, transport=httpx.MockTransport(handler), **kwargs)

    monkeypatch.setattr(resend.httpx, "AsyncClient", client_factory)


@pytest.fixture
def client() -> ResendEmailClient:
    return ResendEmailClient(
        api_key="re_test",
        from_address="Dealort <hello@dealort.test>",
        api_url="https://resend.test/",
    )


@pytest.mark.asyncio
async def test_send_posts_message_and_returns_id(monkeypatch, client):
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["url"] = str(request.url)
        seen["auth"] = request.headers["Authorization"]
        seen["body"] = json.loads(request.content)
        return httpx.Response(200, json={"id": "email_123"})

    use_transport(monkeypatch, handler)

    message_id = await client.send(MESSAGE)

    assert message_id == "email_123"
    assert seen["url"] == "https://resend.test/emails"
    assert seen["auth"] == "Bearer re_test"
    assert seen["body"]["from"] == "Dealort <hello@dealort.test>"
    assert seen["body"]["to"] == ["ada@example.com"]
    assert seen["body"]["text"] == "Hi"


@pytest.mark.asyncio
async def test_rejected_message_raises_provider_error(monkeypatch, client):
    use_transport(
        monkeypatch, lambda request: httpx.Response(422, json={"message": "bad"})
    )

    with pytest.raises(ProviderError) as exc_info:
        await client.send(MESSAGE)

    assert exc_info.value.provider == "resend"
    assert exc_info.value.status_code == 422


@pytest.mark.asyncio
async def test_network_failure_raises_provider_error(monkeypatch, client):
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    use_transport(monkeypatch, handler)

    with pytest.raises(ProviderError, match="HTTP error"):
        await client.send(MESSAGE)
