"""Resend email client implementation.

Sends transactional email through the Resend HTTP API.
"""

import httpx
import logfire

from dealort.adapter.error import ProviderError
from dealort.domain.service.waitlist_service import EmailClient, EmailMessage


class ResendEmailClient(EmailClient):
    """Email client backed by the Resend REST API."""

    def __init__(
        self,
        api_key: str,
        from_address: str,
        api_url: str = "https://api.resend.com",
    ) -> None:
        """Initialize Resend client.

        Args:
            api_key: Resend API key
            from_address: Sender address
            api_url: API base URL
        """
        self.api_key = api_key
        self.from_address = from_address
        self.emails_url = f"{api_url.rstrip('/')}/emails"

    async def send(self, message: EmailMessage) -> str | None:
        """Send an email through Resend.

        Args:
            message: Message to send

        Returns:
            Resend message ID

        Raises:
            ProviderError: If Resend rejects the message or is unreachable
        """
        payload = {
            "from": self.from_address,
            "to": [message.to],
            "subject": message.subject,
            "html": message.html,
            "text": message.text,
        }

        try:
            async with httpx.AsyncClient() as client:
                response = await client.post(
                    self.emails_url,
                    json=payload,
                    headers={"Authorization": f"Bearer {self.api_key}"},
                    timeout=30.0,
                )

                if response.status_code >= 400:
                    logfire.error(
                        "Resend send failed",
                        status_code=response.status_code,
                        error=response.text,
                    )
                    raise ProviderError(
                        "resend",
                        f"Send failed: {response.status_code}",
                        status_code=response.status_code,
                    )

                message_id = response.json().get("id")
                logfire.info("Email sent", message_id=message_id, subject=message.subject)
                return message_id

        except httpx.HTTPError as e:
            logfire.error("Resend HTTP error", error=str(e))
            raise ProviderError("resend", f"HTTP error sending email: {e}")


class MockEmailClient(EmailClient):
    """Mock email client for testing.

    Records messages instead of sending them. Set ``fail`` to make every
    send raise ``ProviderError``.
    """

    def __init__(self) -> None:
        self.sent: list[EmailMessage] = []
        self.fail = False

    async def send(self, message: EmailMessage) -> str | None:
        if self.fail:
            raise ProviderError("mock", "Send failed")
        self.sent.append(message)
        return f"mock-{len(self.sent)}"
