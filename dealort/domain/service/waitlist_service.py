"""Waitlist domain service."""

from abc import ABC, abstractmethod

import logfire
from pydantic import BaseModel

from dealort.domain.error import ConflictError
from dealort.domain.model import WaitlistEntry
from dealort.domain.repository import WaitlistRepository
from dealort.domain.value import Email, WaitlistEntryId, new_id

from .base import Service


class EmailMessage(BaseModel):
    """Outbound transactional email."""

    to: str
    subject: str
    html: str
    text: str


class EmailClient(ABC):
    """Abstract transactional email sender.

    Implementations live in the adapter layer.
    """

    @abstractmethod
    async def send(self, message: EmailMessage) -> str | None:
        """Send an email.

        Args:
            message: Message to send

        Returns:
            Provider message ID, if the provider returns one

        Raises:
            ProviderError: If the provider rejects the message
        """
        pass


def waitlist_confirmation(name: str, to: str) -> EmailMessage:
    """Build the waitlist confirmation email."""
    subject = "Thank you for joining the waitlist"
    body = "Thank you for joining the waitlist! We will be in touch soon."
    return EmailMessage(
        to=to,
        subject=subject,
        html=(
            f"<h1>{subject}</h1>"
            f"<p>Hi {name},</p>"
            f"<p>{body}</p>"
            "<p>Best regards,<br>The Dealort Team</p>"
        ),
        text=f"{subject}\n\nHi {name},\n\n{body}\n\nBest regards,\nThe Dealort Team\n",
    )


class WaitlistService(Service):
    """Domain service for the pre-launch waitlist."""

    def __init__(
        self, waitlist_repository: WaitlistRepository, email_client: EmailClient
    ) -> None:
        """Initialize waitlist service.

        Args:
            waitlist_repository: Waitlist repository
            email_client: Email client for the confirmation message
        """
        self.waitlist_repository = waitlist_repository
        self.email_client = email_client

    async def exists(self, email: Email) -> bool:
        return await self.waitlist_repository.find_by_email(email) is not None

    async def join(
        self, name: str, email: Email, ip_address: str = ""
    ) -> WaitlistEntry:
        """Add an email to the waitlist and send the confirmation.

        Raises:
            ConflictError: If the email is already on the waitlist
            ProviderError: If the confirmation email cannot be sent
        """
        with logfire.span("waitlist_service.join", email=email.root):
            if await self.exists(email):
                logfire.warn("Duplicate waitlist signup", email=email.root)
                raise ConflictError("This email is already on our waitlist")

            entry = await self.waitlist_repository.save(
                WaitlistEntry(
                    id=WaitlistEntryId(new_id()),
                    name=name,
                    email=email,
                    ip_address=ip_address,
                )
            )

            try:
                await self.email_client.send(waitlist_confirmation(name, email.root))
            except Exception as e:
                logfire.error(
                    "Waitlist confirmation email failed",
                    email=email.root,
                    error=str(e),
                )
                raise

            logfire.info("Waitlist entry added", entry_id=entry.id)
            return entry
