"""Transactional email providers."""

from dishka import Scope, provide

from dealort.adapter.email import ResendEmailClient
from dealort.config import Settings
from dealort.domain.service import EmailClient
from dealort.util.di.base import ProviderBase


class EmailProvider(ProviderBase):
    """Email component base."""

    __mock_component__ = "email"


class ProdEmailProvider(EmailProvider):
    """Production email provider backed by the Resend API."""

    __is_mock__ = False

    scope = Scope.APP

    @provide(scope=Scope.APP)
    def get_email_client(self, settings: Settings) -> EmailClient:
        """Provide Resend email client."""
        return ResendEmailClient(
            api_key=settings.email.resend_api_key or "",
            from_address=settings.email.from_address,
            api_url=settings.email.api_url,
        )
