"""Mock email providers for testing."""

from dishka import Scope, provide

from dealort.adapter.email import MockEmailClient
from dealort.domain.service import EmailClient
from dealort.util.di.infrastructure.email import EmailProvider


class MockEmailProvider(EmailProvider):
    """Mock email provider recording messages instead of sending them."""

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_email_client(self) -> EmailClient:
        """Provide mock email client."""
        return MockEmailClient()
