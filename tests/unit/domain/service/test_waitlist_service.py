"""Unit tests for WaitlistService."""

import pytest

from dealort.adapter.error import ProviderError
from dealort.domain.error import ConflictError
from dealort.domain.service import EmailClient, WaitlistService
from dealort.domain.value import Email
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestJoinWaitlist:
    @pytest.mark.asyncio
    async def test_join_stores_entry_and_sends_confirmation(self, unit_env):
        waitlist_service = await unit_env.get(WaitlistService)
        email_client = await unit_env.get(EmailClient)
        email = Email("Ada@Example.com")

        entry = await waitlist_service.join("Ada", email, ip_address="203.0.113.7")

        assert entry.email.root == "ada@example.com"
        assert entry.ip_address == "203.0.113.7"
        assert await waitlist_service.exists(Email("ada@example.com"))
        assert len(email_client.sent) == 1
        message = email_client.sent[0]
        assert message.to == "ada@example.com"
        assert message.subject == "Thank you for joining the waitlist"
        assert "Hi Ada" in message.text

    @pytest.mark.asyncio
    async def test_duplicate_email_conflicts(self, unit_env):
        waitlist_service = await unit_env.get(WaitlistService)
        await waitlist_service.join("Ada", Email("ada@example.com"))

        with pytest.raises(ConflictError, match="already on our waitlist"):
            await waitlist_service.join("Ada again", Email("ADA@example.com"))

    @pytest.mark.asyncio
    async def test_email_failure_is_reraised(self, unit_env):
        waitlist_service = await unit_env.get(WaitlistService)
        email_client = await unit_env.get(EmailClient)
        email_client.fail = True

        with pytest.raises(ProviderError):
            await waitlist_service.join("Ada", Email("ada@example.com"))

    @pytest.mark.asyncio
    async def test_unknown_email_does_not_exist(self, unit_env):
        waitlist_service = await unit_env.get(WaitlistService)

        assert await waitlist_service.exists(Email("nobody@example.com")) is False
