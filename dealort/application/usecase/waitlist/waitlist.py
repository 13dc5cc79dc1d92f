"""Waitlist use cases."""

import logfire
from pydantic import Field

from dealort.application.usecase.base import CreatedResponse, RPCModel
from dealort.domain.service import WaitlistService
from dealort.domain.value import Email


class CheckWaitlistInput(RPCModel):
    email: Email


class CheckWaitlistResponse(RPCModel):
    exists: bool


class JoinWaitlistInput(RPCModel):
    name: str = Field(min_length=1, max_length=200)
    email: Email


class JoinWaitlistRequest(JoinWaitlistInput):
    ip_address: str = ""


class CheckWaitlistUseCase:
    """Use case for checking whether an email already signed up."""

    def __init__(self, waitlist_service: WaitlistService) -> None:
        self.waitlist_service = waitlist_service

    async def execute(self, request: CheckWaitlistInput) -> CheckWaitlistResponse:
        return CheckWaitlistResponse(
            exists=await self.waitlist_service.exists(request.email)
        )


class JoinWaitlistUseCase:
    """Use case for joining the waitlist."""

    def __init__(self, waitlist_service: WaitlistService) -> None:
        """Initialize join waitlist use case.

        Args:
            waitlist_service: Waitlist domain service
        """
        self.waitlist_service = waitlist_service

    async def execute(self, request: JoinWaitlistRequest) -> CreatedResponse:
        """Execute join waitlist flow.

        Raises:
            ConflictError: If the email is already on the waitlist
            ProviderError: If the confirmation email cannot be sent
        """
        with logfire.span("join_waitlist.execute"):
            entry = await self.waitlist_service.join(
                request.name, request.email, ip_address=request.ip_address
            )
            return CreatedResponse(id=entry.id)
