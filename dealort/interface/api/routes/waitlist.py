"""Waitlist procedures."""

from dishka.integrations.fastapi import FromDishka
from fastapi import APIRouter, Request

from dealort.application.usecase.base import CreatedResponse
from dealort.application.usecase.waitlist import (
    CheckWaitlistInput,
    CheckWaitlistResponse,
    CheckWaitlistUseCase,
    JoinWaitlistInput,
    JoinWaitlistRequest,
    JoinWaitlistUseCase,
)
from dealort.interface.api.rpc import RPC_PREFIX, RPCRoute

router = APIRouter(
    prefix=f"{RPC_PREFIX}/waitlist", tags=["waitlist"], route_class=RPCRoute
)


@router.post("/check", response_model=CheckWaitlistResponse)
async def check(
    body: CheckWaitlistInput,
    check_waitlist_use_case: FromDishka[CheckWaitlistUseCase],
) -> CheckWaitlistResponse:
    return await check_waitlist_use_case.execute(body)


@router.post("/add", response_model=CreatedResponse)
async def add(
    body: JoinWaitlistInput,
    request: Request,
    join_waitlist_use_case: FromDishka[JoinWaitlistUseCase],
) -> CreatedResponse:
    """Join the waitlist and receive a confirmation email."""
    ip_address = request.client.host if request.client else ""
    return await join_waitlist_use_case.execute(
        JoinWaitlistRequest(name=body.name, email=body.email, ip_address=ip_address)
    )
