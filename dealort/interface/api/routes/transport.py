"""Plain HTTP routes outside the RPC surface."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie
from fastapi.responses import PlainTextResponse

from dealort.application.usecase.user import (
    GetSessionRequest,
    GetSessionUseCase,
    SessionInfo,
)

router = APIRouter(tags=["transport"], route_class=DishkaRoute)


@router.get("/", response_class=PlainTextResponse)
async def liveness() -> str:
    """Liveness probe."""
    return "OK"


@router.get("/api/auth/get-session", response_model=SessionInfo | None)
async def get_session(
    get_session_use_case: FromDishka[GetSessionUseCase],
    auth_token: str | None = Cookie(default=None),
) -> SessionInfo | None:
    """Return the current session, or null when there is none."""
    return await get_session_use_case.execute(GetSessionRequest(auth_token=auth_token))
