"""Analytics procedures."""

from dishka.integrations.fastapi import FromDishka
from fastapi import APIRouter, Cookie

from dealort.application.usecase.analytics import (
    GetOverviewAnalyticsUseCase,
    GetOverviewInput,
    GetOverviewRequest,
)
from dealort.domain.service import JWTService, OverviewAnalytics
from dealort.interface.api.rpc import RPC_PREFIX, RPCRoute
from dealort.interface.api.session import require_user_id

router = APIRouter(
    prefix=f"{RPC_PREFIX}/analytics", tags=["analytics"], route_class=RPCRoute
)


@router.post("/getOverviewAnalytics", response_model=OverviewAnalytics)
async def get_overview_analytics(
    body: GetOverviewInput,
    overview_use_case: FromDishka[GetOverviewAnalyticsUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> OverviewAnalytics:
    """Impression and review totals for the caller's products.

    Compares the current window with the one before it.
    """
    session_user_id = require_user_id(jwt_service, auth_token)
    return await overview_use_case.execute(
        GetOverviewRequest(
            session_user_id=session_user_id,
            user_id=body.user_id,
            duration=body.duration,
        )
    )
