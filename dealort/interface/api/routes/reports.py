"""Report procedures."""

from dishka.integrations.fastapi import FromDishka
from fastapi import APIRouter, Cookie

from dealort.application.usecase.base import CreatedResponse
from dealort.application.usecase.report import (
    CreateReportInput,
    CreateReportRequest,
    CreateReportUseCase,
)
from dealort.domain.service import JWTService
from dealort.interface.api.rpc import RPC_PREFIX, RPCRoute
from dealort.interface.api.session import require_user_id

router = APIRouter(
    prefix=f"{RPC_PREFIX}/reports", tags=["reports"], route_class=RPCRoute
)


@router.post("/create", response_model=CreatedResponse)
async def create_report(
    body: CreateReportInput,
    create_report_use_case: FromDishka[CreateReportUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> CreatedResponse:
    """Flag a comment or review for moderation."""
    user_id = require_user_id(jwt_service, auth_token)
    return await create_report_use_case.execute(
        CreateReportRequest(user_id=user_id, **body.model_dump(exclude_unset=True))
    )
