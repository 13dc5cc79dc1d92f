"""Top-level RPC procedures: health and the current user."""

from dishka.integrations.fastapi import FromDishka
from fastapi import APIRouter, Cookie

from dealort.application.usecase.base import SuccessResponse
from dealort.application.usecase.health import CheckHealthUseCase, HealthCheckResponse
from dealort.application.usecase.user import (
    GetPrivateDataRequest,
    GetPrivateDataUseCase,
    PrivateDataResponse,
    UpdateUserImageInput,
    UpdateUserImageRequest,
    UpdateUserImageUseCase,
)
from dealort.domain.service import JWTService
from dealort.interface.api.rpc import RPC_PREFIX, RPCRoute
from dealort.interface.api.session import require_user_id

router = APIRouter(prefix=RPC_PREFIX, tags=["root"], route_class=RPCRoute)


@router.post("/healthCheck")
async def health_check() -> str:
    return "OK"


@router.post("/health/check", response_model=HealthCheckResponse)
async def detailed_health_check(
    check_health_use_case: FromDishka[CheckHealthUseCase],
) -> HealthCheckResponse:
    """Database ping plus the configuration state of external services."""
    return await check_health_use_case.execute()


@router.post("/privateData", response_model=PrivateDataResponse)
async def private_data(
    private_data_use_case: FromDishka[GetPrivateDataUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> PrivateDataResponse:
    """Authenticated smoke test. Requires a session."""
    user_id = require_user_id(jwt_service, auth_token)
    return await private_data_use_case.execute(GetPrivateDataRequest(user_id=user_id))


@router.post("/updateUserImage", response_model=SuccessResponse)
async def update_user_image(
    body: UpdateUserImageInput,
    update_user_image_use_case: FromDishka[UpdateUserImageUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> SuccessResponse:
    """Replace the current user's avatar."""
    user_id = require_user_id(jwt_service, auth_token)
    return await update_user_image_use_case.execute(
        UpdateUserImageRequest(user_id=user_id, image=body.image)
    )
