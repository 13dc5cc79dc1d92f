"""Product (organization) procedures."""

from dishka.integrations.fastapi import FromDishka
from fastapi import APIRouter, Cookie

from dealort.application.usecase.base import SuccessResponse
from dealort.application.usecase.product import (
    CreateProductInput,
    CreateProductRequest,
    CreateProductResponse,
    CreateProductUseCase,
    FollowInput,
    FollowProductUseCase,
    FollowRequest,
    FollowResponse,
    GetProductInput,
    GetProductRequest,
    GetProductUseCase,
    ListLaunchesRequest,
    ListLaunchesUseCase,
    ListProductsRequest,
    ListProductsUseCase,
    ListRecentRequest,
    ListRecentUseCase,
    ProductDetail,
    ProductListItem,
    ProductPage,
    SyncMetadataInput,
    SyncMetadataRequest,
    SyncMetadataUseCase,
    ToggleImpressionInput,
    ToggleImpressionRequest,
    ToggleImpressionResponse,
    ToggleImpressionUseCase,
    UnfollowProductUseCase,
    UpdateProductInput,
    UpdateProductRequest,
    UpdateProductUseCase,
)
from dealort.domain.service import JWTService
from dealort.interface.api.rpc import RPC_PREFIX, RPCRoute
from dealort.interface.api.session import optional_user_id, require_user_id

router = APIRouter(
    prefix=f"{RPC_PREFIX}/products", tags=["products"], route_class=RPCRoute
)


@router.post("/getBySlug", response_model=ProductDetail)
async def get_by_slug(
    body: GetProductInput,
    get_product_use_case: FromDishka[GetProductUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> ProductDetail:
    """Get a product with counts and the viewer's follow/like state.

    Public. Viewer state is false for anonymous callers.
    """
    viewer_id = optional_user_id(jwt_service, auth_token)
    return await get_product_use_case.execute(
        GetProductRequest(slug=body.slug, viewer_id=viewer_id)
    )


@router.post("/list", response_model=ProductPage)
async def list_products(
    body: ListProductsRequest,
    list_products_use_case: FromDishka[ListProductsUseCase],
) -> ProductPage:
    """List listed products, newest, top or trending first."""
    return await list_products_use_case.execute(body)


@router.post("/listLaunches", response_model=ProductPage)
async def list_launches(
    body: ListLaunchesRequest,
    list_launches_use_case: FromDishka[ListLaunchesUseCase],
) -> ProductPage:
    """List products that have a release date."""
    return await list_launches_use_case.execute(body)


@router.post("/listRecent", response_model=list[ProductListItem])
async def list_recent(
    body: ListRecentRequest,
    list_recent_use_case: FromDishka[ListRecentUseCase],
) -> list[ProductListItem]:
    return await list_recent_use_case.execute(body)


@router.post("/create", response_model=CreateProductResponse)
async def create_product(
    body: CreateProductInput,
    create_product_use_case: FromDishka[CreateProductUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> CreateProductResponse:
    """Create a product owned by the session user.

    Raises:
        ConflictError: If the slug is taken (rendered as CONFLICT)
    """
    user_id = require_user_id(jwt_service, auth_token)
    return await create_product_use_case.execute(
        CreateProductRequest(user_id=user_id, **body.model_dump(exclude_unset=True))
    )


@router.post("/update", response_model=SuccessResponse)
async def update_product(
    body: UpdateProductInput,
    update_product_use_case: FromDishka[UpdateProductUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> SuccessResponse:
    """Partially update a product. Owner only."""
    user_id = require_user_id(jwt_service, auth_token)
    return await update_product_use_case.execute(
        UpdateProductRequest(user_id=user_id, **body.model_dump(exclude_unset=True))
    )


@router.post("/follow", response_model=FollowResponse)
async def follow(
    body: FollowInput,
    follow_use_case: FromDishka[FollowProductUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> FollowResponse:
    user_id = require_user_id(jwt_service, auth_token)
    return await follow_use_case.execute(
        FollowRequest(user_id=user_id, organization_id=body.organization_id)
    )


@router.post("/unfollow", response_model=FollowResponse)
async def unfollow(
    body: FollowInput,
    unfollow_use_case: FromDishka[UnfollowProductUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> FollowResponse:
    user_id = require_user_id(jwt_service, auth_token)
    return await unfollow_use_case.execute(
        FollowRequest(user_id=user_id, organization_id=body.organization_id)
    )


@router.post("/toggleImpression", response_model=ToggleImpressionResponse)
async def toggle_impression(
    body: ToggleImpressionInput,
    toggle_impression_use_case: FromDishka[ToggleImpressionUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> ToggleImpressionResponse:
    """Like or unlike a product."""
    user_id = require_user_id(jwt_service, auth_token)
    return await toggle_impression_use_case.execute(
        ToggleImpressionRequest(
            user_id=user_id, organization_id=body.organization_id, type=body.type
        )
    )


@router.post("/syncOrganizationMetadata", response_model=SuccessResponse)
async def sync_organization_metadata(
    body: SyncMetadataInput,
    sync_metadata_use_case: FromDishka[SyncMetadataUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> SuccessResponse:
    """Upsert reference URLs and media for a product. Owner only.

    Omitted fields keep their stored values; ``releaseDateMs: null`` clears
    the release date.
    """
    user_id = require_user_id(jwt_service, auth_token)
    return await sync_metadata_use_case.execute(
        SyncMetadataRequest(user_id=user_id, **body.model_dump(exclude_unset=True))
    )
