"""Review procedures."""

from dishka.integrations.fastapi import FromDishka
from fastapi import APIRouter, Cookie

from dealort.application.usecase.base import CreatedResponse, SuccessResponse
from dealort.application.usecase.review import (
    CreateReviewInput,
    CreateReviewRequest,
    CreateReviewUseCase,
    DeleteReviewInput,
    DeleteReviewRequest,
    DeleteReviewUseCase,
    ListReviewsInput,
    ListReviewsRequest,
    ListReviewsUseCase,
    ReviewPage,
    UpdateReviewInput,
    UpdateReviewRequest,
    UpdateReviewUseCase,
)
from dealort.domain.service import JWTService
from dealort.interface.api.rpc import RPC_PREFIX, RPCRoute
from dealort.interface.api.session import optional_user_id, require_user_id

router = APIRouter(
    prefix=f"{RPC_PREFIX}/reviews", tags=["reviews"], route_class=RPCRoute
)


@router.post("/create", response_model=CreatedResponse)
async def create_review(
    body: CreateReviewInput,
    create_review_use_case: FromDishka[CreateReviewUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> CreatedResponse:
    """Review a product. One review per user and product.

    Args:
        body: Rating, optional title and content
        create_review_use_case: Create review use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie

    Returns:
        The new review's ID
    """
    user_id = require_user_id(jwt_service, auth_token)
    return await create_review_use_case.execute(
        CreateReviewRequest(user_id=user_id, **body.model_dump(exclude_unset=True))
    )


@router.post("/update", response_model=SuccessResponse)
async def update_review(
    body: UpdateReviewInput,
    update_review_use_case: FromDishka[UpdateReviewUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> SuccessResponse:
    """Edit one of your own reviews."""
    user_id = require_user_id(jwt_service, auth_token)
    return await update_review_use_case.execute(
        UpdateReviewRequest(user_id=user_id, **body.model_dump(exclude_unset=True))
    )


@router.post("/delete", response_model=SuccessResponse)
async def delete_review(
    body: DeleteReviewInput,
    delete_review_use_case: FromDishka[DeleteReviewUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> SuccessResponse:
    user_id = require_user_id(jwt_service, auth_token)
    return await delete_review_use_case.execute(
        DeleteReviewRequest(user_id=user_id, id=body.id)
    )


@router.post("/list", response_model=ReviewPage)
async def list_reviews(
    body: ListReviewsInput,
    list_reviews_use_case: FromDishka[ListReviewsUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> ReviewPage:
    """List a product's reviews. The ``my`` filter needs a session."""
    viewer_id = optional_user_id(jwt_service, auth_token)
    return await list_reviews_use_case.execute(
        ListReviewsRequest(viewer_id=viewer_id, **body.model_dump())
    )
