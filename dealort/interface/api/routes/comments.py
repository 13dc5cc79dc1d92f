"""Comment procedures."""

from dishka.integrations.fastapi import FromDishka
from fastapi import APIRouter, Cookie

from dealort.application.usecase.base import CreatedResponse, SuccessResponse
from dealort.application.usecase.comment import (
    CommentPage,
    CreateCommentInput,
    CreateCommentRequest,
    CreateCommentUseCase,
    DeleteCommentInput,
    DeleteCommentRequest,
    DeleteCommentUseCase,
    ListCommentsInput,
    ListCommentsRequest,
    ListCommentsUseCase,
    ToggleCommentLikeUseCase,
    ToggleLikeInput,
    ToggleLikeRequest,
    ToggleLikeResponse,
    UpdateCommentInput,
    UpdateCommentRequest,
    UpdateCommentUseCase,
)
from dealort.domain.service import JWTService
from dealort.interface.api.rpc import RPC_PREFIX, RPCRoute
from dealort.interface.api.session import optional_user_id, require_user_id

router = APIRouter(
    prefix=f"{RPC_PREFIX}/comments", tags=["comments"], route_class=RPCRoute
)


@router.post("/create", response_model=CreatedResponse)
async def create_comment(
    body: CreateCommentInput,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> CreatedResponse:
    """Comment on a product or reply to another comment.

    Requires authentication.

    Args:
        body: Product ID, content and optional parent comment ID
        create_comment_use_case: Create comment use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie

    Returns:
        The new comment's ID
    """
    user_id = require_user_id(jwt_service, auth_token)
    return await create_comment_use_case.execute(
        CreateCommentRequest(user_id=user_id, **body.model_dump(exclude_unset=True))
    )


@router.post("/update", response_model=SuccessResponse)
async def update_comment(
    body: UpdateCommentInput,
    update_comment_use_case: FromDishka[UpdateCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> SuccessResponse:
    """Edit a comment's content. Only the author can edit."""
    user_id = require_user_id(jwt_service, auth_token)
    return await update_comment_use_case.execute(
        UpdateCommentRequest(user_id=user_id, id=body.id, content=body.content)
    )


@router.post("/delete", response_model=SuccessResponse)
async def delete_comment(
    body: DeleteCommentInput,
    delete_comment_use_case: FromDishka[DeleteCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> SuccessResponse:
    """Delete a comment together with all of its replies."""
    user_id = require_user_id(jwt_service, auth_token)
    return await delete_comment_use_case.execute(
        DeleteCommentRequest(user_id=user_id, id=body.id)
    )


@router.post("/toggleLike", response_model=ToggleLikeResponse)
async def toggle_like(
    body: ToggleLikeInput,
    toggle_like_use_case: FromDishka[ToggleCommentLikeUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> ToggleLikeResponse:
    user_id = require_user_id(jwt_service, auth_token)
    return await toggle_like_use_case.execute(
        ToggleLikeRequest(user_id=user_id, comment_id=body.comment_id)
    )


@router.post("/list", response_model=CommentPage)
async def list_comments(
    body: ListCommentsInput,
    list_comments_use_case: FromDishka[ListCommentsUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> CommentPage:
    """List top-level comments newest first, each with its full reply tree."""
    viewer_id = optional_user_id(jwt_service, auth_token)
    return await list_comments_use_case.execute(
        ListCommentsRequest(viewer_id=viewer_id, **body.model_dump())
    )
