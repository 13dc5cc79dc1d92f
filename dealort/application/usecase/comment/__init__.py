"""Comment use cases."""

from .list_comments import (
    CommentItem,
    CommentPage,
    ListCommentsInput,
    ListCommentsRequest,
    ListCommentsUseCase,
)
from .manage_comment import (
    CreateCommentInput,
    CreateCommentRequest,
    CreateCommentUseCase,
    DeleteCommentInput,
    DeleteCommentRequest,
    DeleteCommentUseCase,
    ToggleCommentLikeUseCase,
    ToggleLikeInput,
    ToggleLikeRequest,
    ToggleLikeResponse,
    UpdateCommentInput,
    UpdateCommentRequest,
    UpdateCommentUseCase,
)

__all__ = [
    "CommentItem",
    "CommentPage",
    "CreateCommentInput",
    "CreateCommentRequest",
    "CreateCommentUseCase",
    "DeleteCommentInput",
    "DeleteCommentRequest",
    "DeleteCommentUseCase",
    "ListCommentsInput",
    "ListCommentsRequest",
    "ListCommentsUseCase",
    "ToggleCommentLikeUseCase",
    "ToggleLikeInput",
    "ToggleLikeRequest",
    "ToggleLikeResponse",
    "UpdateCommentInput",
    "UpdateCommentRequest",
    "UpdateCommentUseCase",
]
