"""Create, update, delete and like comment use cases."""

import logfire
from pydantic import Field

from dealort.application.usecase.base import CreatedResponse, RPCModel, SuccessResponse
from dealort.domain.service import CommentService
from dealort.domain.value import CommentId, OrganizationId, UserId


class CreateCommentInput(RPCModel):
    """Create comment body."""

    organization_id: str
    content: str = Field(min_length=1, max_length=10000)
    parent_id: str | None = None  # Parent comment ID for replies


class CreateCommentRequest(CreateCommentInput):
    user_id: str


class UpdateCommentInput(RPCModel):
    id: str
    content: str = Field(min_length=1, max_length=10000)


class UpdateCommentRequest(UpdateCommentInput):
    user_id: str


class DeleteCommentInput(RPCModel):
    id: str


class DeleteCommentRequest(DeleteCommentInput):
    user_id: str


class ToggleLikeInput(RPCModel):
    comment_id: str


class ToggleLikeRequest(ToggleLikeInput):
    user_id: str


class ToggleLikeResponse(RPCModel):
    liked: bool


class CreateCommentUseCase:
    """Use case for commenting on an organization or replying to a comment."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: CreateCommentRequest) -> CreatedResponse:
        """Execute create comment flow.

        Raises:
            ValidationError: If content is blank or the parent is elsewhere
            NotFoundError: If the organization or parent does not exist
        """
        with logfire.span(
            "create_comment.execute",
            organization_id=request.organization_id,
            is_reply=request.parent_id is not None,
        ):
            comment = await self.comment_service.create_comment(
                organization_id=OrganizationId(request.organization_id),
                user_id=UserId(request.user_id),
                content=request.content,
                parent_id=CommentId(request.parent_id) if request.parent_id else None,
            )
            return CreatedResponse(id=comment.id)


class UpdateCommentUseCase:
    """Use case for editing one's own comment."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: UpdateCommentRequest) -> SuccessResponse:
        await self.comment_service.update_comment(
            CommentId(request.id), UserId(request.user_id), request.content
        )
        return SuccessResponse()


class DeleteCommentUseCase:
    """Use case for deleting one's own comment and its replies."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: DeleteCommentRequest) -> SuccessResponse:
        await self.comment_service.delete_comment(
            CommentId(request.id), UserId(request.user_id)
        )
        return SuccessResponse()


class ToggleCommentLikeUseCase:
    """Use case for liking or unliking a comment."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: ToggleLikeRequest) -> ToggleLikeResponse:
        liked = await self.comment_service.toggle_like(
            CommentId(request.comment_id), UserId(request.user_id)
        )
        return ToggleLikeResponse(liked=liked)
