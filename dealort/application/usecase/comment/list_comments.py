"""List comments use case."""

from datetime import datetime

from pydantic import Field

from dealort.application.usecase.base import RPCModel, UserSummary
from dealort.domain.service import CommentNode, CommentService
from dealort.domain.value import OrganizationId, UserId


class CommentItem(RPCModel):
    """Comment with author, like state and nested replies."""

    id: str
    organization_id: str
    user_id: str
    parent_id: str | None
    content: str
    created_at: datetime
    updated_at: datetime
    user: UserSummary | None
    like_count: int
    has_liked: bool
    replies: list["CommentItem"] = Field(default_factory=list)

    @classmethod
    def from_node(cls, node: CommentNode) -> "CommentItem":
        comment = node.comment
        return cls(
            id=comment.id,
            organization_id=comment.organization_id,
            user_id=comment.user_id,
            parent_id=comment.parent_id,
            content=comment.content,
            created_at=comment.created_at,
            updated_at=comment.updated_at,
            user=UserSummary.from_user(node.author),
            like_count=node.like_count,
            has_liked=node.has_liked,
            replies=[cls.from_node(reply) for reply in node.replies],
        )


class CommentPage(RPCModel):
    items: list[CommentItem]
    next_cursor: str | None
    has_more: bool


class ListCommentsInput(RPCModel):
    organization_id: str
    cursor: str | None = None
    limit: int = Field(default=10, ge=1, le=50)


class ListCommentsRequest(ListCommentsInput):
    viewer_id: str | None = None


class ListCommentsUseCase:
    """Use case for the threaded comment listing of an organization."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: ListCommentsRequest) -> CommentPage:
        page = await self.comment_service.list_comments(
            OrganizationId(request.organization_id),
            cursor=request.cursor,
            limit=request.limit,
            viewer_id=UserId(request.viewer_id) if request.viewer_id else None,
        )
        return CommentPage(
            items=[CommentItem.from_node(node) for node in page.items],
            next_cursor=page.next_cursor,
            has_more=page.has_more,
        )
