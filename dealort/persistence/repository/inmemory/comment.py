"""In-memory comment repositories for testing."""

from datetime import datetime
from typing import List, Optional

from dealort.domain.model import Comment, CommentLike
from dealort.domain.model.common import utcnow
from dealort.domain.repository import CommentLikeRepository, CommentRepository
from dealort.domain.value import CommentId, CommentLikeId, OrganizationId, UserId


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self) -> None:
        self._comments: dict[CommentId, Comment] = {}

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        return self._comments.get(comment_id)

    async def find_top_level(
        self,
        organization_id: OrganizationId,
        limit: int,
        created_before: Optional[datetime] = None,
    ) -> List[Comment]:
        comments = [
            c
            for c in self._comments.values()
            if c.organization_id == organization_id and c.parent_id is None
        ]
        if created_before is not None:
            comments = [c for c in comments if c.created_at < created_before]

        # Newest first
        comments.sort(key=lambda c: c.created_at, reverse=True)
        return comments[:limit]

    async def find_children(self, parent_id: CommentId) -> List[Comment]:
        comments = [c for c in self._comments.values() if c.parent_id == parent_id]
        comments.sort(key=lambda c: c.created_at, reverse=True)
        return comments

    async def save(self, comment: Comment) -> Comment:
        self._comments[comment.id] = comment
        return comment

    async def update_content(
        self, comment_id: CommentId, content: str
    ) -> Optional[Comment]:
        comment = self._comments.get(comment_id)
        if comment is None:
            return None
        updated = comment.model_copy(update={"content": content, "updated_at": utcnow()})
        self._comments[comment_id] = updated
        return updated

    async def delete_many(self, comment_ids: List[CommentId]) -> None:
        for comment_id in comment_ids:
            self._comments.pop(comment_id, None)

    async def count_by_organization(self, organization_id: OrganizationId) -> int:
        return sum(
            1 for c in self._comments.values() if c.organization_id == organization_id
        )


class InMemoryCommentLikeRepository(CommentLikeRepository):
    """In-memory implementation of CommentLikeRepository for testing."""

    def __init__(self) -> None:
        self._likes: dict[CommentLikeId, CommentLike] = {}

    async def find(
        self, comment_id: CommentId, user_id: UserId
    ) -> Optional[CommentLike]:
        for like in self._likes.values():
            if like.comment_id == comment_id and like.user_id == user_id:
                return like
        return None

    async def save(self, like: CommentLike) -> CommentLike:
        self._likes[like.id] = like
        return like

    async def delete(self, like_id: CommentLikeId) -> None:
        self._likes.pop(like_id, None)

    async def count_by_comment(self, comment_id: CommentId) -> int:
        return sum(1 for like in self._likes.values() if like.comment_id == comment_id)

    async def delete_by_comments(self, comment_ids: List[CommentId]) -> None:
        targets = set(comment_ids)
        self._likes = {
            like_id: like
            for like_id, like in self._likes.items()
            if like.comment_id not in targets
        }
