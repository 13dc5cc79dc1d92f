"""Comment domain service."""

from dataclasses import dataclass, field

import logfire

from dealort.domain.error import NotFoundError, ValidationError
from dealort.domain.model import Comment, CommentLike, User
from dealort.domain.model.common import utcnow
from dealort.domain.repository import (
    CommentLikeRepository,
    CommentRepository,
    OrganizationRepository,
    UserRepository,
)
from dealort.domain.value import (
    CommentId,
    CommentLikeId,
    OrganizationId,
    UserId,
    new_id,
)

from .base import Page, Service, paginate

COMMENT_NOT_FOUND = "Comment not found or unauthorized"


@dataclass
class CommentNode:
    """A comment hydrated with its author, like state and full reply tree."""

    comment: Comment
    author: User | None
    like_count: int
    has_liked: bool
    replies: list["CommentNode"] = field(default_factory=list)


class CommentService(Service):
    """Domain service for comment operations."""

    def __init__(
        self,
        comment_repository: CommentRepository,
        comment_like_repository: CommentLikeRepository,
        user_repository: UserRepository,
        organization_repository: OrganizationRepository,
        max_thread_depth: int | None = None,
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            comment_like_repository: Comment like repository
            user_repository: User repository (author lookups)
            organization_repository: Organization repository
            max_thread_depth: Deepest reply level to hydrate; None for no limit
        """
        self.comment_repository = comment_repository
        self.comment_like_repository = comment_like_repository
        self.user_repository = user_repository
        self.organization_repository = organization_repository
        self.max_thread_depth = max_thread_depth

    async def create_comment(
        self,
        organization_id: OrganizationId,
        user_id: UserId,
        content: str,
        parent_id: CommentId | None = None,
    ) -> Comment:
        """Create a comment on an organization or a reply to another comment.

        Args:
            organization_id: Organization being discussed
            user_id: Author user ID
            content: Comment text
            parent_id: Parent comment ID for replies (None for top-level)

        Returns:
            Created comment

        Raises:
            ValidationError: If content is blank or the parent belongs to
                another organization
            NotFoundError: If the organization or parent does not exist
        """
        with logfire.span(
            "comment_service.create_comment",
            organization_id=organization_id,
            user_id=user_id,
            parent_id=parent_id,
        ):
            if not content.strip():
                raise ValidationError("Comment content cannot be empty")

            if await self.organization_repository.find_by_id(organization_id) is None:
                raise NotFoundError("Organization", organization_id)

            if parent_id:
                parent = await self.comment_repository.find_by_id(parent_id)
                if parent is None:
                    logfire.warn("Parent comment not found", parent_id=parent_id)
                    raise NotFoundError("Comment", parent_id, "Parent comment not found")
                if parent.organization_id != organization_id:
                    logfire.warn(
                        "Parent comment belongs to another organization",
                        parent_id=parent_id,
                        parent_organization_id=parent.organization_id,
                        organization_id=organization_id,
                    )
                    raise ValidationError(
                        "Parent comment does not belong to this organization"
                    )

            now = utcnow()
            comment = await self.comment_repository.save(
                Comment(
                    id=CommentId(new_id()),
                    organization_id=organization_id,
                    user_id=user_id,
                    parent_id=parent_id,
                    content=content,
                    created_at=now,
                    updated_at=now,
                )
            )
            logfire.info(
                "Comment created",
                comment_id=comment.id,
                organization_id=organization_id,
                is_reply=parent_id is not None,
            )
            return comment

    async def _require_own_comment(
        self, comment_id: CommentId, user_id: UserId
    ) -> Comment:
        comment = await self.comment_repository.find_by_id(comment_id)
        if comment is None or comment.user_id != user_id:
            logfire.warn(
                "Comment missing or not owned", comment_id=comment_id, user_id=user_id
            )
            raise NotFoundError("Comment", comment_id, COMMENT_NOT_FOUND)
        return comment

    async def update_comment(
        self, comment_id: CommentId, user_id: UserId, content: str
    ) -> Comment:
        """Replace the content of the caller's own comment.

        Raises:
            NotFoundError: If the comment is missing or owned by someone else
            ValidationError: If content is blank
        """
        with logfire.span(
            "comment_service.update_comment",
            comment_id=comment_id,
            content_length=len(content),
        ):
            if not content.strip():
                raise ValidationError("Comment content cannot be empty")

            await self._require_own_comment(comment_id, user_id)
            updated = await self.comment_repository.update_content(comment_id, content)
            if updated is None:
                raise NotFoundError("Comment", comment_id, COMMENT_NOT_FOUND)

            logfire.info("Comment updated", comment_id=comment_id)
            return updated

    async def collect_descendant_ids(self, comment_id: CommentId) -> list[CommentId]:
        """Collect the IDs of every reply below a comment, breadth first."""
        descendants: list[CommentId] = []
        seen = {comment_id}
        frontier = [comment_id]
        while frontier:
            next_frontier = []
            for parent_id in frontier:
                for child in await self.comment_repository.find_children(parent_id):
                    if child.id in seen:
                        continue
                    seen.add(child.id)
                    descendants.append(child.id)
                    next_frontier.append(child.id)
            frontier = next_frontier
        return descendants

    async def delete_comment(self, comment_id: CommentId, user_id: UserId) -> None:
        """Delete the caller's own comment together with its whole subtree.

        Replies and likes are removed explicitly before the comment itself.

        Raises:
            NotFoundError: If the comment is missing or owned by someone else
        """
        with logfire.span(
            "comment_service.delete_comment", comment_id=comment_id, user_id=user_id
        ):
            await self._require_own_comment(comment_id, user_id)

            descendants = await self.collect_descendant_ids(comment_id)
            await self.comment_like_repository.delete_by_comments(
                [comment_id, *descendants]
            )
            if descendants:
                await self.comment_repository.delete_many(descendants)
            await self.comment_repository.delete_many([comment_id])

            logfire.info(
                "Comment deleted",
                comment_id=comment_id,
                replies_deleted=len(descendants),
            )

    async def toggle_like(self, comment_id: CommentId, user_id: UserId) -> bool:
        """Like or unlike a comment.

        Check-then-write: two concurrent likes from the same user can both
        pass the check.

        Returns:
            True if the comment is now liked, False if the like was removed

        Raises:
            NotFoundError: If the comment does not exist
        """
        with logfire.span(
            "comment_service.toggle_like", comment_id=comment_id, user_id=user_id
        ):
            if await self.comment_repository.find_by_id(comment_id) is None:
                raise NotFoundError("Comment", comment_id)

            existing = await self.comment_like_repository.find(comment_id, user_id)
            if existing is not None:
                await self.comment_like_repository.delete(existing.id)
                logfire.info("Comment unliked", comment_id=comment_id)
                return False

            await self.comment_like_repository.save(
                CommentLike(
                    id=CommentLikeId(new_id()),
                    comment_id=comment_id,
                    user_id=user_id,
                )
            )
            logfire.info("Comment liked", comment_id=comment_id)
            return True

    async def list_comments(
        self,
        organization_id: OrganizationId,
        cursor: str | None = None,
        limit: int = 10,
        viewer_id: UserId | None = None,
    ) -> Page[CommentNode]:
        """List top-level comments of an organization with their reply trees.

        Top-level comments are paginated newest first; the cursor is the ID
        of the last comment of the previous page. Replies are not paginated:
        every descendant is loaded, newest first at each level, down to
        ``max_thread_depth`` when one is configured.

        Each node is hydrated with one query per lookup (author, likes,
        children), so the cost grows with the total number of descendants.
        No snapshot is held across those queries.

        Args:
            organization_id: Organization whose comments to list
            cursor: ID of the last comment on the previous page
            limit: Page size
            viewer_id: Viewer for ``has_liked`` (None when anonymous)

        Returns:
            Page of hydrated top-level comment nodes
        """
        with logfire.span(
            "comment_service.list_comments",
            organization_id=organization_id,
            limit=limit,
            has_cursor=cursor is not None,
            max_depth=self.max_thread_depth,
        ):
            created_before = None
            if cursor:
                cursor_comment = await self.comment_repository.find_by_id(
                    CommentId(cursor)
                )
                if cursor_comment is not None:
                    created_before = cursor_comment.created_at

            rows = await self.comment_repository.find_top_level(
                organization_id, limit + 1, created_before=created_before
            )
            top_level, has_more = paginate(rows, limit)

            items = []
            for comment in top_level:
                items.append(await self._hydrate(comment, viewer_id, depth=0))

            next_cursor = top_level[-1].id if has_more and top_level else None
            return Page(items=items, next_cursor=next_cursor, has_more=has_more)

    async def _hydrate(
        self, comment: Comment, viewer_id: UserId | None, depth: int
    ) -> CommentNode:
        author = await self.user_repository.find_by_id(comment.user_id)

        replies: list[CommentNode] = []
        if self.max_thread_depth is None or depth < self.max_thread_depth:
            for child in await self.comment_repository.find_children(comment.id):
                replies.append(await self._hydrate(child, viewer_id, depth + 1))

        like_count = await self.comment_like_repository.count_by_comment(comment.id)
        has_liked = False
        if viewer_id is not None:
            like = await self.comment_like_repository.find(comment.id, viewer_id)
            has_liked = like is not None

        return CommentNode(
            comment=comment,
            author=author,
            like_count=like_count,
            has_liked=has_liked,
            replies=replies,
        )

    async def count_for_organization(self, organization_id: OrganizationId) -> int:
        return await self.comment_repository.count_by_organization(organization_id)
