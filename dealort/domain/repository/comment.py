"""Comment repository interfaces."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional

from dealort.domain.model import Comment, CommentLike
from dealort.domain.value import CommentId, CommentLikeId, OrganizationId, UserId


class CommentRepository(ABC):
    """Repository for Comment entity.

    Defines the contract for comment persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_top_level(
        self,
        organization_id: OrganizationId,
        limit: int,
        created_before: Optional[datetime] = None,
    ) -> List[Comment]:
        """Find top-level comments of an organization, newest first.

        Args:
            organization_id: The organization ID
            limit: Maximum number of comments to return
            created_before: Only comments created strictly before this time

        Returns:
            Comments with no parent, ordered by created_at descending
        """
        pass

    @abstractmethod
    async def find_children(self, parent_id: CommentId) -> List[Comment]:
        """Find all direct replies to a comment, newest first.

        Args:
            parent_id: The parent comment ID

        Returns:
            Child comments ordered by created_at descending (unbounded)
        """
        pass

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        """Save a comment (create only).

        Args:
            comment: The comment to save

        Returns:
            The saved comment
        """
        pass

    @abstractmethod
    async def update_content(
        self, comment_id: CommentId, content: str
    ) -> Optional[Comment]:
        """Replace a comment's content and touch ``updated_at``.

        Args:
            comment_id: Comment ID
            content: New content

        Returns:
            The updated comment, None if it does not exist
        """
        pass

    @abstractmethod
    async def delete_many(self, comment_ids: List[CommentId]) -> None:
        """Hard-delete the given comments.

        Args:
            comment_ids: Comment IDs to delete
        """
        pass

    @abstractmethod
    async def count_by_organization(self, organization_id: OrganizationId) -> int:
        """Count all comments (including replies) on an organization."""
        pass


class CommentLikeRepository(ABC):
    """Repository for CommentLike entity.

    There is no uniqueness constraint on (user, comment). Callers check
    ``find`` before ``save``.
    """

    @abstractmethod
    async def find(
        self, comment_id: CommentId, user_id: UserId
    ) -> Optional[CommentLike]:
        """Find a user's like of a comment.

        Returns:
            The like if present, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, like: CommentLike) -> CommentLike:
        pass

    @abstractmethod
    async def delete(self, like_id: CommentLikeId) -> None:
        pass

    @abstractmethod
    async def count_by_comment(self, comment_id: CommentId) -> int:
        """Count likes on a single comment."""
        pass

    @abstractmethod
    async def delete_by_comments(self, comment_ids: List[CommentId]) -> None:
        """Delete every like referencing any of the given comments."""
        pass
