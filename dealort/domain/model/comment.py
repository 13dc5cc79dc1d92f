"""Comment entities.

Comments form a tree per organization through ``parent_id``. Nothing at the
storage layer prevents cycles; replies are only ever attached to existing
comments of the same organization.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from dealort.domain.model.common import DomainModel, utcnow
from dealort.domain.value import CommentId, CommentLikeId, OrganizationId, UserId


class Comment(DomainModel):
    """Comment on an organization, or a reply to another comment."""

    id: CommentId
    organization_id: OrganizationId
    user_id: UserId
    parent_id: Optional[CommentId] = None
    content: str = Field(min_length=1, max_length=10000)
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)


class CommentLike(DomainModel):
    """A user's like of a comment."""

    id: CommentLikeId
    comment_id: CommentId
    user_id: UserId
    created_at: datetime = Field(default_factory=utcnow)
