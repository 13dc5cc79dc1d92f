"""Domain model entities for Dealort."""

from dealort.domain.model.comment import Comment, CommentLike
from dealort.domain.model.engagement import Follow, OrganizationImpression
from dealort.domain.model.organization import (
    Member,
    Organization,
    OrganizationReference,
)
from dealort.domain.model.report import Report
from dealort.domain.model.review import Review
from dealort.domain.model.user import User
from dealort.domain.model.waitlist import WaitlistEntry

__all__ = [
    "User",
    "Organization",
    "OrganizationReference",
    "Member",
    "Follow",
    "OrganizationImpression",
    "Review",
    "Comment",
    "CommentLike",
    "Report",
    "WaitlistEntry",
]
