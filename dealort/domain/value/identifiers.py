"""Strongly typed identifiers for Dealort domain entities.

Identifiers are opaque strings (UUID4 text) shared with the external auth
service, which owns the ``users`` table.
"""

from typing import NewType
from uuid import uuid4

UserId = NewType("UserId", str)
OrganizationId = NewType("OrganizationId", str)
MemberId = NewType("MemberId", str)
OrganizationReferenceId = NewType("OrganizationReferenceId", str)
FollowId = NewType("FollowId", str)
ImpressionId = NewType("ImpressionId", str)
ReviewId = NewType("ReviewId", str)
CommentId = NewType("CommentId", str)
CommentLikeId = NewType("CommentLikeId", str)
ReportId = NewType("ReportId", str)
WaitlistEntryId = NewType("WaitlistEntryId", str)


def new_id() -> str:
    """Generate a fresh opaque identifier."""
    return str(uuid4())
