"""Domain value objects for Dealort."""

from dealort.domain.value.identifiers import (
    CommentId,
    CommentLikeId,
    FollowId,
    ImpressionId,
    MemberId,
    OrganizationId,
    OrganizationReferenceId,
    ReportId,
    ReviewId,
    UserId,
    WaitlistEntryId,
    new_id,
)
from dealort.domain.value.types import (
    AnalyticsDuration,
    Email,
    HealthStatus,
    ImpressionType,
    LaunchSort,
    MemberRole,
    ProductSort,
    ReportableType,
    ReportStatus,
    ReviewFilter,
    ReviewSort,
    Slug,
)

__all__ = [
    # Identifiers
    "UserId",
    "OrganizationId",
    "MemberId",
    "OrganizationReferenceId",
    "FollowId",
    "ImpressionId",
    "ReviewId",
    "CommentId",
    "CommentLikeId",
    "ReportId",
    "WaitlistEntryId",
    "new_id",
    # Types
    "AnalyticsDuration",
    "Email",
    "HealthStatus",
    "ImpressionType",
    "LaunchSort",
    "MemberRole",
    "ProductSort",
    "ReportableType",
    "ReportStatus",
    "ReviewFilter",
    "ReviewSort",
    "Slug",
]
