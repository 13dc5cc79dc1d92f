"""Mappers for converting between database rows and domain models.

Domain models are immutable pydantic models, so rows are mapped by hand
instead of through SQLAlchemy's ORM.
"""

from typing import Any, Dict

from dealort.domain.model import (
    Comment,
    CommentLike,
    Follow,
    Member,
    Organization,
    OrganizationImpression,
    OrganizationReference,
    Report,
    Review,
    User,
    WaitlistEntry,
)
from dealort.domain.value import (
    CommentId,
    CommentLikeId,
    Email,
    FollowId,
    ImpressionId,
    ImpressionType,
    MemberId,
    MemberRole,
    OrganizationId,
    OrganizationReferenceId,
    ReportableType,
    ReportId,
    ReportStatus,
    ReviewId,
    Slug,
    UserId,
    WaitlistEntryId,
)


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model
    """
    return User(
        id=UserId(row["id"]),
        name=row["name"],
        username=row.get("username"),
        display_username=row.get("display_username"),
        email=row["email"],
        image=row.get("image"),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    return user.model_dump()


def row_to_organization(row: Dict[str, Any]) -> Organization:
    """Convert database row to Organization domain model.

    Args:
        row: Database row as dict

    Returns:
        Organization domain model
    """
    return Organization(
        id=OrganizationId(row["id"]),
        name=row["name"],
        slug=Slug(row["slug"]),
        tagline=row.get("tagline"),
        description=row.get("description"),
        category=list(row.get("category") or []),
        logo=row.get("logo"),
        gallery=list(row["gallery"]) if row.get("gallery") is not None else None,
        is_dev=row["is_dev"],
        is_open_source=row["is_open_source"],
        is_listed=row["is_listed"],
        rating=row["rating"],
        impressions=row["impressions"],
        release_date=row.get("release_date"),
        created_at=row["created_at"],
    )


def organization_to_dict(organization: Organization) -> Dict[str, Any]:
    """Convert Organization domain model to database dict.

    ``model_dump`` already unwraps the Slug root value.
    """
    return organization.model_dump()


def row_to_organization_reference(row: Dict[str, Any]) -> OrganizationReference:
    return OrganizationReference(
        id=OrganizationReferenceId(row["id"]),
        organization_id=OrganizationId(row["organization_id"]),
        web_url=row.get("web_url"),
        x_url=row.get("x_url"),
        linkedin_url=row.get("linkedin_url"),
        source_code_url=row.get("source_code_url"),
        created_at=row["created_at"],
    )


def organization_reference_to_dict(reference: OrganizationReference) -> Dict[str, Any]:
    return reference.model_dump()


def row_to_member(row: Dict[str, Any]) -> Member:
    return Member(
        id=MemberId(row["id"]),
        organization_id=OrganizationId(row["organization_id"]),
        user_id=UserId(row["user_id"]),
        role=MemberRole(row["role"]),
        created_at=row["created_at"],
    )


def member_to_dict(member: Member) -> Dict[str, Any]:
    data = member.model_dump()
    data["role"] = member.role.value
    return data


def row_to_follow(row: Dict[str, Any]) -> Follow:
    return Follow(
        id=FollowId(row["id"]),
        organization_id=OrganizationId(row["organization_id"]),
        user_id=UserId(row["user_id"]),
        created_at=row["created_at"],
    )


def follow_to_dict(follow: Follow) -> Dict[str, Any]:
    return follow.model_dump()


def row_to_impression(row: Dict[str, Any]) -> OrganizationImpression:
    return OrganizationImpression(
        id=ImpressionId(row["id"]),
        organization_id=OrganizationId(row["organization_id"]),
        user_id=UserId(row["user_id"]),
        type=ImpressionType(row["type"]),
        created_at=row["created_at"],
    )


def impression_to_dict(impression: OrganizationImpression) -> Dict[str, Any]:
    data = impression.model_dump()
    data["type"] = impression.type.value
    return data


def row_to_review(row: Dict[str, Any]) -> Review:
    """Convert database row to Review domain model.

    Args:
        row: Database row as dict

    Returns:
        Review domain model
    """
    return Review(
        id=ReviewId(row["id"]),
        organization_id=OrganizationId(row["organization_id"]),
        user_id=UserId(row["user_id"]),
        rating=row["rating"],
        title=row.get("title"),
        content=row["content"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def review_to_dict(review: Review) -> Dict[str, Any]:
    return review.model_dump()


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model.

    Args:
        row: Database row as dict

    Returns:
        Comment domain model
    """
    return Comment(
        id=CommentId(row["id"]),
        organization_id=OrganizationId(row["organization_id"]),
        user_id=UserId(row["user_id"]),
        parent_id=CommentId(row["parent_id"]) if row.get("parent_id") else None,
        content=row["content"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    return comment.model_dump()


def row_to_comment_like(row: Dict[str, Any]) -> CommentLike:
    return CommentLike(
        id=CommentLikeId(row["id"]),
        comment_id=CommentId(row["comment_id"]),
        user_id=UserId(row["user_id"]),
        created_at=row["created_at"],
    )


def comment_like_to_dict(like: CommentLike) -> Dict[str, Any]:
    return like.model_dump()


def row_to_report(row: Dict[str, Any]) -> Report:
    return Report(
        id=ReportId(row["id"]),
        user_id=UserId(row["user_id"]),
        reportable_type=ReportableType(row["reportable_type"]),
        reportable_id=row["reportable_id"],
        reason=row["reason"],
        description=row.get("description"),
        status=ReportStatus(row["status"]),
        created_at=row["created_at"],
    )


def report_to_dict(report: Report) -> Dict[str, Any]:
    """Convert Report domain model to database dict (enums as their values)."""
    data = report.model_dump()
    data["reportable_type"] = report.reportable_type.value
    data["status"] = report.status.value
    return data


def row_to_waitlist_entry(row: Dict[str, Any]) -> WaitlistEntry:
    return WaitlistEntry(
        id=WaitlistEntryId(row["id"]),
        name=row["name"],
        email=Email(row["email"]),
        ip_address=row.get("ip_address") or "",
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def waitlist_entry_to_dict(entry: WaitlistEntry) -> Dict[str, Any]:
    return entry.model_dump()
