"""Organization aggregate.

An organization is a product listed on the platform. It owns its
memberships, its reference links, and two denormalized counters:
``rating`` (rounded review average) and ``impressions`` (like count).
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from dealort.domain.model.common import DomainModel, utcnow
from dealort.domain.value import (
    MemberId,
    MemberRole,
    OrganizationId,
    OrganizationReferenceId,
    Slug,
    UserId,
)


class Organization(DomainModel):
    """Organization (product) aggregate root."""

    id: OrganizationId
    name: str = Field(min_length=1, max_length=200)
    slug: Slug
    tagline: Optional[str] = Field(default=None, max_length=300)
    description: Optional[str] = None
    category: list[str] = Field(default_factory=list)
    logo: Optional[str] = None
    gallery: Optional[list[str]] = None
    is_dev: bool = False
    is_open_source: bool = False
    is_listed: bool = True
    rating: int = Field(default=0, ge=0, le=5)
    impressions: int = Field(default=0, ge=0)
    release_date: Optional[datetime] = None
    created_at: datetime = Field(default_factory=utcnow)


class OrganizationReference(DomainModel):
    """External links for an organization (one row per organization)."""

    id: OrganizationReferenceId
    organization_id: OrganizationId
    web_url: Optional[str] = None
    x_url: Optional[str] = None
    linkedin_url: Optional[str] = None
    source_code_url: Optional[str] = None
    created_at: datetime = Field(default_factory=utcnow)


class Member(DomainModel):
    """Membership of a user in an organization."""

    id: MemberId
    organization_id: OrganizationId
    user_id: UserId
    role: MemberRole = MemberRole.MEMBER
    created_at: datetime = Field(default_factory=utcnow)
