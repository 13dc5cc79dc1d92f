"""Follow and impression entities."""

from datetime import datetime

from pydantic import Field

from dealort.domain.model.common import DomainModel, utcnow
from dealort.domain.value import (
    FollowId,
    ImpressionId,
    ImpressionType,
    OrganizationId,
    UserId,
)


class Follow(DomainModel):
    """A user following an organization."""

    id: FollowId
    organization_id: OrganizationId
    user_id: UserId
    created_at: datetime = Field(default_factory=utcnow)


class OrganizationImpression(DomainModel):
    """A user's impression (like or view) of an organization."""

    id: ImpressionId
    organization_id: OrganizationId
    user_id: UserId
    type: ImpressionType = ImpressionType.LIKE
    created_at: datetime = Field(default_factory=utcnow)
