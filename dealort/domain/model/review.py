"""Review entity."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from dealort.domain.model.common import DomainModel, utcnow
from dealort.domain.value import OrganizationId, ReviewId, UserId


class Review(DomainModel):
    """A user's rating and write-up of an organization.

    A user may review a given organization at most once.
    """

    id: ReviewId
    organization_id: OrganizationId
    user_id: UserId
    rating: int = Field(ge=1, le=5)
    title: Optional[str] = Field(default=None, max_length=200)
    content: str = Field(min_length=1, max_length=10000)
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)
