"""Report entity."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from dealort.domain.model.common import DomainModel, utcnow
from dealort.domain.value import ReportableType, ReportId, ReportStatus, UserId


class Report(DomainModel):
    """A user-submitted moderation report against a comment or review."""

    id: ReportId
    user_id: UserId
    reportable_type: ReportableType
    reportable_id: str
    reason: str = Field(min_length=1, max_length=500)
    description: Optional[str] = Field(default=None, max_length=5000)
    status: ReportStatus = ReportStatus.PENDING
    created_at: datetime = Field(default_factory=utcnow)
