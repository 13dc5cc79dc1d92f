"""Domain value objects for Dealort.

Value objects are immutable and defined by their values, not identity.
"""

import re
from enum import Enum

from pydantic import field_validator

from dealort.domain.value.common import RootValueObject


class MemberRole(str, Enum):
    """Role of a user inside an organization."""

    OWNER = "owner"
    MEMBER = "member"


class ImpressionType(str, Enum):
    """Kind of organization impression."""

    LIKE = "like"
    VIEW = "view"


class ReportableType(str, Enum):
    """Type of content that can be reported."""

    COMMENT = "comment"
    REVIEW = "review"


class ReportStatus(str, Enum):
    """Moderation status of a report."""

    PENDING = "pending"
    RESOLVED = "resolved"
    DISMISSED = "dismissed"


class ProductSort(str, Enum):
    """Ordering of the public product listing."""

    NEWEST = "newest"
    TOP = "top"
    TRENDING = "trending"


class LaunchSort(str, Enum):
    """Ordering of the launches listing."""

    RECENT_LAUNCH = "recent_launch"
    TOP_LAUNCHES = "top_launches"
    LAUNCHING_SOON = "launching_soon"


class ReviewFilter(str, Enum):
    ALL = "all"
    MY = "my"


class ReviewSort(str, Enum):
    RECENT = "recent"
    TOP_RATING = "top_rating"
    LOWEST_RATING = "lowest_rating"


class AnalyticsDuration(str, Enum):
    """Analytics comparison window."""

    THIRTY_DAYS = "30 days"
    THREE_MONTHS = "3 months"
    ONE_YEAR = "1 year"

    @property
    def days(self) -> int:
        return _DURATION_DAYS[self]


_DURATION_DAYS = {
    AnalyticsDuration.THIRTY_DAYS: 30,
    AnalyticsDuration.THREE_MONTHS: 90,
    AnalyticsDuration.ONE_YEAR: 365,
}


class HealthStatus(str, Enum):
    HEALTHY = "healthy"
    DEGRADED = "degraded"
    UNHEALTHY = "unhealthy"
    NOT_CONFIGURED = "not_configured"


class Slug(RootValueObject[str]):
    """URL-safe slug for organizations.

    Must be lowercase, alphanumeric with hyphens, 1-100 characters.
    Examples: 'dealort', 'my-cool-app-2'
    """

    @field_validator("root")
    @classmethod
    def validate_slug_format(cls, v: str) -> str:
        """Validate slug format."""
        if len(v) < 1 or len(v) > 100:
            raise ValueError("Slug must be 1-100 characters")
        if not re.match(r"^[a-z0-9]+(?:-[a-z0-9]+)*$", v):
            raise ValueError(
                "Slug must be lowercase alphanumeric with hyphens, "
                "no leading/trailing hyphens or consecutive hyphens"
            )
        return v


class Email(RootValueObject[str]):
    """Email address, normalized to lowercase."""

    @field_validator("root")
    @classmethod
    def validate_email(cls, v: str) -> str:
        v = v.strip().lower()
        if not re.match(r"^[^@\s]+@[^@\s]+\.[^@\s]+$", v) or len(v) > 255:
            raise ValueError("Invalid email address")
        return v
