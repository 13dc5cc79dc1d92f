"""PostgreSQL repository implementations."""

from dealort.persistence.repository.comment import (
    PostgresCommentLikeRepository,
    PostgresCommentRepository,
)
from dealort.persistence.repository.engagement import (
    PostgresFollowRepository,
    PostgresImpressionRepository,
)
from dealort.persistence.repository.health import PostgresHealthRepository
from dealort.persistence.repository.organization import (
    PostgresMemberRepository,
    PostgresOrganizationRepository,
)
from dealort.persistence.repository.report import PostgresReportRepository
from dealort.persistence.repository.review import PostgresReviewRepository
from dealort.persistence.repository.user import PostgresUserRepository
from dealort.persistence.repository.waitlist import PostgresWaitlistRepository

__all__ = [
    "PostgresUserRepository",
    "PostgresOrganizationRepository",
    "PostgresMemberRepository",
    "PostgresFollowRepository",
    "PostgresImpressionRepository",
    "PostgresReviewRepository",
    "PostgresCommentRepository",
    "PostgresCommentLikeRepository",
    "PostgresReportRepository",
    "PostgresWaitlistRepository",
    "PostgresHealthRepository",
]
