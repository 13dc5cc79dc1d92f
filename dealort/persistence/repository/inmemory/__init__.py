"""In-memory repository implementations for testing."""

from .comment import InMemoryCommentLikeRepository, InMemoryCommentRepository
from .engagement import InMemoryFollowRepository, InMemoryImpressionRepository
from .misc import (
    InMemoryHealthRepository,
    InMemoryReportRepository,
    InMemoryWaitlistRepository,
)
from .organization import InMemoryMemberRepository, InMemoryOrganizationRepository
from .review import InMemoryReviewRepository
from .user import InMemoryUserRepository

__all__ = [
    "InMemoryCommentLikeRepository",
    "InMemoryCommentRepository",
    "InMemoryFollowRepository",
    "InMemoryHealthRepository",
    "InMemoryImpressionRepository",
    "InMemoryMemberRepository",
    "InMemoryOrganizationRepository",
    "InMemoryReportRepository",
    "InMemoryReviewRepository",
    "InMemoryUserRepository",
    "InMemoryWaitlistRepository",
]
