"""Repository interfaces for the Dealort domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from dealort.domain.repository.comment import CommentLikeRepository, CommentRepository
from dealort.domain.repository.engagement import FollowRepository, ImpressionRepository
from dealort.domain.repository.health import HealthRepository
from dealort.domain.repository.organization import (
    MemberRepository,
    OrganizationRepository,
)
from dealort.domain.repository.report import ReportRepository
from dealort.domain.repository.review import ReviewRepository
from dealort.domain.repository.user import UserRepository
from dealort.domain.repository.waitlist import WaitlistRepository

__all__ = [
    "UserRepository",
    "OrganizationRepository",
    "MemberRepository",
    "FollowRepository",
    "ImpressionRepository",
    "ReviewRepository",
    "CommentRepository",
    "CommentLikeRepository",
    "ReportRepository",
    "WaitlistRepository",
    "HealthRepository",
]
