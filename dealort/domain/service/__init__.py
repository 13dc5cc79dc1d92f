"""Domain services."""

from .analytics_service import AnalyticsService, OverviewAnalytics, calculate_change
from .base import Page, Service
from .comment_service import CommentNode, CommentService
from .engagement_service import EngagementService
from .health_service import HealthReport, HealthService
from .jwt_service import JWTService
from .organization_service import OrganizationService
from .report_service import ReportService
from .review_service import ReviewService
from .user_service import UserService
from .waitlist_service import EmailClient, EmailMessage, WaitlistService

__all__ = [
    "AnalyticsService",
    "CommentNode",
    "CommentService",
    "EmailClient",
    "EmailMessage",
    "EngagementService",
    "HealthReport",
    "HealthService",
    "JWTService",
    "OrganizationService",
    "OverviewAnalytics",
    "Page",
    "ReportService",
    "ReviewService",
    "Service",
    "UserService",
    "WaitlistService",
    "calculate_change",
]
