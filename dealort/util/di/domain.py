"""Domain layer DI providers."""

from dishka import Scope, provide

from dealort.config import AuthSettings, Settings
from dealort.domain.repository import (
    CommentLikeRepository,
    CommentRepository,
    FollowRepository,
    HealthRepository,
    ImpressionRepository,
    MemberRepository,
    OrganizationRepository,
    ReportRepository,
    ReviewRepository,
    UserRepository,
    WaitlistRepository,
)
from dealort.domain.service import (
    AnalyticsService,
    CommentService,
    EmailClient,
    EngagementService,
    HealthService,
    JWTService,
    OrganizationService,
    ReportService,
    ReviewService,
    UserService,
    WaitlistService,
)
from dealort.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_user_service(self, user_repository: UserRepository) -> UserService:
        """Provide user domain service."""
        return UserService(user_repository=user_repository)

    @provide
    def get_organization_service(
        self,
        organization_repository: OrganizationRepository,
        member_repository: MemberRepository,
    ) -> OrganizationService:
        """Provide organization domain service."""
        return OrganizationService(
            organization_repository=organization_repository,
            member_repository=member_repository,
        )

    @provide
    def get_engagement_service(
        self,
        follow_repository: FollowRepository,
        impression_repository: ImpressionRepository,
        organization_repository: OrganizationRepository,
    ) -> EngagementService:
        """Provide follow/like domain service."""
        return EngagementService(
            follow_repository=follow_repository,
            impression_repository=impression_repository,
            organization_repository=organization_repository,
        )

    @provide
    def get_review_service(
        self,
        review_repository: ReviewRepository,
        organization_repository: OrganizationRepository,
    ) -> ReviewService:
        """Provide review domain service."""
        return ReviewService(
            review_repository=review_repository,
            organization_repository=organization_repository,
        )

    @provide
    def get_comment_service(
        self,
        comment_repository: CommentRepository,
        comment_like_repository: CommentLikeRepository,
        user_repository: UserRepository,
        organization_repository: OrganizationRepository,
        settings: Settings,
    ) -> CommentService:
        """Provide comment domain service with the configured depth ceiling."""
        return CommentService(
            comment_repository=comment_repository,
            comment_like_repository=comment_like_repository,
            user_repository=user_repository,
            organization_repository=organization_repository,
            max_thread_depth=settings.comments.max_thread_depth,
        )

    @provide
    def get_report_service(self, report_repository: ReportRepository) -> ReportService:
        """Provide report domain service."""
        return ReportService(report_repository=report_repository)

    @provide
    def get_waitlist_service(
        self, waitlist_repository: WaitlistRepository, email_client: EmailClient
    ) -> WaitlistService:
        """Provide waitlist domain service."""
        return WaitlistService(
            waitlist_repository=waitlist_repository, email_client=email_client
        )

    @provide
    def get_analytics_service(
        self,
        member_repository: MemberRepository,
        impression_repository: ImpressionRepository,
        review_repository: ReviewRepository,
    ) -> AnalyticsService:
        """Provide analytics domain service."""
        return AnalyticsService(
            member_repository=member_repository,
            impression_repository=impression_repository,
            review_repository=review_repository,
        )

    @provide
    def get_health_service(
        self, health_repository: HealthRepository, settings: Settings
    ) -> HealthService:
        """Provide health check domain service."""
        return HealthService(health_repository=health_repository, settings=settings)
