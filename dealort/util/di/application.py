"""Application layer DI providers."""

from dishka import Scope, provide

from dealort.application.usecase.analytics import GetOverviewAnalyticsUseCase
from dealort.application.usecase.comment import (
    CreateCommentUseCase,
    DeleteCommentUseCase,
    ListCommentsUseCase,
    ToggleCommentLikeUseCase,
    UpdateCommentUseCase,
)
from dealort.application.usecase.health import CheckHealthUseCase
from dealort.application.usecase.product import (
    CreateProductUseCase,
    FollowProductUseCase,
    GetProductUseCase,
    ListLaunchesUseCase,
    ListProductsUseCase,
    ListRecentUseCase,
    ProductEnricher,
    SyncMetadataUseCase,
    ToggleImpressionUseCase,
    UnfollowProductUseCase,
    UpdateProductUseCase,
)
from dealort.application.usecase.report import CreateReportUseCase
from dealort.application.usecase.review import (
    CreateReviewUseCase,
    DeleteReviewUseCase,
    ListReviewsUseCase,
    UpdateReviewUseCase,
)
from dealort.application.usecase.user import (
    GetPrivateDataUseCase,
    GetSessionUseCase,
    UpdateUserImageUseCase,
)
from dealort.application.usecase.waitlist import (
    CheckWaitlistUseCase,
    JoinWaitlistUseCase,
)
from dealort.domain.service import (
    CommentService,
    EngagementService,
    OrganizationService,
    ReviewService,
    UserService,
)
from dealort.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed.

    Use cases whose constructors only take domain services are wired from
    their type hints.
    """

    scope = Scope.REQUEST

    # Product use cases
    @provide
    def get_product_enricher(
        self,
        organization_service: OrganizationService,
        review_service: ReviewService,
        comment_service: CommentService,
    ) -> ProductEnricher:
        """Provide the listing item builder."""
        return ProductEnricher(
            organization_service=organization_service,
            review_service=review_service,
            comment_service=comment_service,
        )

    @provide
    def get_product_use_case(
        self,
        organization_service: OrganizationService,
        review_service: ReviewService,
        comment_service: CommentService,
        engagement_service: EngagementService,
        user_service: UserService,
    ) -> GetProductUseCase:
        """Provide get product use case."""
        return GetProductUseCase(
            organization_service=organization_service,
            review_service=review_service,
            comment_service=comment_service,
            engagement_service=engagement_service,
            user_service=user_service,
        )

    list_products = provide(ListProductsUseCase)
    list_launches = provide(ListLaunchesUseCase)
    list_recent = provide(ListRecentUseCase)
    create_product = provide(CreateProductUseCase)
    update_product = provide(UpdateProductUseCase)
    follow_product = provide(FollowProductUseCase)
    unfollow_product = provide(UnfollowProductUseCase)
    toggle_impression = provide(ToggleImpressionUseCase)
    sync_metadata = provide(SyncMetadataUseCase)

    # Review use cases
    create_review = provide(CreateReviewUseCase)
    update_review = provide(UpdateReviewUseCase)
    delete_review = provide(DeleteReviewUseCase)
    list_reviews = provide(ListReviewsUseCase)

    # Comment use cases
    create_comment = provide(CreateCommentUseCase)
    update_comment = provide(UpdateCommentUseCase)
    delete_comment = provide(DeleteCommentUseCase)
    toggle_comment_like = provide(ToggleCommentLikeUseCase)
    list_comments = provide(ListCommentsUseCase)

    # Other use cases
    create_report = provide(CreateReportUseCase)
    overview_analytics = provide(GetOverviewAnalyticsUseCase)
    check_waitlist = provide(CheckWaitlistUseCase)
    join_waitlist = provide(JoinWaitlistUseCase)
    get_session = provide(GetSessionUseCase)
    private_data = provide(GetPrivateDataUseCase)
    update_user_image = provide(UpdateUserImageUseCase)
    check_health = provide(CheckHealthUseCase)
