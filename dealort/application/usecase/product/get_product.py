"""Get product by slug use case."""

from datetime import datetime

import logfire
from pydantic import Field

from dealort.application.usecase.base import RPCModel, UserSummary
from dealort.domain.service import (
    CommentService,
    EngagementService,
    OrganizationService,
    ReviewService,
    UserService,
)
from dealort.domain.value import UserId


class GetProductInput(RPCModel):
    slug: str


class GetProductRequest(GetProductInput):
    """Get product request."""

    viewer_id: str | None = None  # Current user ID (if authenticated)


class ProductDetail(RPCModel):
    """Full product page payload."""

    id: str
    name: str
    slug: str
    tagline: str | None
    description: str | None
    category: list[str]
    logo: str | None
    gallery: list[str] = Field(default_factory=list)
    is_dev: bool
    is_open_source: bool
    is_listed: bool
    rating: int
    impressions: int
    release_date: datetime | None
    created_at: datetime
    url: str | None = None
    x_url: str | None = Field(default=None, alias="xURL")
    linkedin_url: str | None = Field(default=None, alias="linkedinURL")
    source_code_url: str | None = Field(default=None, alias="sourceCodeURL")
    review_count: int
    average_rating: float
    comment_count: int
    follower_count: int
    like_count: int
    is_following: bool
    has_liked: bool
    owner: UserSummary | None = None


class GetProductUseCase:
    """Use case for the product detail page."""

    def __init__(
        self,
        organization_service: OrganizationService,
        review_service: ReviewService,
        comment_service: CommentService,
        engagement_service: EngagementService,
        user_service: UserService,
    ) -> None:
        """Initialize get product use case.

        Args:
            organization_service: Organization domain service
            review_service: Review service (count, average)
            comment_service: Comment service (count)
            engagement_service: Follow/like counts and viewer state
            user_service: User service (owner lookup)
        """
        self.organization_service = organization_service
        self.review_service = review_service
        self.comment_service = comment_service
        self.engagement_service = engagement_service
        self.user_service = user_service

    async def execute(self, request: GetProductRequest) -> ProductDetail:
        """Execute get product flow.

        Raises:
            NotFoundError: If no product has this slug
        """
        with logfire.span("get_product.execute", slug=request.slug):
            organization = await self.organization_service.get_by_slug(request.slug)
            organization_id = organization.id
            viewer_id = UserId(request.viewer_id) if request.viewer_id else None

            reference = await self.organization_service.get_reference(organization_id)

            owner = None
            owner_id = await self.organization_service.get_owner_id(organization_id)
            if owner_id is not None:
                owner = await self.user_service.get_user_by_id(owner_id)

            return ProductDetail(
                id=organization_id,
                name=organization.name,
                slug=organization.slug.root,
                tagline=organization.tagline,
                description=organization.description,
                category=organization.category,
                logo=organization.logo,
                gallery=organization.gallery or [],
                is_dev=organization.is_dev,
                is_open_source=organization.is_open_source,
                is_listed=organization.is_listed,
                rating=organization.rating,
                impressions=organization.impressions,
                release_date=organization.release_date,
                created_at=organization.created_at,
                url=reference.web_url if reference else None,
                x_url=reference.x_url if reference else None,
                linkedin_url=reference.linkedin_url if reference else None,
                source_code_url=reference.source_code_url if reference else None,
                review_count=await self.review_service.count_for_organization(
                    organization_id
                ),
                average_rating=await self.review_service.average_for_organization(
                    organization_id
                ),
                comment_count=await self.comment_service.count_for_organization(
                    organization_id
                ),
                follower_count=await self.engagement_service.follower_count(
                    organization_id
                ),
                like_count=await self.engagement_service.like_count(organization_id),
                is_following=await self.engagement_service.is_following(
                    organization_id, viewer_id
                ),
                has_liked=await self.engagement_service.has_liked(
                    organization_id, viewer_id
                ),
                owner=UserSummary.from_user(owner),
            )
