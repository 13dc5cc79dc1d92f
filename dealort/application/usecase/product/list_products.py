"""List products use cases (products, launches, recent)."""

from datetime import datetime

import logfire
from pydantic import Field

from dealort.application.usecase.base import RPCModel
from dealort.domain.model import Organization
from dealort.domain.service import CommentService, OrganizationService, ReviewService
from dealort.domain.value import LaunchSort, ProductSort


class ProductListItem(RPCModel):
    """Organization enriched for listings."""

    id: str
    name: str
    slug: str
    tagline: str | None
    description: str | None
    category: list[str]
    url: str | None = None
    x_url: str | None = Field(default=None, alias="xURL")
    linkedin_url: str | None = Field(default=None, alias="linkedinURL")
    source_code_url: str | None = Field(default=None, alias="sourceCodeURL")
    is_dev: bool
    is_open_source: bool
    rating: float  # Live average, not the stored rounded rating
    impressions: int
    logo: str | None
    gallery: list[str] | None
    created_at: datetime
    release_date: datetime | None
    review_count: int
    comment_count: int


class ProductPage(RPCModel):
    items: list[ProductListItem]
    next_cursor: str | None
    has_more: bool


class ListProductsRequest(RPCModel):
    """List products request."""

    cursor: str | None = None
    limit: int = Field(default=10, ge=1, le=50)
    categories: list[str] | None = None
    sort_by: ProductSort = ProductSort.NEWEST


class ListLaunchesRequest(RPCModel):
    """List launches request."""

    cursor: str | None = None
    limit: int = Field(default=10, ge=1, le=50)
    categories: list[str] | None = None
    sort_by: LaunchSort = LaunchSort.RECENT_LAUNCH


class ListRecentRequest(RPCModel):
    limit: int = Field(default=10, ge=1, le=20)


class ProductEnricher:
    """Builds listing items: per-organization stats and reference links."""

    def __init__(
        self,
        organization_service: OrganizationService,
        review_service: ReviewService,
        comment_service: CommentService,
    ) -> None:
        self.organization_service = organization_service
        self.review_service = review_service
        self.comment_service = comment_service

    async def list_item(self, organization: Organization) -> ProductListItem:
        reference = await self.organization_service.get_reference(organization.id)
        return ProductListItem(
            id=organization.id,
            name=organization.name,
            slug=organization.slug.root,
            tagline=organization.tagline,
            description=organization.description,
            category=organization.category,
            url=reference.web_url if reference else None,
            x_url=reference.x_url if reference else None,
            linkedin_url=reference.linkedin_url if reference else None,
            source_code_url=reference.source_code_url if reference else None,
            is_dev=organization.is_dev,
            is_open_source=organization.is_open_source,
            rating=await self.review_service.average_for_organization(organization.id),
            impressions=organization.impressions,
            logo=organization.logo,
            gallery=organization.gallery,
            created_at=organization.created_at,
            release_date=organization.release_date,
            review_count=await self.review_service.count_for_organization(
                organization.id
            ),
            comment_count=await self.comment_service.count_for_organization(
                organization.id
            ),
        )

    async def list_items(
        self, organizations: list[Organization]
    ) -> list[ProductListItem]:
        return [await self.list_item(o) for o in organizations]


class ListProductsUseCase:
    """Use case for the public product listing."""

    def __init__(
        self, organization_service: OrganizationService, enricher: ProductEnricher
    ) -> None:
        """Initialize list products use case.

        Args:
            organization_service: Organization domain service
            enricher: Listing item builder
        """
        self.organization_service = organization_service
        self.enricher = enricher

    async def execute(self, request: ListProductsRequest) -> ProductPage:
        with logfire.span(
            "list_products.execute",
            sort=request.sort_by.value,
            limit=request.limit,
            categories=request.categories,
        ):
            page = await self.organization_service.list_products(
                sort=request.sort_by,
                limit=request.limit,
                cursor=request.cursor,
                categories=request.categories,
            )
            items = await self.enricher.list_items(page.items)
            logfire.info("Products listed", count=len(items), has_more=page.has_more)
            return ProductPage(
                items=items, next_cursor=page.next_cursor, has_more=page.has_more
            )


class ListLaunchesUseCase:
    """Use case for organizations that have a release date."""

    def __init__(
        self, organization_service: OrganizationService, enricher: ProductEnricher
    ) -> None:
        self.organization_service = organization_service
        self.enricher = enricher

    async def execute(self, request: ListLaunchesRequest) -> ProductPage:
        with logfire.span(
            "list_launches.execute", sort=request.sort_by.value, limit=request.limit
        ):
            page = await self.organization_service.list_launches(
                sort=request.sort_by,
                limit=request.limit,
                cursor=request.cursor,
                categories=request.categories,
            )
            items = await self.enricher.list_items(page.items)
            return ProductPage(
                items=items, next_cursor=page.next_cursor, has_more=page.has_more
            )


class ListRecentUseCase:
    """Use case for the newest listed organizations."""

    def __init__(
        self, organization_service: OrganizationService, enricher: ProductEnricher
    ) -> None:
        self.organization_service = organization_service
        self.enricher = enricher

    async def execute(self, request: ListRecentRequest) -> list[ProductListItem]:
        organizations = await self.organization_service.list_recent(request.limit)
        return await self.enricher.list_items(organizations)
