"""Create product use case."""

from datetime import datetime, timezone

import logfire
from pydantic import Field, HttpUrl

from dealort.application.usecase.base import RPCModel
from dealort.domain.service import OrganizationService
from dealort.domain.value import Slug, UserId


def release_date_from_ms(value: int | None) -> datetime | None:
    """Convert a Unix epoch in milliseconds to an aware datetime."""
    if value is None:
        return None
    return datetime.fromtimestamp(value / 1000, tz=timezone.utc)


def url_or_none(value: HttpUrl | None) -> str | None:
    return str(value) if value is not None else None


class CreateProductInput(RPCModel):
    """Create product body."""

    name: str = Field(min_length=1, max_length=200)
    slug: Slug
    tagline: str | None = Field(default=None, max_length=300)
    description: str | None = None
    category: list[str] = Field(default_factory=list)
    logo: HttpUrl | None = None
    gallery: list[HttpUrl] | None = None
    is_dev: bool = False
    is_open_source: bool = False
    is_listed: bool = True
    release_date_ms: int | None = None
    url: HttpUrl | None = None
    x_url: HttpUrl | None = None
    linkedin_url: HttpUrl | None = None
    source_code_url: HttpUrl | None = None


class CreateProductRequest(CreateProductInput):
    user_id: str


class CreateProductResponse(RPCModel):
    id: str
    slug: str
    success: bool = True


class CreateProductUseCase:
    """Use case for creating a product with its owner membership."""

    def __init__(self, organization_service: OrganizationService) -> None:
        """Initialize create product use case.

        Args:
            organization_service: Organization domain service
        """
        self.organization_service = organization_service

    async def execute(self, request: CreateProductRequest) -> CreateProductResponse:
        """Execute create product flow.

        Raises:
            ConflictError: If the slug is taken
        """
        with logfire.span("create_product.execute", slug=request.slug.root):
            organization = await self.organization_service.create_organization(
                owner_id=UserId(request.user_id),
                name=request.name,
                slug=request.slug,
                references={
                    "web_url": url_or_none(request.url),
                    "x_url": url_or_none(request.x_url),
                    "linkedin_url": url_or_none(request.linkedin_url),
                    "source_code_url": url_or_none(request.source_code_url),
                },
                tagline=request.tagline,
                description=request.description,
                category=request.category,
                logo=url_or_none(request.logo),
                gallery=[str(g) for g in request.gallery] if request.gallery else None,
                is_dev=request.is_dev,
                is_open_source=request.is_open_source,
                is_listed=request.is_listed,
                release_date=release_date_from_ms(request.release_date_ms),
            )
            return CreateProductResponse(
                id=organization.id, slug=organization.slug.root
            )
