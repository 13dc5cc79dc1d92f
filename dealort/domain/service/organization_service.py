"""Organization domain service."""

from datetime import datetime
from typing import Any

import logfire

from dealort.domain.error import ConflictError, NotAuthorizedError, NotFoundError
from dealort.domain.model import Member, Organization, OrganizationReference
from dealort.domain.model.common import utcnow
from dealort.domain.repository import MemberRepository, OrganizationRepository
from dealort.domain.value import (
    LaunchSort,
    MemberId,
    MemberRole,
    OrganizationId,
    OrganizationReferenceId,
    ProductSort,
    Slug,
    UserId,
    new_id,
)

from .base import Page, Service, page_after_cursor

REFERENCE_FIELDS = ("web_url", "x_url", "linkedin_url", "source_code_url")


def _matches_categories(organization: Organization, categories: list[str] | None) -> bool:
    if not categories:
        return True
    return any(category in organization.category for category in categories)


def sort_products(
    organizations: list[Organization], sort: ProductSort
) -> list[Organization]:
    """Order organizations for the public product listing.

    Args:
        organizations: Organizations to sort
        sort: NEWEST (created desc), TOP (rating, then impressions desc) or
            TRENDING (impressions, then created desc)

    Returns:
        New sorted list
    """
    if sort == ProductSort.TOP:
        return sorted(organizations, key=lambda o: (-o.rating, -o.impressions))
    if sort == ProductSort.TRENDING:
        return sorted(
            organizations,
            key=lambda o: (-o.impressions, -o.created_at.timestamp()),
        )
    return sorted(organizations, key=lambda o: o.created_at, reverse=True)


def sort_launches(
    organizations: list[Organization], sort: LaunchSort, now: datetime
) -> list[Organization]:
    """Order released organizations for the launches listing.

    LAUNCHING_SOON drops organizations whose release date is not in the
    future and sorts the rest soonest first.
    """
    released = [o for o in organizations if o.release_date is not None]

    if sort == LaunchSort.TOP_LAUNCHES:
        return sorted(
            released,
            key=lambda o: (-o.impressions, -o.rating, -o.created_at.timestamp()),
        )
    if sort == LaunchSort.LAUNCHING_SOON:
        upcoming = [o for o in released if o.release_date > now]
        return sorted(upcoming, key=lambda o: o.release_date)
    return sorted(released, key=lambda o: o.release_date, reverse=True)


class OrganizationService(Service):
    """Domain service for organization (product) operations."""

    def __init__(
        self,
        organization_repository: OrganizationRepository,
        member_repository: MemberRepository,
    ) -> None:
        """Initialize organization service.

        Args:
            organization_repository: Organization repository
            member_repository: Member repository
        """
        self.organization_repository = organization_repository
        self.member_repository = member_repository

    async def get_by_slug(self, slug: str) -> Organization:
        """Get an organization by slug.

        Raises:
            NotFoundError: If no organization has this slug
        """
        with logfire.span("organization_service.get_by_slug", slug=slug):
            organization = None
            try:
                organization = await self.organization_repository.find_by_slug(
                    Slug(slug)
                )
            except ValueError:
                logfire.warn("Malformed slug lookup", slug=slug)

            if organization is None:
                raise NotFoundError("Product", slug, "Product not found.")
            return organization

    async def require_organization(
        self, organization_id: OrganizationId
    ) -> Organization:
        """Get an organization by ID or raise.

        Raises:
            NotFoundError: If the organization does not exist
        """
        organization = await self.organization_repository.find_by_id(organization_id)
        if organization is None:
            raise NotFoundError("Organization", organization_id)
        return organization

    async def require_owner(
        self, organization_id: OrganizationId, user_id: UserId
    ) -> Member:
        """Ensure the user owns the organization.

        Raises:
            NotAuthorizedError: If the user is not an owner member
        """
        membership = await self.member_repository.find(organization_id, user_id)
        if membership is None or membership.role != MemberRole.OWNER:
            logfire.warn(
                "Non-owner attempted organization update",
                organization_id=organization_id,
                user_id=user_id,
            )
            raise NotAuthorizedError(
                "organization",
                organization_id,
                user_id,
                "You are not allowed to update this organization",
            )
        return membership

    async def create_organization(
        self,
        owner_id: UserId,
        name: str,
        slug: Slug,
        references: dict[str, str | None] | None = None,
        **fields: Any,
    ) -> Organization:
        """Create an organization owned by ``owner_id``.

        Args:
            owner_id: Creating user, recorded as the owner member
            name: Display name
            slug: Unique URL slug
            references: Optional reference URLs keyed by REFERENCE_FIELDS
            **fields: Remaining Organization fields (tagline, category, ...)

        Returns:
            The created organization

        Raises:
            ConflictError: If the slug is taken
        """
        with logfire.span(
            "organization_service.create_organization",
            owner_id=owner_id,
            slug=slug.root,
        ):
            if await self.organization_repository.find_by_slug(slug):
                logfire.warn("Slug already taken", slug=slug.root)
                raise ConflictError(f"Slug '{slug.root}' is already taken")

            organization = await self.organization_repository.save(
                Organization(
                    id=OrganizationId(new_id()),
                    name=name,
                    slug=slug,
                    created_at=utcnow(),
                    **fields,
                )
            )
            await self.member_repository.save(
                Member(
                    id=MemberId(new_id()),
                    organization_id=organization.id,
                    user_id=owner_id,
                    role=MemberRole.OWNER,
                )
            )

            if references and any(references.values()):
                await self.organization_repository.save_reference(
                    OrganizationReference(
                        id=OrganizationReferenceId(new_id()),
                        organization_id=organization.id,
                        **references,
                    )
                )

            logfire.info(
                "Organization created",
                organization_id=organization.id,
                slug=slug.root,
            )
            return organization

    async def update_organization(
        self,
        organization_id: OrganizationId,
        user_id: UserId,
        values: dict[str, Any],
    ) -> Organization:
        """Apply a partial update to an organization the user owns.

        Args:
            organization_id: Organization to update
            user_id: Acting user
            values: Column name to new value (only present keys are written)

        Returns:
            The updated organization

        Raises:
            NotFoundError: If the organization does not exist
            NotAuthorizedError: If the user is not an owner
        """
        with logfire.span(
            "organization_service.update_organization",
            organization_id=organization_id,
            fields=sorted(values),
        ):
            current = await self.require_organization(organization_id)
            await self.require_owner(organization_id, user_id)

            if not values:
                return current

            updated = await self.organization_repository.update_fields(
                organization_id, values
            )
            if updated is None:
                raise NotFoundError("Organization", organization_id)
            logfire.info("Organization updated", organization_id=organization_id)
            return updated

    async def sync_metadata(
        self,
        organization_id: OrganizationId,
        user_id: UserId,
        references: dict[str, str],
        values: dict[str, Any],
    ) -> None:
        """Sync reference links and media fields for an organization.

        Reference links: provided values override, missing ones keep the
        stored value. A reference row is only created when at least one
        link is provided. ``values`` holds organization columns to write
        (logo, gallery, release_date); an empty gallery is stored as NULL.

        Raises:
            NotAuthorizedError: If the user is not an owner
        """
        with logfire.span(
            "organization_service.sync_metadata",
            organization_id=organization_id,
            references=sorted(references),
            fields=sorted(values),
        ):
            await self.require_owner(organization_id, user_id)

            existing = await self.organization_repository.find_reference(
                organization_id
            )
            if existing is not None:
                merged = {
                    field: references.get(field) or getattr(existing, field)
                    for field in REFERENCE_FIELDS
                }
                await self.organization_repository.save_reference(
                    existing.model_copy(update=merged)
                )
            elif any(references.values()):
                await self.organization_repository.save_reference(
                    OrganizationReference(
                        id=OrganizationReferenceId(new_id()),
                        organization_id=organization_id,
                        **references,
                    )
                )

            if "gallery" in values and not values["gallery"]:
                values = {**values, "gallery": None}

            if values:
                await self.organization_repository.update_fields(
                    organization_id, values
                )

            logfire.info("Organization metadata synced", organization_id=organization_id)

    async def get_reference(
        self, organization_id: OrganizationId
    ) -> OrganizationReference | None:
        return await self.organization_repository.find_reference(organization_id)

    async def get_owner_id(self, organization_id: OrganizationId) -> UserId | None:
        """Return the user ID of the first member, if any."""
        members = await self.member_repository.find_by_organization(organization_id)
        return members[0].user_id if members else None

    async def organization_ids_for_user(self, user_id: UserId) -> list[OrganizationId]:
        return await self.member_repository.find_organization_ids(user_id)

    async def list_products(
        self,
        sort: ProductSort = ProductSort.NEWEST,
        limit: int = 10,
        cursor: str | None = None,
        categories: list[str] | None = None,
    ) -> Page[Organization]:
        """List listed organizations.

        Sorting and cursor slicing happen in memory; the cursor is the ID of
        the last organization of the previous page.
        """
        with logfire.span(
            "organization_service.list_products",
            sort=sort.value,
            limit=limit,
            has_cursor=cursor is not None,
        ):
            organizations = await self.organization_repository.find_listed(categories)
            organizations = [o for o in organizations if _matches_categories(o, categories)]
            ordered = sort_products(organizations, sort)
            return page_after_cursor(ordered, cursor, limit, key=lambda o: o.id)

    async def list_launches(
        self,
        sort: LaunchSort = LaunchSort.RECENT_LAUNCH,
        limit: int = 10,
        cursor: str | None = None,
        categories: list[str] | None = None,
        now: datetime | None = None,
    ) -> Page[Organization]:
        """List listed organizations that have a release date."""
        with logfire.span(
            "organization_service.list_launches", sort=sort.value, limit=limit
        ):
            organizations = await self.organization_repository.find_released(
                categories
            )
            organizations = [o for o in organizations if _matches_categories(o, categories)]
            ordered = sort_launches(organizations, sort, now or utcnow())
            return page_after_cursor(ordered, cursor, limit, key=lambda o: o.id)

    async def list_recent(self, limit: int = 10) -> list[Organization]:
        return await self.organization_repository.find_recent(limit)
