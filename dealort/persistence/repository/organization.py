"""PostgreSQL implementations of Organization and Member repositories."""

from typing import Any, Dict, List, Optional

from sqlalchemy import desc, func, select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from dealort.domain.model import Member, Organization, OrganizationReference
from dealort.domain.repository import MemberRepository, OrganizationRepository
from dealort.domain.value import OrganizationId, Slug, UserId
from dealort.persistence.mappers import (
    member_to_dict,
    organization_reference_to_dict,
    organization_to_dict,
    row_to_member,
    row_to_organization,
    row_to_organization_reference,
)
from dealort.persistence.tables import (
    members_table,
    organization_references_table,
    organizations_table,
)


class PostgresOrganizationRepository(OrganizationRepository):
    """PostgreSQL implementation of OrganizationRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def _fetch_one(self, stmt) -> Optional[Organization]:
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_organization(dict(row)) if row else None

    async def _fetch_all(self, stmt) -> List[Organization]:
        result = await self.session.execute(stmt)
        return [row_to_organization(dict(row)) for row in result.mappings().all()]

    def _listed(self, categories: Optional[List[str]]):
        stmt = select(organizations_table).where(
            organizations_table.c.is_listed.is_(True)
        )
        if categories:
            # Any-match: array overlap operator (&&)
            stmt = stmt.where(organizations_table.c.category.overlap(categories))
        return stmt

    async def find_by_id(
        self, organization_id: OrganizationId
    ) -> Optional[Organization]:
        stmt = select(organizations_table).where(
            organizations_table.c.id == organization_id
        )
        return await self._fetch_one(stmt)

    async def find_by_slug(self, slug: Slug) -> Optional[Organization]:
        stmt = select(organizations_table).where(
            organizations_table.c.slug == slug.root
        )
        return await self._fetch_one(stmt)

    async def find_listed(
        self, categories: Optional[List[str]] = None
    ) -> List[Organization]:
        stmt = self._listed(categories).order_by(
            desc(organizations_table.c.created_at)
        )
        return await self._fetch_all(stmt)

    async def find_released(
        self, categories: Optional[List[str]] = None
    ) -> List[Organization]:
        stmt = (
            self._listed(categories)
            .where(organizations_table.c.release_date.is_not(None))
            .order_by(desc(organizations_table.c.release_date))
        )
        return await self._fetch_all(stmt)

    async def find_recent(self, limit: int) -> List[Organization]:
        stmt = (
            self._listed(None)
            .order_by(desc(organizations_table.c.created_at))
            .limit(limit)
        )
        return await self._fetch_all(stmt)

    async def save(self, organization: Organization) -> Organization:
        """Save an organization (create or update)."""
        values = organization_to_dict(organization)
        stmt = insert(organizations_table).values(**values)
        stmt = stmt.on_conflict_do_update(
            index_elements=[organizations_table.c.id],
            set_={k: v for k, v in values.items() if k != "id"},
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return organization

    async def update_fields(
        self, organization_id: OrganizationId, values: Dict[str, Any]
    ) -> Optional[Organization]:
        if not values:
            return await self.find_by_id(organization_id)

        stmt = (
            organizations_table.update()
            .where(organizations_table.c.id == organization_id)
            .values(**values)
            .returning(organizations_table)
        )
        organization = await self._fetch_one(stmt)
        await self.session.flush()
        return organization

    async def set_rating(self, organization_id: OrganizationId, rating: int) -> None:
        stmt = (
            organizations_table.update()
            .where(organizations_table.c.id == organization_id)
            .values(rating=rating)
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def increment_impressions(self, organization_id: OrganizationId) -> None:
        """Atomically increment impressions by 1."""
        stmt = (
            organizations_table.update()
            .where(organizations_table.c.id == organization_id)
            .values(impressions=organizations_table.c.impressions + 1)
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def decrement_impressions(self, organization_id: OrganizationId) -> None:
        """Atomically decrement impressions by 1, never below 0."""
        stmt = (
            organizations_table.update()
            .where(organizations_table.c.id == organization_id)
            .values(
                impressions=func.greatest(organizations_table.c.impressions - 1, 0)
            )
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def find_reference(
        self, organization_id: OrganizationId
    ) -> Optional[OrganizationReference]:
        stmt = select(organization_references_table).where(
            organization_references_table.c.organization_id == organization_id
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_organization_reference(dict(row)) if row else None

    async def save_reference(
        self, reference: OrganizationReference
    ) -> OrganizationReference:
        values = organization_reference_to_dict(reference)
        stmt = insert(organization_references_table).values(**values)
        stmt = stmt.on_conflict_do_update(
            index_elements=[organization_references_table.c.organization_id],
            set_={
                k: v
                for k, v in values.items()
                if k not in ("id", "organization_id", "created_at")
            },
        ).returning(organization_references_table)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        await self.session.flush()
        return row_to_organization_reference(dict(row)) if row else reference


class PostgresMemberRepository(MemberRepository):
    """PostgreSQL implementation of MemberRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def save(self, member: Member) -> Member:
        stmt = members_table.insert().values(**member_to_dict(member))
        await self.session.execute(stmt)
        await self.session.flush()
        return member

    async def find(
        self, organization_id: OrganizationId, user_id: UserId
    ) -> Optional[Member]:
        stmt = select(members_table).where(
            members_table.c.organization_id == organization_id,
            members_table.c.user_id == user_id,
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_member(dict(row)) if row else None

    async def find_by_organization(
        self, organization_id: OrganizationId
    ) -> List[Member]:
        stmt = (
            select(members_table)
            .where(members_table.c.organization_id == organization_id)
            .order_by(members_table.c.created_at)
        )
        result = await self.session.execute(stmt)
        return [row_to_member(dict(row)) for row in result.mappings().all()]

    async def find_organization_ids(self, user_id: UserId) -> List[OrganizationId]:
        stmt = (
            select(members_table.c.organization_id)
            .where(members_table.c.user_id == user_id)
            .distinct()
        )
        result = await self.session.execute(stmt)
        return [OrganizationId(value) for value in result.scalars().all()]
