"""PostgreSQL implementations of Follow and Impression repositories."""

from datetime import datetime
from typing import List, Optional

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from dealort.domain.model import Follow, OrganizationImpression
from dealort.domain.repository import FollowRepository, ImpressionRepository
from dealort.domain.value import ImpressionId, ImpressionType, OrganizationId, UserId
from dealort.persistence.mappers import (
    follow_to_dict,
    impression_to_dict,
    row_to_follow,
    row_to_impression,
)
from dealort.persistence.tables import follows_table, organization_impressions_table


class PostgresFollowRepository(FollowRepository):
    """PostgreSQL implementation of FollowRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find(
        self, organization_id: OrganizationId, user_id: UserId
    ) -> Optional[Follow]:
        stmt = select(follows_table).where(
            follows_table.c.organization_id == organization_id,
            follows_table.c.user_id == user_id,
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_follow(dict(row)) if row else None

    async def save(self, follow: Follow) -> Follow:
        stmt = follows_table.insert().values(**follow_to_dict(follow))
        await self.session.execute(stmt)
        await self.session.flush()
        return follow

    async def delete(self, organization_id: OrganizationId, user_id: UserId) -> None:
        stmt = follows_table.delete().where(
            follows_table.c.organization_id == organization_id,
            follows_table.c.user_id == user_id,
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def count_by_organization(self, organization_id: OrganizationId) -> int:
        stmt = (
            select(func.count())
            .select_from(follows_table)
            .where(follows_table.c.organization_id == organization_id)
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0


class PostgresImpressionRepository(ImpressionRepository):
    """PostgreSQL implementation of ImpressionRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find(
        self,
        organization_id: OrganizationId,
        user_id: UserId,
        impression_type: ImpressionType,
    ) -> Optional[OrganizationImpression]:
        stmt = select(organization_impressions_table).where(
            organization_impressions_table.c.organization_id == organization_id,
            organization_impressions_table.c.user_id == user_id,
            organization_impressions_table.c.type == impression_type.value,
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_impression(dict(row)) if row else None

    async def save(self, impression: OrganizationImpression) -> OrganizationImpression:
        stmt = organization_impressions_table.insert().values(
            **impression_to_dict(impression)
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return impression

    async def delete(self, impression_id: ImpressionId) -> None:
        stmt = organization_impressions_table.delete().where(
            organization_impressions_table.c.id == impression_id
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def count_by_organization(
        self, organization_id: OrganizationId, impression_type: ImpressionType
    ) -> int:
        stmt = (
            select(func.count())
            .select_from(organization_impressions_table)
            .where(
                organization_impressions_table.c.organization_id == organization_id,
                organization_impressions_table.c.type == impression_type.value,
            )
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def count_in_window(
        self,
        organization_ids: List[OrganizationId],
        start: datetime,
        end: datetime,
    ) -> int:
        if not organization_ids:
            return 0

        stmt = (
            select(func.count())
            .select_from(organization_impressions_table)
            .where(
                organization_impressions_table.c.organization_id.in_(organization_ids),
                organization_impressions_table.c.created_at >= start,
                organization_impressions_table.c.created_at < end,
            )
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0
