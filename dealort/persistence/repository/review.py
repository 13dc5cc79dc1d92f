"""PostgreSQL implementation of Review repository."""

from datetime import datetime
from typing import List, Optional

from sqlalchemy import and_, asc, desc, func, or_, select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from dealort.domain.model import Review
from dealort.domain.repository import ReviewRepository
from dealort.domain.value import OrganizationId, ReviewId, ReviewSort, UserId
from dealort.persistence.mappers import review_to_dict, row_to_review
from dealort.persistence.tables import reviews_table


class PostgresReviewRepository(ReviewRepository):
    """PostgreSQL implementation of ReviewRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, review_id: ReviewId) -> Optional[Review]:
        stmt = select(reviews_table).where(reviews_table.c.id == review_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_review(dict(row)) if row else None

    async def find_by_user_and_organization(
        self, user_id: UserId, organization_id: OrganizationId
    ) -> Optional[Review]:
        stmt = select(reviews_table).where(
            reviews_table.c.user_id == user_id,
            reviews_table.c.organization_id == organization_id,
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_review(dict(row)) if row else None

    async def find_page(
        self,
        organization_id: OrganizationId,
        sort: ReviewSort,
        limit: int,
        after: Optional[Review] = None,
        user_id: Optional[UserId] = None,
    ) -> List[Review]:
        """Find one page of reviews using keyset conditions on the sort key."""
        rating = reviews_table.c.rating
        created_at = reviews_table.c.created_at

        stmt = select(reviews_table).where(
            reviews_table.c.organization_id == organization_id
        )
        if user_id is not None:
            stmt = stmt.where(reviews_table.c.user_id == user_id)

        if sort == ReviewSort.TOP_RATING:
            stmt = stmt.order_by(desc(rating), desc(created_at))
            if after is not None:
                stmt = stmt.where(
                    or_(
                        rating < after.rating,
                        and_(rating == after.rating, created_at < after.created_at),
                    )
                )
        elif sort == ReviewSort.LOWEST_RATING:
            stmt = stmt.order_by(asc(rating), desc(created_at))
            if after is not None:
                stmt = stmt.where(
                    or_(
                        rating > after.rating,
                        and_(rating == after.rating, created_at < after.created_at),
                    )
                )
        else:
            stmt = stmt.order_by(desc(created_at))
            if after is not None:
                stmt = stmt.where(created_at < after.created_at)

        result = await self.session.execute(stmt.limit(limit))
        return [row_to_review(dict(row)) for row in result.mappings().all()]

    async def save(self, review: Review) -> Review:
        """Save a review (create or update)."""
        values = review_to_dict(review)
        stmt = insert(reviews_table).values(**values)
        stmt = stmt.on_conflict_do_update(
            index_elements=[reviews_table.c.id],
            set_={
                k: v
                for k, v in values.items()
                if k not in ("id", "organization_id", "user_id", "created_at")
            },
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return review

    async def delete(self, review_id: ReviewId) -> None:
        stmt = reviews_table.delete().where(reviews_table.c.id == review_id)
        await self.session.execute(stmt)
        await self.session.flush()

    async def average_rating(self, organization_id: OrganizationId) -> float:
        stmt = select(func.avg(reviews_table.c.rating)).where(
            reviews_table.c.organization_id == organization_id
        )
        result = await self.session.execute(stmt)
        average = result.scalar()
        return float(average) if average is not None else 0.0

    async def count_by_organization(self, organization_id: OrganizationId) -> int:
        stmt = (
            select(func.count())
            .select_from(reviews_table)
            .where(reviews_table.c.organization_id == organization_id)
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
            .select_from(reviews_table)
            .where(
                reviews_table.c.organization_id.in_(organization_ids),
                reviews_table.c.created_at >= start,
                reviews_table.c.created_at < end,
            )
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0
