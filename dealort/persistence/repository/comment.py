"""PostgreSQL implementations of Comment and CommentLike repositories."""

from datetime import datetime
from typing import List, Optional

from sqlalchemy import desc, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from dealort.domain.model import Comment, CommentLike
from dealort.domain.model.common import utcnow
from dealort.domain.repository import CommentLikeRepository, CommentRepository
from dealort.domain.value import CommentId, CommentLikeId, OrganizationId, UserId
from dealort.persistence.mappers import (
    comment_like_to_dict,
    comment_to_dict,
    row_to_comment,
    row_to_comment_like,
)
from dealort.persistence.tables import comment_likes_table, comments_table


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        stmt = select(comments_table).where(comments_table.c.id == comment_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_comment(dict(row)) if row else None

    async def find_top_level(
        self,
        organization_id: OrganizationId,
        limit: int,
        created_before: Optional[datetime] = None,
    ) -> List[Comment]:
        """Find top-level comments of an organization, newest first."""
        stmt = select(comments_table).where(
            comments_table.c.organization_id == organization_id,
            comments_table.c.parent_id.is_(None),
        )
        if created_before is not None:
            stmt = stmt.where(comments_table.c.created_at < created_before)

        stmt = stmt.order_by(desc(comments_table.c.created_at)).limit(limit)

        result = await self.session.execute(stmt)
        return [row_to_comment(dict(row)) for row in result.mappings().all()]

    async def find_children(self, parent_id: CommentId) -> List[Comment]:
        """Find direct child comments of a parent comment."""
        stmt = (
            select(comments_table)
            .where(comments_table.c.parent_id == parent_id)
            .order_by(desc(comments_table.c.created_at))
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(dict(row)) for row in result.mappings().all()]

    async def save(self, comment: Comment) -> Comment:
        stmt = comments_table.insert().values(**comment_to_dict(comment))
        await self.session.execute(stmt)
        await self.session.flush()
        return comment

    async def update_content(
        self, comment_id: CommentId, content: str
    ) -> Optional[Comment]:
        stmt = (
            comments_table.update()
            .where(comments_table.c.id == comment_id)
            .values(content=content, updated_at=utcnow())
            .returning(comments_table)
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        await self.session.flush()
        return row_to_comment(dict(row)) if row else None

    async def delete_many(self, comment_ids: List[CommentId]) -> None:
        """Delete comments (hard delete)."""
        if not comment_ids:
            return
        stmt = comments_table.delete().where(comments_table.c.id.in_(comment_ids))
        await self.session.execute(stmt)
        await self.session.flush()

    async def count_by_organization(self, organization_id: OrganizationId) -> int:
        stmt = (
            select(func.count())
            .select_from(comments_table)
            .where(comments_table.c.organization_id == organization_id)
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0


class PostgresCommentLikeRepository(CommentLikeRepository):
    """PostgreSQL implementation of CommentLikeRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find(
        self, comment_id: CommentId, user_id: UserId
    ) -> Optional[CommentLike]:
        stmt = (
            select(comment_likes_table)
            .where(
                comment_likes_table.c.comment_id == comment_id,
                comment_likes_table.c.user_id == user_id,
            )
            .limit(1)
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_comment_like(dict(row)) if row else None

    async def save(self, like: CommentLike) -> CommentLike:
        stmt = comment_likes_table.insert().values(**comment_like_to_dict(like))
        await self.session.execute(stmt)
        await self.session.flush()
        return like

    async def delete(self, like_id: CommentLikeId) -> None:
        stmt = comment_likes_table.delete().where(comment_likes_table.c.id == like_id)
        await self.session.execute(stmt)
        await self.session.flush()

    async def count_by_comment(self, comment_id: CommentId) -> int:
        stmt = (
            select(func.count())
            .select_from(comment_likes_table)
            .where(comment_likes_table.c.comment_id == comment_id)
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def delete_by_comments(self, comment_ids: List[CommentId]) -> None:
        if not comment_ids:
            return
        stmt = comment_likes_table.delete().where(
            comment_likes_table.c.comment_id.in_(comment_ids)
        )
        await self.session.execute(stmt)
        await self.session.flush()
