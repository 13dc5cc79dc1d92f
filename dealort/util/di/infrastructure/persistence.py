"""Persistence infrastructure providers."""

from collections.abc import AsyncIterator

from dishka import Scope, provide
import logfire
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from dealort.config import Settings
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
from dealort.persistence.database import create_engine, create_session_factory
from dealort.persistence.repository import (
    PostgresCommentLikeRepository,
    PostgresCommentRepository,
    PostgresFollowRepository,
    PostgresHealthRepository,
    PostgresImpressionRepository,
    PostgresMemberRepository,
    PostgresOrganizationRepository,
    PostgresReportRepository,
    PostgresReviewRepository,
    PostgresUserRepository,
    PostgresWaitlistRepository,
)
from dealort.util.di.base import ProviderBase
from dealort.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider using PostgreSQL."""

    __is_mock__ = False

    scope = Scope.APP

    @provide(scope=Scope.APP)
    def get_engine(self, settings: Settings) -> AsyncEngine:
        """Provide database engine."""
        engine = create_engine(settings)
        instrument_sqlalchemy(engine)
        return engine

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        """Provide session factory."""
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        """Provide database session for request scope.

        The session is committed at the end of the request if no exception
        occurred, or rolled back if one was raised.
        """
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
                logfire.info("Session committed")
            except Exception as e:
                logfire.warn("Session rollback", error=str(e))
                await session.rollback()
                raise

    @provide(scope=Scope.REQUEST)
    def get_user_repository(self, session: AsyncSession) -> UserRepository:
        """Provide User repository."""
        return PostgresUserRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_organization_repository(
        self, session: AsyncSession
    ) -> OrganizationRepository:
        """Provide Organization repository."""
        return PostgresOrganizationRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_member_repository(self, session: AsyncSession) -> MemberRepository:
        """Provide Member repository."""
        return PostgresMemberRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_follow_repository(self, session: AsyncSession) -> FollowRepository:
        """Provide Follow repository."""
        return PostgresFollowRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_impression_repository(self, session: AsyncSession) -> ImpressionRepository:
        """Provide Impression repository."""
        return PostgresImpressionRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_review_repository(self, session: AsyncSession) -> ReviewRepository:
        """Provide Review repository."""
        return PostgresReviewRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_comment_repository(self, session: AsyncSession) -> CommentRepository:
        """Provide Comment repository."""
        return PostgresCommentRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_comment_like_repository(
        self, session: AsyncSession
    ) -> CommentLikeRepository:
        """Provide CommentLike repository."""
        return PostgresCommentLikeRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_report_repository(self, session: AsyncSession) -> ReportRepository:
        """Provide Report repository."""
        return PostgresReportRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_waitlist_repository(self, session: AsyncSession) -> WaitlistRepository:
        """Provide Waitlist repository."""
        return PostgresWaitlistRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_health_repository(self, session: AsyncSession) -> HealthRepository:
        """Provide database health probe."""
        return PostgresHealthRepository(session)
