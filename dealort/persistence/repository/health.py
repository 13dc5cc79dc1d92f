"""PostgreSQL implementation of the health probe."""

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from dealort.domain.repository import HealthRepository


class PostgresHealthRepository(HealthRepository):
    """Runs ``SELECT 1`` against the database."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def ping(self) -> None:
        await self.session.execute(text("SELECT 1"))
