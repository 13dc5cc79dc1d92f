"""PostgreSQL implementation of Waitlist repository."""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from dealort.domain.model import WaitlistEntry
from dealort.domain.repository import WaitlistRepository
from dealort.domain.value import Email
from dealort.persistence.mappers import row_to_waitlist_entry, waitlist_entry_to_dict
from dealort.persistence.tables import waitlist_table


class PostgresWaitlistRepository(WaitlistRepository):
    """PostgreSQL implementation of WaitlistRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_email(self, email: Email) -> Optional[WaitlistEntry]:
        stmt = select(waitlist_table).where(waitlist_table.c.email == email.root)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_waitlist_entry(dict(row)) if row else None

    async def save(self, entry: WaitlistEntry) -> WaitlistEntry:
        stmt = waitlist_table.insert().values(**waitlist_entry_to_dict(entry))
        await self.session.execute(stmt)
        await self.session.flush()
        return entry
