"""PostgreSQL implementation of Report repository."""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from dealort.domain.model import Report
from dealort.domain.repository import ReportRepository
from dealort.domain.value import ReportId
from dealort.persistence.mappers import report_to_dict, row_to_report
from dealort.persistence.tables import reports_table


class PostgresReportRepository(ReportRepository):
    """PostgreSQL implementation of ReportRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, report_id: ReportId) -> Optional[Report]:
        stmt = select(reports_table).where(reports_table.c.id == report_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_report(dict(row)) if row else None

    async def save(self, report: Report) -> Report:
        stmt = reports_table.insert().values(**report_to_dict(report))
        await self.session.execute(stmt)
        await self.session.flush()
        return report
