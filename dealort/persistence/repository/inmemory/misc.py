"""In-memory report, waitlist and health repositories for testing."""

from typing import Optional

from dealort.domain.model import Report, WaitlistEntry
from dealort.domain.repository import (
    HealthRepository,
    ReportRepository,
    WaitlistRepository,
)
from dealort.domain.value import Email, ReportId


class InMemoryReportRepository(ReportRepository):
    """In-memory implementation of ReportRepository for testing."""

    def __init__(self) -> None:
        self._reports: dict[ReportId, Report] = {}

    async def find_by_id(self, report_id: ReportId) -> Optional[Report]:
        return self._reports.get(report_id)

    async def save(self, report: Report) -> Report:
        self._reports[report.id] = report
        return report


class InMemoryWaitlistRepository(WaitlistRepository):
    """In-memory implementation of WaitlistRepository for testing."""

    def __init__(self) -> None:
        self._entries: dict[str, WaitlistEntry] = {}

    async def find_by_email(self, email: Email) -> Optional[WaitlistEntry]:
        return self._entries.get(email.root)

    async def save(self, entry: WaitlistEntry) -> WaitlistEntry:
        self._entries[entry.email.root] = entry
        return entry


class InMemoryHealthRepository(HealthRepository):
    """Health probe that fails only when ``healthy`` is switched off."""

    def __init__(self) -> None:
        self.healthy = True

    async def ping(self) -> None:
        if not self.healthy:
            raise ConnectionError("database unavailable")
