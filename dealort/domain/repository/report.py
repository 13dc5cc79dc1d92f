"""Report repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from dealort.domain.model import Report
from dealort.domain.value import ReportId


class ReportRepository(ABC):
    """Repository for Report entity."""

    @abstractmethod
    async def find_by_id(self, report_id: ReportId) -> Optional[Report]:
        """Find a report by ID.

        Args:
            report_id: The report's unique identifier

        Returns:
            The report if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, report: Report) -> Report:
        """Save a report."""
        pass
