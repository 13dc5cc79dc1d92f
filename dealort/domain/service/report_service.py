"""Report domain service."""

import logfire

from dealort.domain.model import Report
from dealort.domain.repository import ReportRepository
from dealort.domain.value import ReportableType, ReportId, ReportStatus, UserId, new_id

from .base import Service


class ReportService(Service):
    """Domain service for moderation reports."""

    def __init__(self, report_repository: ReportRepository) -> None:
        """Initialize report service.

        Args:
            report_repository: Report repository
        """
        self.report_repository = report_repository

    async def create_report(
        self,
        user_id: UserId,
        reportable_type: ReportableType,
        reportable_id: str,
        reason: str,
        description: str | None = None,
    ) -> Report:
        """File a report against a comment or review.

        The reported content is not looked up; reports are stored as
        ``pending`` for later moderation.

        Returns:
            The stored report
        """
        with logfire.span(
            "report_service.create_report",
            user_id=user_id,
            reportable_type=reportable_type.value,
            reportable_id=reportable_id,
        ):
            report = await self.report_repository.save(
                Report(
                    id=ReportId(new_id()),
                    user_id=user_id,
                    reportable_type=reportable_type,
                    reportable_id=reportable_id,
                    reason=reason,
                    description=description,
                    status=ReportStatus.PENDING,
                )
            )
            logfire.info("Report filed", report_id=report.id)
            return report
