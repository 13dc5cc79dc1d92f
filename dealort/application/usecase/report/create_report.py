"""Create report use case."""

from pydantic import Field

from dealort.application.usecase.base import BaseUseCase, CreatedResponse, RPCModel
from dealort.domain.service import ReportService
from dealort.domain.value import ReportableType, UserId


class CreateReportInput(RPCModel):
    """Create report body."""

    reportable_type: ReportableType
    reportable_id: str
    reason: str = Field(min_length=1, max_length=500)
    description: str | None = Field(default=None, max_length=5000)


class CreateReportRequest(CreateReportInput):
    user_id: str


class CreateReportUseCase(BaseUseCase):
    """Use case for reporting a comment or review."""

    def __init__(self, report_service: ReportService) -> None:
        """Initialize create report use case.

        Args:
            report_service: Report domain service
        """
        self.report_service = report_service

    async def execute(self, request: CreateReportRequest) -> CreatedResponse:
        report = await self.report_service.create_report(
            user_id=UserId(request.user_id),
            reportable_type=request.reportable_type,
            reportable_id=request.reportable_id,
            reason=request.reason,
            description=request.description,
        )
        return CreatedResponse(id=report.id)
