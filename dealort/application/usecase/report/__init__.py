"""Report use cases."""

from .create_report import CreateReportInput, CreateReportRequest, CreateReportUseCase

__all__ = ["CreateReportInput", "CreateReportRequest", "CreateReportUseCase"]
