"""Health check use case."""

from datetime import datetime

from dealort.application.usecase.base import RPCModel
from dealort.domain.service import HealthService
from dealort.domain.value import HealthStatus


class DatabaseCheck(RPCModel):
    status: HealthStatus
    response_time: int | None = None


class ServiceCheck(RPCModel):
    status: HealthStatus


class HealthChecks(RPCModel):
    database: DatabaseCheck
    services: dict[str, ServiceCheck]


class HealthCheckResponse(RPCModel):
    status: HealthStatus
    timestamp: datetime
    checks: HealthChecks


class CheckHealthUseCase:
    """Use case for the detailed health report."""

    def __init__(self, health_service: HealthService) -> None:
        self.health_service = health_service

    async def execute(self) -> HealthCheckResponse:
        report = await self.health_service.check()
        return HealthCheckResponse(
            status=report.status,
            timestamp=report.timestamp,
            checks=HealthChecks(
                database=DatabaseCheck(
                    status=report.database.status,
                    response_time=report.database.response_time,
                ),
                services={
                    name: ServiceCheck(status=component.status)
                    for name, component in report.services.items()
                },
            ),
        )
