"""Health check domain service."""

import time
from datetime import datetime

import logfire
from pydantic import BaseModel

from dealort.config import Settings
from dealort.domain.model.common import utcnow
from dealort.domain.repository import HealthRepository
from dealort.domain.value import HealthStatus

from .base import Service


class ComponentHealth(BaseModel):
    status: HealthStatus
    response_time: int | None = None


class HealthReport(BaseModel):
    status: HealthStatus
    timestamp: datetime
    database: ComponentHealth
    services: dict[str, ComponentHealth]


def overall_status(
    database: ComponentHealth, services: dict[str, ComponentHealth]
) -> HealthStatus:
    """Fold component health into one status.

    Healthy needs a healthy database and no unhealthy service. A healthy
    database with an unconfigured service is degraded. Anything else is
    unhealthy.
    """
    db_ok = database.status == HealthStatus.HEALTHY
    statuses = [s.status for s in services.values()]

    if db_ok and HealthStatus.UNHEALTHY not in statuses:
        return HealthStatus.HEALTHY
    if db_ok and HealthStatus.NOT_CONFIGURED in statuses:
        return HealthStatus.DEGRADED
    return HealthStatus.UNHEALTHY


class HealthService(Service):
    """Checks database connectivity and third-party configuration."""

    def __init__(self, health_repository: HealthRepository, settings: Settings) -> None:
        self.health_repository = health_repository
        self.settings = settings

    def _configured(self, configured: bool) -> ComponentHealth:
        return ComponentHealth(
            status=HealthStatus.HEALTHY if configured else HealthStatus.NOT_CONFIGURED
        )

    async def check(self) -> HealthReport:
        with logfire.span("health_service.check"):
            started = time.perf_counter()
            try:
                await self.health_repository.ping()
                database = ComponentHealth(
                    status=HealthStatus.HEALTHY,
                    response_time=round((time.perf_counter() - started) * 1000),
                )
            except Exception as e:
                logfire.error("Database health check failed", error=str(e))
                database = ComponentHealth(status=HealthStatus.UNHEALTHY)

            services = {
                "resend": self._configured(self.settings.email.is_configured),
                "uploadthing": self._configured(self.settings.uploads.is_configured),
            }
            return HealthReport(
                status=overall_status(database, services),
                timestamp=utcnow(),
                database=database,
                services=services,
            )
