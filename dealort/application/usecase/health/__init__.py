"""Health use cases."""

from .check_health import CheckHealthUseCase, HealthCheckResponse

__all__ = ["CheckHealthUseCase", "HealthCheckResponse"]
