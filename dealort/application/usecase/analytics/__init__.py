"""Analytics use cases."""

from .get_overview import GetOverviewAnalyticsUseCase, GetOverviewInput, GetOverviewRequest

__all__ = ["GetOverviewAnalyticsUseCase", "GetOverviewInput", "GetOverviewRequest"]
