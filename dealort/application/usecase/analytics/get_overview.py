"""Overview analytics use case."""

import logfire

from dealort.application.usecase.base import RPCModel
from dealort.domain.error import NotAuthorizedError
from dealort.domain.service import AnalyticsService, OverviewAnalytics
from dealort.domain.value import AnalyticsDuration, UserId


class GetOverviewInput(RPCModel):
    user_id: str
    duration: AnalyticsDuration = AnalyticsDuration.THIRTY_DAYS


class GetOverviewRequest(GetOverviewInput):
    session_user_id: str


class GetOverviewAnalyticsUseCase:
    """Use case for the dashboard overview of a user's organizations."""

    def __init__(self, analytics_service: AnalyticsService) -> None:
        """Initialize overview analytics use case.

        Args:
            analytics_service: Analytics domain service
        """
        self.analytics_service = analytics_service

    async def execute(self, request: GetOverviewRequest) -> OverviewAnalytics:
        """Execute overview analytics flow.

        Raises:
            NotAuthorizedError: If ``user_id`` is not the session user
        """
        if request.user_id != request.session_user_id:
            logfire.warn(
                "Analytics requested for another user",
                user_id=request.user_id,
                session_user_id=request.session_user_id,
            )
            raise NotAuthorizedError(
                "analytics",
                request.user_id,
                request.session_user_id,
                "You can only view your own analytics",
            )

        return await self.analytics_service.overview(
            UserId(request.user_id), request.duration
        )
