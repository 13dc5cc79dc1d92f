"""Analytics domain service.

Compares two consecutive windows of equal length ending now:
current ``[now - D, now)`` and previous ``[now - 2D, now - D)``.
"""

from datetime import datetime, timedelta

import logfire

from dealort.domain.model.common import utcnow
from dealort.domain.repository import (
    ImpressionRepository,
    MemberRepository,
    ReviewRepository,
)
from dealort.domain.value import AnalyticsDuration, UserId
from dealort.domain.value.common import ValueObject

from .base import Service


class MetricChange(ValueObject):
    value: str
    positive: bool
    percent: str


class Metric(ValueObject):
    value: str
    change: MetricChange


class OverviewAnalytics(ValueObject):
    impressions: Metric
    ratings: Metric


def calculate_change(current: int, previous: int) -> MetricChange:
    """Describe the change from ``previous`` to ``current``.

    The percentage is relative to ``previous``; it is 100 when the metric
    appears from zero and 0 when both windows are empty.

    Examples:
        calculate_change(150, 100) -> +50, +50.0%
        calculate_change(1500, 3000) -> -1,500, -50.0%
    """
    change = current - previous
    positive = change >= 0

    if previous == 0:
        percent = 100.0 if current > 0 else 0.0
    else:
        percent = abs(change / previous * 100)

    sign = "+" if positive else "-"
    return MetricChange(
        value=f"{'+' if positive else ''}{change:,}",
        positive=positive,
        percent=f"{sign}{percent:.1f}%",
    )


def _empty_metric() -> Metric:
    return Metric(
        value="0",
        change=MetricChange(value="+0", positive=True, percent="+0%"),
    )


class AnalyticsService(Service):
    """Domain service for the dashboard overview."""

    def __init__(
        self,
        member_repository: MemberRepository,
        impression_repository: ImpressionRepository,
        review_repository: ReviewRepository,
    ) -> None:
        """Initialize analytics service.

        Args:
            member_repository: Member repository
            impression_repository: Impression repository
            review_repository: Review repository
        """
        self.member_repository = member_repository
        self.impression_repository = impression_repository
        self.review_repository = review_repository

    async def overview(
        self,
        user_id: UserId,
        duration: AnalyticsDuration,
        now: datetime | None = None,
    ) -> OverviewAnalytics:
        """Impressions and reviews across the user's organizations.

        Args:
            user_id: Member whose organizations are aggregated
            duration: Window length
            now: End of the current window (defaults to the current time)

        Returns:
            Current-window totals with their change from the previous window
        """
        with logfire.span(
            "analytics_service.overview", user_id=user_id, duration=duration.value
        ):
            organization_ids = await self.member_repository.find_organization_ids(
                user_id
            )
            if not organization_ids:
                return OverviewAnalytics(
                    impressions=_empty_metric(), ratings=_empty_metric()
                )

            end = now or utcnow()
            window = timedelta(days=duration.days)
            current_start = end - window
            previous_start = current_start - window

            impressions_current = await self.impression_repository.count_in_window(
                organization_ids, current_start, end
            )
            impressions_previous = await self.impression_repository.count_in_window(
                organization_ids, previous_start, current_start
            )
            ratings_current = await self.review_repository.count_in_window(
                organization_ids, current_start, end
            )
            ratings_previous = await self.review_repository.count_in_window(
                organization_ids, previous_start, current_start
            )

            logfire.info(
                "Overview analytics computed",
                organizations=len(organization_ids),
                impressions=impressions_current,
                ratings=ratings_current,
            )
            return OverviewAnalytics(
                impressions=Metric(
                    value=f"{impressions_current:,}",
                    change=calculate_change(impressions_current, impressions_previous),
                ),
                ratings=Metric(
                    value=f"{ratings_current:,}",
                    change=calculate_change(ratings_current, ratings_previous),
                ),
            )
