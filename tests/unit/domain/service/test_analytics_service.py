"""Unit tests for AnalyticsService."""

from datetime import timedelta

import pytest

from dealort.domain.model import OrganizationImpression, Review
from dealort.domain.model.common import utcnow
from dealort.domain.repository import ImpressionRepository, ReviewRepository
from dealort.domain.service import AnalyticsService, calculate_change
from dealort.domain.value import (
    AnalyticsDuration,
    ImpressionId,
    ImpressionType,
    ReviewId,
    new_id,
)
from tests.conftest import seed_organization, seed_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestCalculateChange:
    def test_increase(self):
        change = calculate_change(150, 100)

        assert change.value == "+50"
        assert change.positive is True
        assert change.percent == "+50.0%"

    def test_decrease_uses_thousands_separators(self):
        change = calculate_change(1500, 3000)

        assert change.value == "-1,500"
        assert change.positive is False
        assert change.percent == "-50.0%"

    def test_from_zero_is_one_hundred_percent(self):
        assert calculate_change(5, 0).percent == "+100.0%"

    def test_both_zero(self):
        change = calculate_change(0, 0)

        assert change.value == "+0"
        assert change.positive is True
        assert change.percent == "+0.0%"


class TestOverview:
    @pytest.mark.asyncio
    async def test_user_without_organizations_gets_zero_payload(self, unit_env):
        analytics_service = await unit_env.get(AnalyticsService)
        user = await seed_user(unit_env)

        overview = await analytics_service.overview(user.id, AnalyticsDuration.ONE_YEAR)

        assert overview.impressions.value == "0"
        assert overview.impressions.change.percent == "+0%"
        assert overview.ratings.change.value == "+0"

    @pytest.mark.asyncio
    async def test_counts_current_and_previous_windows(self, unit_env):
        analytics_service = await unit_env.get(AnalyticsService)
        impression_repo = await unit_env.get(ImpressionRepository)
        review_repo = await unit_env.get(ReviewRepository)
        owner = await seed_user(unit_env, "Owner")
        fan = await seed_user(unit_env, "Fan")
        organization = await seed_organization(unit_env, owner_id=owner.id)
        now = utcnow()

        # Two impressions in the current 30 days, one in the 30 before
        for days_ago in (1, 10, 40):
            await impression_repo.save(
                OrganizationImpression(
                    id=ImpressionId(new_id()),
                    organization_id=organization.id,
                    user_id=fan.id,
                    type=ImpressionType.VIEW,
                    created_at=now - timedelta(days=days_ago),
                )
            )
        # One review in the previous window only; one outside both windows
        for days_ago in (45, 100):
            await review_repo.save(
                Review(
                    id=ReviewId(new_id()),
                    organization_id=organization.id,
                    user_id=fan.id,
                    rating=4,
                    content="Solid",
                    created_at=now - timedelta(days=days_ago),
                )
            )

        overview = await analytics_service.overview(
            owner.id, AnalyticsDuration.THIRTY_DAYS, now=now
        )

        assert overview.impressions.value == "2"
        assert overview.impressions.change.value == "+1"
        assert overview.impressions.change.percent == "+100.0%"
        assert overview.ratings.value == "0"
        assert overview.ratings.change.positive is False
        assert overview.ratings.change.percent == "-100.0%"
