"""Unit tests for review listing and analytics use cases."""

import pytest

from dealort.application.usecase.analytics import (
    GetOverviewAnalyticsUseCase,
    GetOverviewRequest,
)
from dealort.application.usecase.review import ListReviewsRequest, ListReviewsUseCase
from dealort.domain.error import NotAuthorizedError
from dealort.domain.service import ReviewService
from dealort.domain.value import AnalyticsDuration, ReviewFilter
from tests.conftest import seed_organization, seed_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestListReviews:
    @pytest.mark.asyncio
    async def test_reviews_carry_their_author(self, unit_env):
        alice = await seed_user(unit_env, "Alice")
        organization = await seed_organization(unit_env)
        review_service = await unit_env.get(ReviewService)
        await review_service.create_review(organization.id, alice.id, 4, "Nice")
        use_case = await unit_env.get(ListReviewsUseCase)

        page = await use_case.execute(
            ListReviewsRequest(organization_id=organization.id)
        )

        assert len(page.items) == 1
        assert page.items[0].user.name == "Alice"
        assert page.has_more is False

    @pytest.mark.asyncio
    async def test_my_filter_without_viewer_lists_everything(self, unit_env):
        alice = await seed_user(unit_env, "Alice")
        bob = await seed_user(unit_env, "Bob")
        organization = await seed_organization(unit_env)
        review_service = await unit_env.get(ReviewService)
        await review_service.create_review(organization.id, alice.id, 4, "Nice")
        await review_service.create_review(organization.id, bob.id, 2, "Meh")
        use_case = await unit_env.get(ListReviewsUseCase)

        anonymous = await use_case.execute(
            ListReviewsRequest(organization_id=organization.id, filter=ReviewFilter.MY)
        )
        as_bob = await use_case.execute(
            ListReviewsRequest(
                organization_id=organization.id,
                filter=ReviewFilter.MY,
                viewer_id=bob.id,
            )
        )

        assert len(anonymous.items) == 2
        assert [item.user_id for item in as_bob.items] == [bob.id]


class TestOverviewAnalytics:
    @pytest.mark.asyncio
    async def test_other_users_analytics_are_forbidden(self, unit_env):
        alice = await seed_user(unit_env, "Alice")
        bob = await seed_user(unit_env, "Bob")
        use_case = await unit_env.get(GetOverviewAnalyticsUseCase)

        with pytest.raises(NotAuthorizedError):
            await use_case.execute(
                GetOverviewRequest(user_id=bob.id, session_user_id=alice.id)
            )

    @pytest.mark.asyncio
    async def test_duration_is_parsed_from_wire_value(self, unit_env):
        alice = await seed_user(unit_env)
        use_case = await unit_env.get(GetOverviewAnalyticsUseCase)

        request = GetOverviewRequest.model_validate(
            {"userId": alice.id, "sessionUserId": alice.id, "duration": "3 months"}
        )
        overview = await use_case.execute(request)

        assert request.duration == AnalyticsDuration.THREE_MONTHS
        assert overview.impressions.value == "0"
