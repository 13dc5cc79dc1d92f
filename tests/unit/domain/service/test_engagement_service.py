"""Unit tests for EngagementService."""

import pytest

from dealort.domain.error import NotFoundError
from dealort.domain.repository import OrganizationRepository
from dealort.domain.service import EngagementService
from dealort.domain.value import OrganizationId, new_id
from tests.conftest import seed_organization, seed_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestFollow:
    @pytest.mark.asyncio
    async def test_follow_is_idempotent(self, unit_env):
        engagement_service = await unit_env.get(EngagementService)
        user = await seed_user(unit_env)
        organization = await seed_organization(unit_env)

        assert await engagement_service.follow(organization.id, user.id) is True
        assert await engagement_service.follow(organization.id, user.id) is True

        assert await engagement_service.follower_count(organization.id) == 1
        assert await engagement_service.is_following(organization.id, user.id)

    @pytest.mark.asyncio
    async def test_unfollow_is_idempotent(self, unit_env):
        engagement_service = await unit_env.get(EngagementService)
        user = await seed_user(unit_env)
        organization = await seed_organization(unit_env)
        await engagement_service.follow(organization.id, user.id)

        assert await engagement_service.unfollow(organization.id, user.id) is False
        assert await engagement_service.unfollow(organization.id, user.id) is False

        assert await engagement_service.follower_count(organization.id) == 0

    @pytest.mark.asyncio
    async def test_follow_unknown_organization_raises(self, unit_env):
        engagement_service = await unit_env.get(EngagementService)
        user = await seed_user(unit_env)

        with pytest.raises(NotFoundError):
            await engagement_service.follow(OrganizationId(new_id()), user.id)

    @pytest.mark.asyncio
    async def test_anonymous_viewer_state_is_false(self, unit_env):
        engagement_service = await unit_env.get(EngagementService)
        organization = await seed_organization(unit_env)

        assert await engagement_service.is_following(organization.id, None) is False
        assert await engagement_service.has_liked(organization.id, None) is False


class TestToggleImpression:
    @pytest.mark.asyncio
    async def test_toggle_moves_counter_both_ways(self, unit_env):
        engagement_service = await unit_env.get(EngagementService)
        org_repo = await unit_env.get(OrganizationRepository)
        user = await seed_user(unit_env)
        organization = await seed_organization(unit_env)

        assert await engagement_service.toggle_impression(organization.id, user.id) is True
        assert (await org_repo.find_by_id(organization.id)).impressions == 1
        assert await engagement_service.has_liked(organization.id, user.id)
        assert await engagement_service.like_count(organization.id) == 1

        assert (
            await engagement_service.toggle_impression(organization.id, user.id) is False
        )
        assert (await org_repo.find_by_id(organization.id)).impressions == 0
        assert await engagement_service.like_count(organization.id) == 0

    @pytest.mark.asyncio
    async def test_counter_never_goes_negative(self, unit_env):
        org_repo = await unit_env.get(OrganizationRepository)
        organization = await seed_organization(unit_env)

        await org_repo.decrement_impressions(organization.id)

        assert (await org_repo.find_by_id(organization.id)).impressions == 0
