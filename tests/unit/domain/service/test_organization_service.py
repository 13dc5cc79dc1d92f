"""Unit tests for OrganizationService."""

from datetime import timedelta

import pytest

from dealort.domain.error import ConflictError, NotAuthorizedError, NotFoundError
from dealort.domain.model.common import utcnow
from dealort.domain.repository import OrganizationRepository
from dealort.domain.service import OrganizationService
from dealort.domain.service.organization_service import sort_launches, sort_products
from dealort.domain.value import LaunchSort, ProductSort, Slug
from tests.conftest import make_organization, minutes_ago, seed_organization, seed_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestCreateOrganization:
    @pytest.mark.asyncio
    async def test_creator_becomes_owner(self, unit_env):
        organization_service = await unit_env.get(OrganizationService)
        user = await seed_user(unit_env)

        organization = await organization_service.create_organization(
            owner_id=user.id,
            name="Acme",
            slug=Slug("acme"),
            references={"web_url": "https://acme.dev"},
            tagline="Rockets",
        )

        assert organization.tagline == "Rockets"
        assert await organization_service.get_owner_id(organization.id) == user.id
        reference = await organization_service.get_reference(organization.id)
        assert reference.web_url == "https://acme.dev"
        assert await organization_service.organization_ids_for_user(user.id) == [
            organization.id
        ]

    @pytest.mark.asyncio
    async def test_duplicate_slug_conflicts(self, unit_env):
        organization_service = await unit_env.get(OrganizationService)
        user = await seed_user(unit_env)
        await organization_service.create_organization(user.id, "Acme", Slug("acme"))

        with pytest.raises(ConflictError):
            await organization_service.create_organization(user.id, "Other", Slug("acme"))

    @pytest.mark.asyncio
    async def test_no_reference_row_without_urls(self, unit_env):
        organization_service = await unit_env.get(OrganizationService)
        user = await seed_user(unit_env)

        organization = await organization_service.create_organization(
            user.id, "Acme", Slug("acme"), references={"web_url": None}
        )

        assert await organization_service.get_reference(organization.id) is None


class TestGetBySlug:
    @pytest.mark.asyncio
    async def test_missing_slug_raises(self, unit_env):
        organization_service = await unit_env.get(OrganizationService)

        with pytest.raises(NotFoundError):
            await organization_service.get_by_slug("nope")


class TestOwnerOnlyOperations:
    @pytest.mark.asyncio
    async def test_update_by_non_owner_is_forbidden(self, unit_env):
        organization_service = await unit_env.get(OrganizationService)
        owner = await seed_user(unit_env, "Owner")
        stranger = await seed_user(unit_env, "Stranger")
        organization = await seed_organization(unit_env, owner_id=owner.id)

        with pytest.raises(NotAuthorizedError):
            await organization_service.update_organization(
                organization.id, stranger.id, {"name": "Taken"}
            )

    @pytest.mark.asyncio
    async def test_update_writes_only_given_fields(self, unit_env):
        organization_service = await unit_env.get(OrganizationService)
        owner = await seed_user(unit_env)
        organization = await seed_organization(
            unit_env, owner_id=owner.id, tagline="Old tagline"
        )

        updated = await organization_service.update_organization(
            organization.id, owner.id, {"name": "Renamed"}
        )

        assert updated.name == "Renamed"
        assert updated.tagline == "Old tagline"

    @pytest.mark.asyncio
    async def test_sync_metadata_merges_references(self, unit_env):
        organization_service = await unit_env.get(OrganizationService)
        org_repo = await unit_env.get(OrganizationRepository)
        owner = await seed_user(unit_env)
        organization = await seed_organization(unit_env, owner_id=owner.id)

        await organization_service.sync_metadata(
            organization.id,
            owner.id,
            references={"web_url": "https://acme.dev", "x_url": "https://x.com/acme"},
            values={},
        )
        await organization_service.sync_metadata(
            organization.id,
            owner.id,
            references={"x_url": "https://x.com/acme2"},
            values={"gallery": []},
        )

        reference = await organization_service.get_reference(organization.id)
        assert reference.web_url == "https://acme.dev"
        assert reference.x_url == "https://x.com/acme2"
        assert (await org_repo.find_by_id(organization.id)).gallery is None

    @pytest.mark.asyncio
    async def test_sync_metadata_by_non_owner_is_forbidden(self, unit_env):
        organization_service = await unit_env.get(OrganizationService)
        owner = await seed_user(unit_env, "Owner")
        stranger = await seed_user(unit_env, "Stranger")
        organization = await seed_organization(unit_env, owner_id=owner.id)

        with pytest.raises(NotAuthorizedError):
            await organization_service.sync_metadata(
                organization.id, stranger.id, references={}, values={}
            )


class TestSorting:
    def test_top_sorts_by_rating_then_impressions(self):
        a = make_organization("a", rating=4, impressions=1)
        b = make_organization("b", rating=5, impressions=0)
        c = make_organization("c", rating=4, impressions=9)

        assert [o.slug.root for o in sort_products([a, b, c], ProductSort.TOP)] == [
            "b",
            "c",
            "a",
        ]

    def test_trending_sorts_by_impressions_then_newest(self):
        old = make_organization("old", impressions=3, created_at=minutes_ago(10))
        new = make_organization("new", impressions=3, created_at=minutes_ago(1))
        hot = make_organization("hot", impressions=8, created_at=minutes_ago(20))

        ordered = sort_products([old, new, hot], ProductSort.TRENDING)

        assert [o.slug.root for o in ordered] == ["hot", "new", "old"]

    def test_launching_soon_keeps_future_releases_ascending(self):
        now = utcnow()
        past = make_organization("past", release_date=now - timedelta(days=1))
        later = make_organization("later", release_date=now + timedelta(days=5))
        soon = make_organization("soon", release_date=now + timedelta(days=1))
        unreleased = make_organization("unreleased")

        ordered = sort_launches(
            [past, later, soon, unreleased], LaunchSort.LAUNCHING_SOON, now
        )

        assert [o.slug.root for o in ordered] == ["soon", "later"]

    def test_recent_launch_excludes_unreleased(self):
        now = utcnow()
        first = make_organization("first", release_date=now - timedelta(days=3))
        second = make_organization("second", release_date=now - timedelta(days=1))
        unreleased = make_organization("unreleased")

        ordered = sort_launches(
            [first, unreleased, second], LaunchSort.RECENT_LAUNCH, now
        )

        assert [o.slug.root for o in ordered] == ["second", "first"]


class TestListProducts:
    @pytest.mark.asyncio
    async def test_cursor_continues_after_last_item(self, unit_env):
        organization_service = await unit_env.get(OrganizationService)
        for index, slug in enumerate(["one", "two", "three"]):
            await seed_organization(unit_env, slug=slug, created_at=minutes_ago(index))

        first = await organization_service.list_products(limit=2)
        second = await organization_service.list_products(
            limit=2, cursor=first.next_cursor
        )

        assert [o.slug.root for o in first.items] == ["one", "two"]
        assert first.has_more is True
        assert [o.slug.root for o in second.items] == ["three"]
        assert second.has_more is False

    @pytest.mark.asyncio
    async def test_unknown_cursor_starts_from_beginning(self, unit_env):
        organization_service = await unit_env.get(OrganizationService)
        await seed_organization(unit_env, slug="only")

        page = await organization_service.list_products(cursor="missing")

        assert [o.slug.root for o in page.items] == ["only"]

    @pytest.mark.asyncio
    async def test_categories_match_any_and_unlisted_are_hidden(self, unit_env):
        organization_service = await unit_env.get(OrganizationService)
        await seed_organization(unit_env, slug="ai-tool", category=["ai", "dev"])
        await seed_organization(unit_env, slug="game", category=["games"])
        await seed_organization(unit_env, slug="hidden", category=["ai"], is_listed=False)

        page = await organization_service.list_products(categories=["ai", "design"])

        assert [o.slug.root for o in page.items] == ["ai-tool"]
