"""Unit tests for product use cases."""

import pytest

from dealort.application.usecase.product import (
    CreateProductRequest,
    CreateProductUseCase,
    GetProductRequest,
    GetProductUseCase,
    SyncMetadataRequest,
    SyncMetadataUseCase,
    UpdateProductRequest,
    UpdateProductUseCase,
)
from dealort.domain.error import NotFoundError
from dealort.domain.repository import OrganizationRepository
from dealort.domain.service import CommentService, EngagementService, ReviewService
from dealort.domain.value import OrganizationId
from tests.conftest import seed_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


async def create_product(container, user_id: str, slug: str = "acme", **fields):
    use_case = await container.get(CreateProductUseCase)
    response = await use_case.execute(
        CreateProductRequest(user_id=user_id, name="Acme", slug=slug, **fields)
    )
    return OrganizationId(response.id)


class TestCreateProduct:
    @pytest.mark.asyncio
    async def test_create_product_with_links(self, unit_env):
        owner = await seed_user(unit_env)
        use_case = await unit_env.get(CreateProductUseCase)

        response = await use_case.execute(
            CreateProductRequest(
                user_id=owner.id,
                name="Acme",
                slug="acme",
                category=["devtools"],
                url="https://acme.dev",
                release_date_ms=1_700_000_000_000,
            )
        )

        org_repo = await unit_env.get(OrganizationRepository)
        organization = await org_repo.find_by_id(OrganizationId(response.id))
        reference = await org_repo.find_reference(organization.id)
        assert response.slug == "acme"
        assert organization.category == ["devtools"]
        assert organization.release_date.year == 2023
        assert reference.web_url == "https://acme.dev/"


class TestGetProduct:
    @pytest.mark.asyncio
    async def test_detail_includes_counts_and_viewer_state(self, unit_env):
        owner = await seed_user(unit_env, "Owner")
        fan = await seed_user(unit_env, "Fan")
        organization_id = await create_product(
            unit_env, owner.id, x_url="https://x.com/acme"
        )

        engagement_service = await unit_env.get(EngagementService)
        review_service = await unit_env.get(ReviewService)
        comment_service = await unit_env.get(CommentService)
        await engagement_service.follow(organization_id, fan.id)
        await engagement_service.toggle_impression(organization_id, fan.id)
        await review_service.create_review(organization_id, fan.id, 5, "Great")
        await comment_service.create_comment(organization_id, fan.id, "Congrats!")

        use_case = await unit_env.get(GetProductUseCase)
        detail = await use_case.execute(
            GetProductRequest(slug="acme", viewer_id=fan.id)
        )

        assert detail.id == organization_id
        assert detail.review_count == 1
        assert detail.average_rating == 5.0
        assert detail.rating == 5
        assert detail.comment_count == 1
        assert detail.follower_count == 1
        assert detail.like_count == 1
        assert detail.impressions == 1
        assert detail.is_following is True
        assert detail.has_liked is True
        assert detail.x_url == "https://x.com/acme"
        assert detail.owner.id == owner.id

        wire = detail.model_dump(by_alias=True)
        assert wire["xURL"] == "https://x.com/acme"
        assert wire["isFollowing"] is True

    @pytest.mark.asyncio
    async def test_anonymous_viewer(self, unit_env):
        owner = await seed_user(unit_env)
        await create_product(unit_env, owner.id)
        use_case = await unit_env.get(GetProductUseCase)

        detail = await use_case.execute(GetProductRequest(slug="acme"))

        assert detail.is_following is False
        assert detail.has_liked is False
        assert detail.url is None

    @pytest.mark.asyncio
    async def test_unknown_slug(self, unit_env):
        use_case = await unit_env.get(GetProductUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(GetProductRequest(slug="missing"))


class TestUpdateProduct:
    @pytest.mark.asyncio
    async def test_only_provided_fields_are_written(self, unit_env):
        owner = await seed_user(unit_env)
        organization_id = await create_product(
            unit_env, owner.id, tagline="Old tagline", description="Keep me"
        )
        use_case = await unit_env.get(UpdateProductUseCase)

        await use_case.execute(
            UpdateProductRequest.model_validate(
                {
                    "organizationId": organization_id,
                    "userId": owner.id,
                    "tagline": None,
                    "name": None,
                    "isDev": True,
                }
            )
        )

        org_repo = await unit_env.get(OrganizationRepository)
        organization = await org_repo.find_by_id(organization_id)
        assert organization.tagline is None
        assert organization.name == "Acme"
        assert organization.description == "Keep me"
        assert organization.is_dev is True


class TestSyncMetadata:
    @pytest.mark.asyncio
    async def test_null_release_date_clears_it(self, unit_env):
        owner = await seed_user(unit_env)
        organization_id = await create_product(
            unit_env, owner.id, release_date_ms=1_700_000_000_000
        )
        use_case = await unit_env.get(SyncMetadataUseCase)

        await use_case.execute(
            SyncMetadataRequest.model_validate(
                {
                    "organizationId": organization_id,
                    "userId": owner.id,
                    "releaseDateMs": None,
                }
            )
        )

        org_repo = await unit_env.get(OrganizationRepository)
        assert (await org_repo.find_by_id(organization_id)).release_date is None

    @pytest.mark.asyncio
    async def test_omitted_release_date_is_kept(self, unit_env):
        owner = await seed_user(unit_env)
        organization_id = await create_product(
            unit_env, owner.id, release_date_ms=1_700_000_000_000
        )
        use_case = await unit_env.get(SyncMetadataUseCase)

        await use_case.execute(
            SyncMetadataRequest(
                organization_id=organization_id,
                user_id=owner.id,
                linkedin_url="https://linkedin.com/company/acme",
            )
        )

        org_repo = await unit_env.get(OrganizationRepository)
        organization = await org_repo.find_by_id(organization_id)
        reference = await org_repo.find_reference(organization_id)
        assert organization.release_date is not None
        assert reference.linkedin_url == "https://linkedin.com/company/acme"
