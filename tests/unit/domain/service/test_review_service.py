"""Unit tests for ReviewService."""

from datetime import timedelta

import pytest

from dealort.domain.error import ConflictError, NotFoundError
from dealort.domain.model import Review
from dealort.domain.model.common import utcnow
from dealort.domain.repository import OrganizationRepository, ReviewRepository
from dealort.domain.service import ReviewService
from dealort.domain.service.base import round_half_up
from dealort.domain.value import OrganizationId, ReviewFilter, ReviewId, ReviewSort, new_id
from tests.conftest import seed_organization, seed_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


async def stored_rating(unit_env, organization_id) -> int:
    org_repo = await unit_env.get(OrganizationRepository)
    return (await org_repo.find_by_id(organization_id)).rating


class TestRoundHalfUp:
    @pytest.mark.parametrize(
        "value, expected", [(0, 0), (2.5, 3), (3.5, 4), (4.49, 4), (1.0, 1)]
    )
    def test_halves_round_up(self, value, expected):
        assert round_half_up(value) == expected


class TestCreateReview:
    @pytest.mark.asyncio
    async def test_create_updates_organization_rating(self, unit_env):
        review_service = await unit_env.get(ReviewService)
        alice = await seed_user(unit_env, "Alice")
        bob = await seed_user(unit_env, "Bob")
        organization = await seed_organization(unit_env)

        await review_service.create_review(organization.id, alice.id, 3, "Okay")
        await review_service.create_review(organization.id, bob.id, 4, "Good")

        # avg 3.5 rounds half up
        assert await stored_rating(unit_env, organization.id) == 4
        assert await review_service.average_for_organization(organization.id) == 3.5

    @pytest.mark.asyncio
    async def test_second_review_by_same_user_conflicts(self, unit_env):
        review_service = await unit_env.get(ReviewService)
        user = await seed_user(unit_env)
        organization = await seed_organization(unit_env)
        await review_service.create_review(organization.id, user.id, 5, "Great")

        with pytest.raises(ConflictError, match="You have already reviewed this product"):
            await review_service.create_review(organization.id, user.id, 1, "Again")

    @pytest.mark.asyncio
    async def test_unknown_organization_raises(self, unit_env):
        review_service = await unit_env.get(ReviewService)
        user = await seed_user(unit_env)

        with pytest.raises(NotFoundError):
            await review_service.create_review(
                OrganizationId(new_id()), user.id, 5, "Ghost"
            )


class TestUpdateDeleteReview:
    @pytest.mark.asyncio
    async def test_update_recomputes_rating(self, unit_env):
        review_service = await unit_env.get(ReviewService)
        user = await seed_user(unit_env)
        organization = await seed_organization(unit_env)
        review = await review_service.create_review(organization.id, user.id, 2, "Meh")

        updated = await review_service.update_review(review.id, user.id, rating=5)

        assert updated.rating == 5
        assert updated.content == "Meh"
        assert await stored_rating(unit_env, organization.id) == 5

    @pytest.mark.asyncio
    async def test_update_by_other_user_is_not_found(self, unit_env):
        review_service = await unit_env.get(ReviewService)
        author = await seed_user(unit_env, "Author")
        other = await seed_user(unit_env, "Other")
        organization = await seed_organization(unit_env)
        review = await review_service.create_review(organization.id, author.id, 4, "Nice")

        with pytest.raises(NotFoundError, match="Review not found or unauthorized"):
            await review_service.update_review(review.id, other.id, rating=1)

    @pytest.mark.asyncio
    async def test_delete_last_review_resets_rating(self, unit_env):
        review_service = await unit_env.get(ReviewService)
        user = await seed_user(unit_env)
        organization = await seed_organization(unit_env)
        review = await review_service.create_review(organization.id, user.id, 4, "Nice")

        await review_service.delete_review(review.id, user.id)

        assert await stored_rating(unit_env, organization.id) == 0
        assert await review_service.count_for_organization(organization.id) == 0


class TestListReviews:
    async def seed_reviews(self, unit_env, organization_id, ratings):
        """Save one review per rating, newest first."""
        review_repo = await unit_env.get(ReviewRepository)
        reviews = []
        for index, rating in enumerate(ratings):
            user = await seed_user(unit_env, f"User{index}")
            created = utcnow() - timedelta(minutes=index)
            reviews.append(
                await review_repo.save(
                    Review(
                        id=ReviewId(new_id()),
                        organization_id=organization_id,
                        user_id=user.id,
                        rating=rating,
                        content=f"Review {index}",
                        created_at=created,
                        updated_at=created,
                    )
                )
            )
        return reviews

    @pytest.mark.asyncio
    async def test_top_rating_pages_without_gaps(self, unit_env):
        review_service = await unit_env.get(ReviewService)
        organization = await seed_organization(unit_env)
        reviews = await self.seed_reviews(unit_env, organization.id, [3, 5, 5, 1, 4])

        seen = []
        cursor = None
        while True:
            page = await review_service.list_reviews(
                organization.id, sort=ReviewSort.TOP_RATING, limit=2, cursor=cursor
            )
            seen.extend(page.items)
            if not page.has_more:
                break
            cursor = page.next_cursor

        assert [r.rating for r in seen] == [5, 5, 4, 3, 1]
        assert len({r.id for r in seen}) == len(reviews)

    @pytest.mark.asyncio
    async def test_lowest_rating_order(self, unit_env):
        review_service = await unit_env.get(ReviewService)
        organization = await seed_organization(unit_env)
        await self.seed_reviews(unit_env, organization.id, [3, 5, 1])

        page = await review_service.list_reviews(
            organization.id, sort=ReviewSort.LOWEST_RATING
        )

        assert [r.rating for r in page.items] == [1, 3, 5]

    @pytest.mark.asyncio
    async def test_my_filter_returns_only_viewer_reviews(self, unit_env):
        review_service = await unit_env.get(ReviewService)
        organization = await seed_organization(unit_env)
        reviews = await self.seed_reviews(unit_env, organization.id, [3, 4])

        page = await review_service.list_reviews(
            organization.id,
            review_filter=ReviewFilter.MY,
            viewer_id=reviews[1].user_id,
        )

        assert [r.id for r in page.items] == [reviews[1].id]
