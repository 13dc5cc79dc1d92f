"""Review domain service."""

import logfire

from dealort.domain.error import ConflictError, NotFoundError
from dealort.domain.model import Review
from dealort.domain.model.common import utcnow
from dealort.domain.repository import OrganizationRepository, ReviewRepository
from dealort.domain.value import (
    OrganizationId,
    ReviewFilter,
    ReviewId,
    ReviewSort,
    UserId,
    new_id,
)

from .base import Page, Service, paginate, round_half_up

REVIEW_NOT_FOUND = "Review not found or unauthorized"


class ReviewService(Service):
    """Domain service for review operations.

    Every write recomputes the organization's ``rating`` as the rounded
    average of its reviews.
    """

    def __init__(
        self,
        review_repository: ReviewRepository,
        organization_repository: OrganizationRepository,
    ) -> None:
        """Initialize review service.

        Args:
            review_repository: Review repository
            organization_repository: Organization repository (rating column)
        """
        self.review_repository = review_repository
        self.organization_repository = organization_repository

    async def recompute_rating(self, organization_id: OrganizationId) -> int:
        """Store ``round_half_up(avg(rating))`` on the organization.

        Returns:
            The stored rating (0 when there are no reviews)
        """
        average = await self.review_repository.average_rating(organization_id)
        rating = round_half_up(average)
        await self.organization_repository.set_rating(organization_id, rating)
        logfire.info(
            "Organization rating recomputed",
            organization_id=organization_id,
            average=average,
            rating=rating,
        )
        return rating

    async def create_review(
        self,
        organization_id: OrganizationId,
        user_id: UserId,
        rating: int,
        content: str,
        title: str | None = None,
    ) -> Review:
        """Create a review.

        Raises:
            NotFoundError: If the organization does not exist
            ConflictError: If the user already reviewed this organization
        """
        with logfire.span(
            "review_service.create_review",
            organization_id=organization_id,
            user_id=user_id,
            rating=rating,
        ):
            if await self.organization_repository.find_by_id(organization_id) is None:
                raise NotFoundError("Organization", organization_id)

            existing = await self.review_repository.find_by_user_and_organization(
                user_id, organization_id
            )
            if existing is not None:
                logfire.warn(
                    "Duplicate review rejected",
                    organization_id=organization_id,
                    user_id=user_id,
                )
                raise ConflictError("You have already reviewed this product")

            now = utcnow()
            review = await self.review_repository.save(
                Review(
                    id=ReviewId(new_id()),
                    organization_id=organization_id,
                    user_id=user_id,
                    rating=rating,
                    title=title,
                    content=content,
                    created_at=now,
                    updated_at=now,
                )
            )
            await self.recompute_rating(organization_id)
            logfire.info("Review created", review_id=review.id)
            return review

    async def _require_own_review(self, review_id: ReviewId, user_id: UserId) -> Review:
        review = await self.review_repository.find_by_id(review_id)
        if review is None or review.user_id != user_id:
            logfire.warn(
                "Review missing or not owned", review_id=review_id, user_id=user_id
            )
            raise NotFoundError("Review", review_id, REVIEW_NOT_FOUND)
        return review

    async def update_review(
        self,
        review_id: ReviewId,
        user_id: UserId,
        rating: int | None = None,
        title: str | None = None,
        content: str | None = None,
    ) -> Review:
        """Update the caller's own review. ``None`` keeps a field unchanged.

        Raises:
            NotFoundError: If the review is missing or owned by someone else
        """
        with logfire.span(
            "review_service.update_review", review_id=review_id, user_id=user_id
        ):
            review = await self._require_own_review(review_id, user_id)

            changes = {
                key: value
                for key, value in (
                    ("rating", rating),
                    ("title", title),
                    ("content", content),
                )
                if value is not None
            }
            updated = Review.model_validate(
                {**review.model_dump(), **changes, "updated_at": utcnow()}
            )
            saved = await self.review_repository.save(updated)
            await self.recompute_rating(review.organization_id)
            logfire.info("Review updated", review_id=review_id)
            return saved

    async def delete_review(self, review_id: ReviewId, user_id: UserId) -> None:
        """Delete the caller's own review.

        Raises:
            NotFoundError: If the review is missing or owned by someone else
        """
        with logfire.span(
            "review_service.delete_review", review_id=review_id, user_id=user_id
        ):
            review = await self._require_own_review(review_id, user_id)
            await self.review_repository.delete(review_id)
            await self.recompute_rating(review.organization_id)
            logfire.info("Review deleted", review_id=review_id)

    async def list_reviews(
        self,
        organization_id: OrganizationId,
        sort: ReviewSort = ReviewSort.RECENT,
        review_filter: ReviewFilter = ReviewFilter.ALL,
        limit: int = 10,
        cursor: str | None = None,
        viewer_id: UserId | None = None,
    ) -> Page[Review]:
        """List an organization's reviews with keyset pagination.

        ``ReviewFilter.MY`` only applies when a viewer is known. An unknown
        cursor is ignored.
        """
        with logfire.span(
            "review_service.list_reviews",
            organization_id=organization_id,
            sort=sort.value,
            filter=review_filter.value,
            limit=limit,
        ):
            after = None
            if cursor:
                after = await self.review_repository.find_by_id(ReviewId(cursor))

            author = viewer_id if review_filter == ReviewFilter.MY else None
            rows = await self.review_repository.find_page(
                organization_id,
                sort,
                limit + 1,
                after=after,
                user_id=author,
            )
            items, has_more = paginate(rows, limit)
            next_cursor = items[-1].id if has_more and items else None
            return Page(items=items, next_cursor=next_cursor, has_more=has_more)

    async def count_for_organization(self, organization_id: OrganizationId) -> int:
        return await self.review_repository.count_by_organization(organization_id)

    async def average_for_organization(self, organization_id: OrganizationId) -> float:
        return await self.review_repository.average_rating(organization_id)
