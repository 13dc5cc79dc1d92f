"""In-memory review repository for testing."""

from datetime import datetime
from typing import List, Optional

from dealort.domain.model import Review
from dealort.domain.repository import ReviewRepository
from dealort.domain.value import OrganizationId, ReviewId, ReviewSort, UserId


def _sort_key(sort: ReviewSort):
    if sort == ReviewSort.TOP_RATING:
        return lambda r: (-r.rating, -r.created_at.timestamp())
    if sort == ReviewSort.LOWEST_RATING:
        return lambda r: (r.rating, -r.created_at.timestamp())
    return lambda r: -r.created_at.timestamp()


class InMemoryReviewRepository(ReviewRepository):
    """In-memory implementation of ReviewRepository for testing."""

    def __init__(self) -> None:
        self._reviews: dict[ReviewId, Review] = {}

    async def find_by_id(self, review_id: ReviewId) -> Optional[Review]:
        return self._reviews.get(review_id)

    async def find_by_user_and_organization(
        self, user_id: UserId, organization_id: OrganizationId
    ) -> Optional[Review]:
        for review in self._reviews.values():
            if review.user_id == user_id and review.organization_id == organization_id:
                return review
        return None

    async def find_page(
        self,
        organization_id: OrganizationId,
        sort: ReviewSort,
        limit: int,
        after: Optional[Review] = None,
        user_id: Optional[UserId] = None,
    ) -> List[Review]:
        reviews = [
            r for r in self._reviews.values() if r.organization_id == organization_id
        ]
        if user_id is not None:
            reviews = [r for r in reviews if r.user_id == user_id]

        key = _sort_key(sort)
        reviews.sort(key=key)
        if after is not None:
            reviews = [r for r in reviews if key(r) > key(after)]
        return reviews[:limit]

    async def save(self, review: Review) -> Review:
        self._reviews[review.id] = review
        return review

    async def delete(self, review_id: ReviewId) -> None:
        self._reviews.pop(review_id, None)

    async def average_rating(self, organization_id: OrganizationId) -> float:
        ratings = [
            r.rating
            for r in self._reviews.values()
            if r.organization_id == organization_id
        ]
        return sum(ratings) / len(ratings) if ratings else 0.0

    async def count_by_organization(self, organization_id: OrganizationId) -> int:
        return sum(
            1 for r in self._reviews.values() if r.organization_id == organization_id
        )

    async def count_in_window(
        self,
        organization_ids: List[OrganizationId],
        start: datetime,
        end: datetime,
    ) -> int:
        return sum(
            1
            for r in self._reviews.values()
            if r.organization_id in organization_ids and start <= r.created_at < end
        )
