"""Review repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional

from dealort.domain.model import Review
from dealort.domain.value import OrganizationId, ReviewId, ReviewSort, UserId


class ReviewRepository(ABC):
    """Repository for Review entity."""

    @abstractmethod
    async def find_by_id(self, review_id: ReviewId) -> Optional[Review]:
        """Find a review by ID.

        Args:
            review_id: The review's unique identifier

        Returns:
            The review if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_user_and_organization(
        self, user_id: UserId, organization_id: OrganizationId
    ) -> Optional[Review]:
        """Find the review a user left on an organization.

        Returns:
            The review if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_page(
        self,
        organization_id: OrganizationId,
        sort: ReviewSort,
        limit: int,
        after: Optional[Review] = None,
        user_id: Optional[UserId] = None,
    ) -> List[Review]:
        """Find one page of reviews in keyset order.

        Ordering is ``created_at`` descending for RECENT, and rating
        (descending for TOP_RATING, ascending for LOWEST_RATING) then
        ``created_at`` descending otherwise.

        Args:
            organization_id: Organization to list reviews for
            sort: Sort order
            limit: Maximum rows to return
            after: Last review of the previous page, if any
            user_id: Restrict to this author, if given

        Returns:
            Reviews strictly after ``after`` in the chosen order
        """
        pass

    @abstractmethod
    async def save(self, review: Review) -> Review:
        """Save a review (create or update)."""
        pass

    @abstractmethod
    async def delete(self, review_id: ReviewId) -> None:
        """Delete a review."""
        pass

    @abstractmethod
    async def average_rating(self, organization_id: OrganizationId) -> float:
        """Average rating of an organization's reviews, 0.0 if none."""
        pass

    @abstractmethod
    async def count_by_organization(self, organization_id: OrganizationId) -> int:
        pass

    @abstractmethod
    async def count_in_window(
        self,
        organization_ids: List[OrganizationId],
        start: datetime,
        end: datetime,
    ) -> int:
        """Count reviews created in ``[start, end)`` across organizations."""
        pass
