"""List reviews use case."""

from datetime import datetime

import logfire
from pydantic import Field

from dealort.application.usecase.base import RPCModel, UserSummary
from dealort.domain.service import ReviewService, UserService
from dealort.domain.value import OrganizationId, ReviewFilter, ReviewSort, UserId


class ReviewItem(RPCModel):
    """Review with its author."""

    id: str
    organization_id: str
    user_id: str
    rating: int
    title: str | None
    content: str
    created_at: datetime
    updated_at: datetime
    user: UserSummary | None


class ReviewPage(RPCModel):
    items: list[ReviewItem]
    next_cursor: str | None
    has_more: bool


class ListReviewsInput(RPCModel):
    organization_id: str
    cursor: str | None = None
    limit: int = Field(default=10, ge=1, le=50)
    filter: ReviewFilter = ReviewFilter.ALL
    sort_by: ReviewSort = ReviewSort.RECENT


class ListReviewsRequest(ListReviewsInput):
    viewer_id: str | None = None  # Current user ID (if authenticated)


class ListReviewsUseCase:
    """Use case for listing an organization's reviews."""

    def __init__(self, review_service: ReviewService, user_service: UserService) -> None:
        """Initialize list reviews use case.

        Args:
            review_service: Review domain service
            user_service: User service for author lookups
        """
        self.review_service = review_service
        self.user_service = user_service

    async def execute(self, request: ListReviewsRequest) -> ReviewPage:
        """Execute list reviews flow.

        The ``my`` filter is ignored for anonymous viewers.
        """
        with logfire.span(
            "list_reviews.execute",
            organization_id=request.organization_id,
            sort=request.sort_by.value,
            filter=request.filter.value,
        ):
            page = await self.review_service.list_reviews(
                OrganizationId(request.organization_id),
                sort=request.sort_by,
                review_filter=request.filter if request.viewer_id else ReviewFilter.ALL,
                limit=request.limit,
                cursor=request.cursor,
                viewer_id=UserId(request.viewer_id) if request.viewer_id else None,
            )

            items = []
            for review in page.items:
                author = await self.user_service.get_user_by_id(review.user_id)
                items.append(
                    ReviewItem(
                        id=review.id,
                        organization_id=review.organization_id,
                        user_id=review.user_id,
                        rating=review.rating,
                        title=review.title,
                        content=review.content,
                        created_at=review.created_at,
                        updated_at=review.updated_at,
                        user=UserSummary.from_user(author),
                    )
                )

            return ReviewPage(
                items=items, next_cursor=page.next_cursor, has_more=page.has_more
            )
