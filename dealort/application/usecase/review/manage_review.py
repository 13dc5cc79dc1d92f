"""Create, update and delete review use cases."""

import logfire
from pydantic import Field

from dealort.application.usecase.base import CreatedResponse, RPCModel, SuccessResponse
from dealort.domain.service import ReviewService
from dealort.domain.value import OrganizationId, ReviewId, UserId


class CreateReviewInput(RPCModel):
    organization_id: str
    rating: int = Field(ge=1, le=5)
    title: str | None = Field(default=None, max_length=200)
    content: str = Field(min_length=1, max_length=10000)


class CreateReviewRequest(CreateReviewInput):
    user_id: str


class UpdateReviewInput(RPCModel):
    id: str
    rating: int | None = Field(default=None, ge=1, le=5)
    title: str | None = Field(default=None, max_length=200)
    content: str | None = Field(default=None, min_length=1, max_length=10000)


class UpdateReviewRequest(UpdateReviewInput):
    user_id: str


class DeleteReviewInput(RPCModel):
    id: str


class DeleteReviewRequest(DeleteReviewInput):
    user_id: str


class CreateReviewUseCase:
    """Use case for reviewing a product."""

    def __init__(self, review_service: ReviewService) -> None:
        """Initialize create review use case.

        Args:
            review_service: Review domain service
        """
        self.review_service = review_service

    async def execute(self, request: CreateReviewRequest) -> CreatedResponse:
        """Execute create review flow.

        Raises:
            NotFoundError: If the organization does not exist
            ConflictError: If the user already reviewed the organization
        """
        with logfire.span(
            "create_review.execute", organization_id=request.organization_id
        ):
            review = await self.review_service.create_review(
                organization_id=OrganizationId(request.organization_id),
                user_id=UserId(request.user_id),
                rating=request.rating,
                content=request.content,
                title=request.title,
            )
            return CreatedResponse(id=review.id)


class UpdateReviewUseCase:
    """Use case for editing one's own review."""

    def __init__(self, review_service: ReviewService) -> None:
        self.review_service = review_service

    async def execute(self, request: UpdateReviewRequest) -> SuccessResponse:
        await self.review_service.update_review(
            ReviewId(request.id),
            UserId(request.user_id),
            rating=request.rating,
            title=request.title,
            content=request.content,
        )
        return SuccessResponse()


class DeleteReviewUseCase:
    """Use case for deleting one's own review."""

    def __init__(self, review_service: ReviewService) -> None:
        self.review_service = review_service

    async def execute(self, request: DeleteReviewRequest) -> SuccessResponse:
        await self.review_service.delete_review(
            ReviewId(request.id), UserId(request.user_id)
        )
        return SuccessResponse()
