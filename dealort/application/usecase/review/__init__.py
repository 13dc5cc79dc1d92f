"""Review use cases."""

from .list_reviews import (
    ListReviewsInput,
    ListReviewsRequest,
    ListReviewsUseCase,
    ReviewItem,
    ReviewPage,
)
from .manage_review import (
    CreateReviewInput,
    CreateReviewRequest,
    CreateReviewUseCase,
    DeleteReviewInput,
    DeleteReviewRequest,
    DeleteReviewUseCase,
    UpdateReviewInput,
    UpdateReviewRequest,
    UpdateReviewUseCase,
)

__all__ = [
    "CreateReviewInput",
    "CreateReviewRequest",
    "CreateReviewUseCase",
    "DeleteReviewInput",
    "DeleteReviewRequest",
    "DeleteReviewUseCase",
    "ListReviewsInput",
    "ListReviewsRequest",
    "ListReviewsUseCase",
    "ReviewItem",
    "ReviewPage",
    "UpdateReviewInput",
    "UpdateReviewRequest",
    "UpdateReviewUseCase",
]
