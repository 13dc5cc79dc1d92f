"""Update product use case."""

import logfire
from pydantic import Field

from dealort.application.usecase.base import RPCModel, SuccessResponse
from dealort.domain.service import OrganizationService
from dealort.domain.value import OrganizationId, UserId

UPDATABLE_FIELDS = (
    "name",
    "tagline",
    "description",
    "category",
    "is_listed",
    "is_dev",
    "is_open_source",
)


class UpdateProductInput(RPCModel):
    """Update product body. Omitted fields are left unchanged."""

    organization_id: str
    name: str | None = Field(default=None, min_length=1, max_length=200)
    tagline: str | None = Field(default=None, max_length=300)
    description: str | None = None
    category: list[str] | None = None
    is_listed: bool | None = None
    is_dev: bool | None = None
    is_open_source: bool | None = None


class UpdateProductRequest(UpdateProductInput):
    user_id: str


class UpdateProductUseCase:
    """Use case for a partial update by an owner."""

    def __init__(self, organization_service: OrganizationService) -> None:
        self.organization_service = organization_service

    async def execute(self, request: UpdateProductRequest) -> SuccessResponse:
        """Execute update product flow.

        Only fields present in the request body are written, so an explicit
        ``null`` clears a nullable column.

        Raises:
            NotFoundError: If the organization does not exist
            NotAuthorizedError: If the user is not an owner
        """
        values = {
            field: getattr(request, field)
            for field in UPDATABLE_FIELDS
            if field in request.model_fields_set
        }
        # Non-nullable columns cannot be cleared
        for field in ("name", "category", "is_listed", "is_dev", "is_open_source"):
            if values.get(field, ...) is None:
                values.pop(field)

        with logfire.span(
            "update_product.execute",
            organization_id=request.organization_id,
            fields=sorted(values),
        ):
            await self.organization_service.update_organization(
                OrganizationId(request.organization_id),
                UserId(request.user_id),
                values,
            )
            return SuccessResponse()
