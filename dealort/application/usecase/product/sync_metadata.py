"""Sync organization metadata use case."""

import logfire
from pydantic import HttpUrl

from dealort.application.usecase.base import RPCModel, SuccessResponse
from dealort.application.usecase.product.create_product import (
    release_date_from_ms,
    url_or_none,
)
from dealort.domain.service import OrganizationService
from dealort.domain.value import OrganizationId, UserId


class SyncMetadataInput(RPCModel):
    """Sync organization metadata body.

    Every field except ``organization_id`` is optional. ``release_date_ms``
    may be sent as ``null`` to clear the release date.
    """

    organization_id: str
    url: HttpUrl | None = None
    x_url: HttpUrl | None = None
    linkedin_url: HttpUrl | None = None
    source_code_url: HttpUrl | None = None
    logo: HttpUrl | None = None
    gallery: list[HttpUrl] | None = None
    release_date_ms: int | None = None


class SyncMetadataRequest(SyncMetadataInput):
    user_id: str


class SyncMetadataUseCase:
    """Use case for syncing reference links and media of an organization."""

    def __init__(self, organization_service: OrganizationService) -> None:
        """Initialize sync metadata use case.

        Args:
            organization_service: Organization domain service
        """
        self.organization_service = organization_service

    async def execute(self, request: SyncMetadataRequest) -> SuccessResponse:
        """Execute sync metadata flow.

        Raises:
            NotAuthorizedError: If the user is not an owner
        """
        provided = request.model_fields_set

        references = {
            "web_url": url_or_none(request.url),
            "x_url": url_or_none(request.x_url),
            "linkedin_url": url_or_none(request.linkedin_url),
            "source_code_url": url_or_none(request.source_code_url),
        }
        references = {k: v for k, v in references.items() if v}

        values = {}
        if request.logo is not None:
            values["logo"] = str(request.logo)
        if request.gallery is not None:
            values["gallery"] = [str(g) for g in request.gallery]
        if "release_date_ms" in provided:
            values["release_date"] = release_date_from_ms(request.release_date_ms)

        with logfire.span(
            "sync_metadata.execute", organization_id=request.organization_id
        ):
            await self.organization_service.sync_metadata(
                OrganizationId(request.organization_id),
                UserId(request.user_id),
                references,
                values,
            )
            return SuccessResponse()
