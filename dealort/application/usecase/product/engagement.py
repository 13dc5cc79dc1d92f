"""Follow and like use cases."""

from dealort.application.usecase.base import RPCModel
from dealort.domain.service import EngagementService
from dealort.domain.value import ImpressionType, OrganizationId, UserId


class FollowInput(RPCModel):
    organization_id: str


class FollowRequest(FollowInput):
    user_id: str


class FollowResponse(RPCModel):
    following: bool


class ToggleImpressionInput(RPCModel):
    organization_id: str
    type: ImpressionType = ImpressionType.LIKE


class ToggleImpressionRequest(ToggleImpressionInput):
    user_id: str


class ToggleImpressionResponse(RPCModel):
    liked: bool


class FollowProductUseCase:
    """Use case for following an organization."""

    def __init__(self, engagement_service: EngagementService) -> None:
        self.engagement_service = engagement_service

    async def execute(self, request: FollowRequest) -> FollowResponse:
        following = await self.engagement_service.follow(
            OrganizationId(request.organization_id), UserId(request.user_id)
        )
        return FollowResponse(following=following)


class UnfollowProductUseCase:
    """Use case for unfollowing an organization."""

    def __init__(self, engagement_service: EngagementService) -> None:
        self.engagement_service = engagement_service

    async def execute(self, request: FollowRequest) -> FollowResponse:
        following = await self.engagement_service.unfollow(
            OrganizationId(request.organization_id), UserId(request.user_id)
        )
        return FollowResponse(following=following)


class ToggleImpressionUseCase:
    """Use case for liking or unliking an organization."""

    def __init__(self, engagement_service: EngagementService) -> None:
        self.engagement_service = engagement_service

    async def execute(
        self, request: ToggleImpressionRequest
    ) -> ToggleImpressionResponse:
        liked = await self.engagement_service.toggle_impression(
            OrganizationId(request.organization_id),
            UserId(request.user_id),
            request.type,
        )
        return ToggleImpressionResponse(liked=liked)
