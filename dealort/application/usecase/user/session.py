"""Session and current-user use cases."""

from pydantic import HttpUrl

from dealort.application.usecase.base import RPCModel, SuccessResponse, UserSummary
from dealort.domain.service import JWTService, UserService
from dealort.domain.value import UserId


class SessionUser(UserSummary):
    email: str


class SessionInfo(RPCModel):
    """Current session as seen by the frontend."""

    user: SessionUser


class PrivateDataResponse(RPCModel):
    message: str
    user: SessionUser


class GetSessionRequest(RPCModel):
    auth_token: str | None = None  # Session cookie (may be missing)


def session_user(user) -> SessionUser:
    return SessionUser(
        id=user.id,
        name=user.name,
        username=user.username,
        display_username=user.display_username,
        image=user.image,
        email=user.email,
    )


class GetSessionUseCase:
    """Use case resolving the session cookie into the current user.

    Missing, invalid or expired tokens and unknown users all yield None.
    """

    def __init__(self, jwt_service: JWTService, user_service: UserService) -> None:
        """Initialize get session use case.

        Args:
            jwt_service: JWT service for token verification
            user_service: User service for the user lookup
        """
        self.jwt_service = jwt_service
        self.user_service = user_service

    async def execute(self, request: GetSessionRequest) -> SessionInfo | None:
        user_id = self.jwt_service.get_user_id_from_token(request.auth_token)
        if not user_id:
            return None

        user = await self.user_service.get_user_by_id(UserId(user_id))
        if user is None:
            return None
        return SessionInfo(user=session_user(user))


class GetPrivateDataRequest(RPCModel):
    user_id: str


class GetPrivateDataUseCase:
    """Use case behind the authenticated smoke-test procedure."""

    def __init__(self, user_service: UserService) -> None:
        self.user_service = user_service

    async def execute(self, request: GetPrivateDataRequest) -> PrivateDataResponse:
        """Raises NotFoundError if the session user no longer exists."""
        user = await self.user_service.require_user(UserId(request.user_id))
        return PrivateDataResponse(message="This is private", user=session_user(user))


class UpdateUserImageInput(RPCModel):
    image: HttpUrl


class UpdateUserImageRequest(UpdateUserImageInput):
    user_id: str


class UpdateUserImageUseCase:
    """Use case for replacing the current user's avatar."""

    def __init__(self, user_service: UserService) -> None:
        self.user_service = user_service

    async def execute(self, request: UpdateUserImageRequest) -> SuccessResponse:
        await self.user_service.update_image(
            UserId(request.user_id), str(request.image)
        )
        return SuccessResponse()
