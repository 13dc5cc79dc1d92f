"""Session cookie helpers for route handlers."""

from dealort.domain.error import UnauthenticatedError
from dealort.domain.service import JWTService
from dealort.domain.value import UserId


def optional_user_id(jwt_service: JWTService, auth_token: str | None) -> UserId | None:
    """Resolve the session user, or None for anonymous callers."""
    user_id = jwt_service.get_user_id_from_token(auth_token)
    return UserId(user_id) if user_id else None


def require_user_id(jwt_service: JWTService, auth_token: str | None) -> UserId:
    """Resolve the session user.

    Raises:
        UnauthenticatedError: If the cookie is missing, invalid or expired
    """
    user_id = optional_user_id(jwt_service, auth_token)
    if user_id is None:
        raise UnauthenticatedError()
    return user_id
