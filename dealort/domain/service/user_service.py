"""User domain service."""

import logfire

from dealort.domain.error import NotFoundError
from dealort.domain.model import User
from dealort.domain.repository import UserRepository
from dealort.domain.value import UserId

from .base import Service


class UserService(Service):
    """Domain service for user operations."""

    def __init__(self, user_repository: UserRepository) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
        """
        self.user_repository = user_repository

    async def get_user_by_id(self, user_id: UserId) -> User | None:
        """Get a user by ID.

        Args:
            user_id: User ID

        Returns:
            User if found, None otherwise
        """
        return await self.user_repository.find_by_id(user_id)

    async def require_user(self, user_id: UserId) -> User:
        """Get a user by ID or raise.

        Raises:
            NotFoundError: If the user does not exist
        """
        user = await self.user_repository.find_by_id(user_id)
        if user is None:
            raise NotFoundError("User", user_id)
        return user

    async def update_image(self, user_id: UserId, image: str) -> User:
        """Replace a user's avatar.

        Args:
            user_id: User ID
            image: Image URL

        Returns:
            Updated user

        Raises:
            NotFoundError: If the user does not exist
        """
        with logfire.span("user_service.update_image", user_id=user_id):
            updated = await self.user_repository.update_image(user_id, image)
            if updated is None:
                logfire.warn("User not found for image update", user_id=user_id)
                raise NotFoundError("User", user_id)
            logfire.info("User image updated", user_id=user_id)
            return updated
