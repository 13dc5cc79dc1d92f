"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from dealort.domain.model.user import User
from dealort.domain.value import UserId


class UserRepository(ABC):
    """Repository for User entity.

    Users are owned by the auth service; this contract covers the reads and
    the single profile write this API performs.
    """

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: The user's unique identifier

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Save a user (create or update).

        Args:
            user: The user to save

        Returns:
            The saved user
        """
        pass

    @abstractmethod
    async def update_image(self, user_id: UserId, image: str) -> Optional[User]:
        """Replace a user's avatar and touch ``updated_at``.

        Args:
            user_id: The user's ID
            image: Image URL

        Returns:
            The updated user, None if the user does not exist
        """
        pass
