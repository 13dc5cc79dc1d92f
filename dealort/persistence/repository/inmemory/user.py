"""In-memory user repository for testing."""

from typing import Optional

from dealort.domain.model import User
from dealort.domain.model.common import utcnow
from dealort.domain.repository import UserRepository
from dealort.domain.value import UserId


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self) -> None:
        self._users: dict[UserId, User] = {}

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        return self._users.get(user_id)

    async def save(self, user: User) -> User:
        self._users[user.id] = user
        return user

    async def update_image(self, user_id: UserId, image: str) -> Optional[User]:
        user = self._users.get(user_id)
        if user is None:
            return None
        updated = user.model_copy(update={"image": image, "updated_at": utcnow()})
        self._users[user_id] = updated
        return updated
