"""PostgreSQL implementation of User repository."""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from dealort.domain.model import User
from dealort.domain.model.common import utcnow
from dealort.domain.repository import UserRepository
from dealort.domain.value import UserId
from dealort.persistence.mappers import row_to_user, user_to_dict
from dealort.persistence.tables import users_table


class PostgresUserRepository(UserRepository):
    """PostgreSQL implementation of UserRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: User ID to look up

        Returns:
            User if found, None otherwise
        """
        stmt = select(users_table).where(users_table.c.id == user_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def save(self, user: User) -> User:
        """Insert a user, or overwrite the existing row with the same ID."""
        values = user_to_dict(user)
        stmt = insert(users_table).values(**values)
        stmt = stmt.on_conflict_do_update(
            index_elements=[users_table.c.id],
            set_={k: v for k, v in values.items() if k != "id"},
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return user

    async def update_image(self, user_id: UserId, image: str) -> Optional[User]:
        """Set the user's profile image.

        Args:
            user_id: User ID
            image: New image URL

        Returns:
            Updated user, None if the user does not exist
        """
        stmt = (
            users_table.update()
            .where(users_table.c.id == user_id)
            .values(image=image, updated_at=utcnow())
            .returning(users_table)
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        await self.session.flush()
        return row_to_user(dict(row)) if row else None
