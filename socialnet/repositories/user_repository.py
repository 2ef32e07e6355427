"""User data access."""

import uuid
from typing import Iterable, List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from socialnet.models.user import User


class UserRepository:

    async def get_by_id(self, db: AsyncSession, user_id: uuid.UUID) -> Optional[User]:
        return await db.get(User, user_id)

    async def get_by_email(self, db: AsyncSession, email: str) -> Optional[User]:
        result = await db.execute(select(User).where(User.email == email))
        return result.scalar_one_or_none()

    async def get_by_username(self, db: AsyncSession, username: str) -> Optional[User]:
        result = await db.execute(select(User).where(User.username == username))
        return result.scalar_one_or_none()

    async def get_many(self, db: AsyncSession, user_ids: Iterable[uuid.UUID]) -> List[User]:
        """Fetch every user in `user_ids`; unknown ids are simply absent from the result."""
        ids = list(user_ids)
        if not ids:
            return []
        result = await db.execute(select(User).where(User.id.in_(ids)))
        return list(result.scalars().all())

    async def list_all(self, db: AsyncSession) -> List[User]:
        result = await db.execute(select(User).order_by(User.username))
        return list(result.scalars().all())

    async def add(self, db: AsyncSession, user: User) -> User:
        """
        Stage and flush a new user.

        Raises:
            sqlalchemy.exc.IntegrityError: username or email already taken
        """
        db.add(user)
        await db.flush()
        return user
