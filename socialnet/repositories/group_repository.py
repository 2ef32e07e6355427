"""Group and membership data access."""

import uuid
from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from socialnet.models.group import Group, group_members


class GroupRepository:

    async def get(self, db: AsyncSession, group_id: uuid.UUID) -> Optional[Group]:
        """Fetch a group without its members."""
        return await db.get(Group, group_id)

    async def is_member(self, db: AsyncSession, group_id: uuid.UUID, user_id: uuid.UUID) -> bool:
        """Single-row lookup in the association table; does not load the member list."""
        result = await db.execute(
            select(group_members.c.user_id).where(
                group_members.c.group_id == group_id,
                group_members.c.user_id == user_id,
            )
        )
        return result.first() is not None

    async def add(self, db: AsyncSession, group: Group) -> Group:
        db.add(group)
        await db.flush()
        return group
