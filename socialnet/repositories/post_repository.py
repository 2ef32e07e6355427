"""Post data access. Feed queries always load the author in the same round trip."""

import uuid
from typing import List

from sqlalchemy import desc, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from socialnet.models.post import Post


class PostRepository:

    async def add(self, db: AsyncSession, post: Post) -> Post:
        db.add(post)
        await db.flush()
        return post

    async def list_public(self, db: AsyncSession) -> List[Post]:
        """Posts outside any group, newest first, authors loaded."""
        query = (
            select(Post)
            .where(Post.group_id.is_(None))
            .options(selectinload(Post.author))
            .order_by(desc(Post.created_at))
        )
        result = await db.execute(query)
        return list(result.scalars().all())

    async def list_by_group(self, db: AsyncSession, group_id: uuid.UUID) -> List[Post]:
        """Posts scoped to `group_id`, newest first, authors loaded."""
        query = (
            select(Post)
            .where(Post.group_id == group_id)
            .options(selectinload(Post.author))
            .order_by(desc(Post.created_at))
        )
        result = await db.execute(query)
        return list(result.scalars().all())
