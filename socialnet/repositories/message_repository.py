"""Direct message data access."""

import uuid
from typing import List

from sqlalchemy import desc, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from socialnet.models.message import Message


class MessageRepository:

    async def add(self, db: AsyncSession, message: Message) -> Message:
        db.add(message)
        await db.flush()
        return message

    async def list_for_user(self, db: AsyncSession, user_id: uuid.UUID) -> List[Message]:
        """Messages the user sent or received, newest first."""
        query = (
            select(Message)
            .where(or_(Message.sender_id == user_id, Message.receiver_id == user_id))
            .order_by(desc(Message.sent_at))
        )
        result = await db.execute(query)
        return list(result.scalars().all())
