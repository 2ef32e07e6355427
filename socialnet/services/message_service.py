"""
SocialNet Backend — Message Service
===================================

What:  Direct messages. The sender is the verified caller; the receiver
       must be an existing user.
"""

import logging
import uuid
from typing import List

from sqlalchemy.ext.asyncio import AsyncSession

from socialnet.exceptions import NotFoundError
from socialnet.models.message import Message
from socialnet.repositories.message_repository import MessageRepository
from socialnet.repositories.user_repository import UserRepository
from socialnet.schemas.message import DirectMessageResponse, MessageCreateRequest

logger = logging.getLogger(__name__)


def to_response(message: Message) -> DirectMessageResponse:
    return DirectMessageResponse(
        id=message.id,
        sender=message.sender_id,
        receiver=message.receiver_id,
        content=message.content,
        sent_at=message.sent_at,
    )


class MessageService:

    def __init__(self, messages: MessageRepository, users: UserRepository):
        self.messages = messages
        self.users = users

    async def send_message(
        self,
        db: AsyncSession,
        sender_id: uuid.UUID,
        request: MessageCreateRequest,
    ) -> DirectMessageResponse:
        """
        Raises:
            NotFoundError: the sender or the receiver does not exist
        """
        if await self.users.get_by_id(db, sender_id) is None:
            raise NotFoundError(resource="user", resource_id=str(sender_id), message="User not found")

        receiver = await self.users.get_by_id(db, request.receiver)
        if receiver is None:
            raise NotFoundError(
                resource="receiver",
                resource_id=str(request.receiver),
                message="Receiver not found",
            )

        message = Message(
            sender_id=sender_id,
            receiver_id=receiver.id,
            content=request.content,
        )
        await self.messages.add(db, message)
        logger.info("Message %s sent from %s to %s", message.id, sender_id, receiver.id)
        return to_response(message)

    async def list_messages(self, db: AsyncSession, user_id: uuid.UUID) -> List[DirectMessageResponse]:
        messages = await self.messages.list_for_user(db, user_id)
        return [to_response(message) for message in messages]
