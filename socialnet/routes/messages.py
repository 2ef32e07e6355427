"""
SocialNet Backend — Message Route Handlers
==========================================

POST /messages sends a direct message from the caller.
GET  /messages lists what the caller sent and received.
"""

from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from socialnet.database import get_db_session
from socialnet.dependencies import get_message_service
from socialnet.schemas.common import ErrorResponse
from socialnet.schemas.message import DirectMessageResponse, MessageCreateRequest
from socialnet.security.guard import Identity, require_identity
from socialnet.services.message_service import MessageService

router = APIRouter(prefix="/messages", tags=["Messages"])


@router.post(
    "",
    status_code=201,
    response_model=DirectMessageResponse,
    responses={
        400: {"description": "Invalid body or token", "model": ErrorResponse},
        401: {"description": "Missing token", "model": ErrorResponse},
        404: {"description": "Unknown receiver", "model": ErrorResponse},
    },
    summary="Send a direct message",
)
async def send_message(
    body: MessageCreateRequest,
    identity: Identity = Depends(require_identity),
    db: AsyncSession = Depends(get_db_session),
    messages: MessageService = Depends(get_message_service),
) -> DirectMessageResponse:
    return await messages.send_message(db, identity.user_id, body)


@router.get("", response_model=List[DirectMessageResponse], summary="Caller's messages")
async def list_messages(
    identity: Identity = Depends(require_identity),
    db: AsyncSession = Depends(get_db_session),
    messages: MessageService = Depends(get_message_service),
) -> List[DirectMessageResponse]:
    return await messages.list_messages(db, identity.user_id)
