"""SocialNet Backend — Home route."""

from fastapi import APIRouter

from socialnet.schemas.common import MessageResponse

router = APIRouter(tags=["Home"])


@router.get("/", response_model=MessageResponse, summary="Welcome message")
async def home() -> MessageResponse:
    return MessageResponse(message="Welcome to the Social Media API")
