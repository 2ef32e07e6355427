"""
SocialNet Backend — Post Route Handlers
=======================================

POST /posts writes into the public feed as the authenticated caller.
GET  /posts reads the public feed with authors populated.
"""

from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from socialnet.database import get_db_session
from socialnet.dependencies import get_post_service
from socialnet.schemas.common import ErrorResponse
from socialnet.schemas.post import PostCreateRequest, PostResponse, PostWithAuthor
from socialnet.security.guard import Identity, require_identity
from socialnet.services.post_service import PostService

router = APIRouter(prefix="/posts", tags=["Posts"])


@router.post(
    "",
    status_code=201,
    response_model=PostResponse,
    responses={
        400: {"description": "Invalid body or token", "model": ErrorResponse},
        401: {"description": "Missing token", "model": ErrorResponse},
    },
    summary="Create a public post",
)
async def create_post(
    body: PostCreateRequest,
    identity: Identity = Depends(require_identity),
    db: AsyncSession = Depends(get_db_session),
    posts: PostService = Depends(get_post_service),
) -> PostResponse:
    return await posts.create_post(db, identity.user_id, body)


@router.get("", response_model=List[PostWithAuthor], summary="Public feed")
async def list_posts(
    db: AsyncSession = Depends(get_db_session),
    posts: PostService = Depends(get_post_service),
) -> List[PostWithAuthor]:
    return await posts.list_feed(db)
