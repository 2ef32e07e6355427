"""
SocialNet Backend — Group Route Handlers
========================================

What:  Group creation and group feeds.

Status codes:
    POST /groups                    201 | 400 | 401 | 404 unknown member
    GET  /groups/{group_id}/posts    200 | 404 unknown group
    POST /groups/{group_id}/posts    201 | 400 | 401 | 403 non-member | 404 unknown group
"""

import uuid
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from socialnet.database import get_db_session
from socialnet.dependencies import get_group_service
from socialnet.schemas.common import ErrorResponse
from socialnet.schemas.group import GroupCreateRequest, GroupResponse
from socialnet.schemas.post import PostCreateRequest, PostResponse, PostWithAuthor
from socialnet.security.guard import Identity, require_identity
from socialnet.services.group_service import GroupService

router = APIRouter(prefix="/groups", tags=["Groups"])

_AUTH_ERRORS = {
    400: {"description": "Invalid body or token", "model": ErrorResponse},
    401: {"description": "Missing token", "model": ErrorResponse},
}


@router.post(
    "",
    status_code=201,
    response_model=GroupResponse,
    responses={**_AUTH_ERRORS, 404: {"description": "Unknown member", "model": ErrorResponse}},
    summary="Create a group (the caller becomes a member)",
)
async def create_group(
    body: GroupCreateRequest,
    identity: Identity = Depends(require_identity),
    db: AsyncSession = Depends(get_db_session),
    groups: GroupService = Depends(get_group_service),
) -> GroupResponse:
    return await groups.create_group(db, identity.user_id, body)


@router.get(
    "/{group_id}/posts",
    response_model=List[PostWithAuthor],
    responses={404: {"description": "Unknown group", "model": ErrorResponse}},
    summary="Posts in a group",
)
async def list_group_posts(
    group_id: uuid.UUID,
    db: AsyncSession = Depends(get_db_session),
    groups: GroupService = Depends(get_group_service),
) -> List[PostWithAuthor]:
    return await groups.list_group_posts(db, group_id)


@router.post(
    "/{group_id}/posts",
    status_code=201,
    response_model=PostResponse,
    responses={
        **_AUTH_ERRORS,
        403: {"description": "Caller is not a member", "model": ErrorResponse},
        404: {"description": "Unknown group", "model": ErrorResponse},
    },
    summary="Post into a group (members only)",
)
async def create_group_post(
    body: PostCreateRequest,
    group_id: uuid.UUID,
    identity: Identity = Depends(require_identity),
    db: AsyncSession = Depends(get_db_session),
    groups: GroupService = Depends(get_group_service),
) -> PostResponse:
    return await groups.create_group_post(db, group_id, identity.user_id, body)
