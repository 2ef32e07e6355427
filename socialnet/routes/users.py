"""
SocialNet Backend — User Route Handlers
=======================================

What:  Registration, login and profile listing.

Status codes:
    POST /users/register  201 | 400 duplicate or invalid body
    POST /users/login     200 | 404 unknown email | 400 wrong password
    GET  /users           200 (password hashes never included)
    GET  /users/me        200 | 401 no token | 400 invalid token
"""

import logging
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from socialnet.database import get_db_session
from socialnet.dependencies import get_user_service
from socialnet.schemas.common import ErrorResponse, MessageResponse
from socialnet.schemas.user import LoginRequest, LoginResponse, RegisterRequest, UserPublic
from socialnet.security.guard import Identity, require_identity
from socialnet.services.user_service import UserService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/users", tags=["Users"])


@router.post(
    "/register",
    status_code=201,
    response_model=MessageResponse,
    responses={400: {"description": "Duplicate or invalid input", "model": ErrorResponse}},
    summary="Register a new user",
)
async def register(
    body: RegisterRequest,
    db: AsyncSession = Depends(get_db_session),
    users: UserService = Depends(get_user_service),
) -> MessageResponse:
    return await users.register(db, body)


@router.post(
    "/login",
    response_model=LoginResponse,
    responses={
        400: {"description": "Invalid password", "model": ErrorResponse},
        404: {"description": "Unknown email", "model": ErrorResponse},
    },
    summary="Log in and receive an identity token",
)
async def login(
    body: LoginRequest,
    db: AsyncSession = Depends(get_db_session),
    users: UserService = Depends(get_user_service),
) -> LoginResponse:
    return await users.login(db, body)


@router.get("", response_model=List[UserPublic], summary="List users")
async def list_users(
    db: AsyncSession = Depends(get_db_session),
    users: UserService = Depends(get_user_service),
) -> List[UserPublic]:
    return await users.list_users(db)


@router.get(
    "/me",
    response_model=UserPublic,
    responses={
        400: {"description": "Invalid token", "model": ErrorResponse},
        401: {"description": "Missing token", "model": ErrorResponse},
    },
    summary="Profile of the authenticated caller",
)
async def read_me(
    identity: Identity = Depends(require_identity),
    db: AsyncSession = Depends(get_db_session),
    users: UserService = Depends(get_user_service),
) -> UserPublic:
    return await users.get_profile(db, identity.user_id)
