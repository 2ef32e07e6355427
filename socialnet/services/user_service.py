"""
SocialNet Backend — User Service
================================

What:  Registration, login and public profiles.
Who:   Called by the /users routes.

Registration Flow:
    validate body → reject taken username/email → hash (thread pool)
    → insert → flush (unique indexes checked here) → acknowledgement

Login Flow:
    find by email (404 if absent) → verify hash (thread pool, 400 on
    mismatch) → issue token → profile + token

Password hashes and plaintexts never appear in a return value.
"""

import logging
import uuid
from typing import List

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from starlette.concurrency import run_in_threadpool

from socialnet.exceptions import InvalidCredentialError, NotFoundError, ValidationError
from socialnet.models.user import User
from socialnet.repositories.user_repository import UserRepository
from socialnet.schemas.common import MessageResponse
from socialnet.schemas.user import LoginRequest, LoginResponse, RegisterRequest, UserPublic
from socialnet.security.passwords import CredentialManager
from socialnet.security.tokens import TokenService

logger = logging.getLogger(__name__)


def to_public(user: User) -> UserPublic:
    return UserPublic(
        id=user.id,
        username=user.username,
        email=user.email,
        profile_pic=user.profile_pic or "",
    )


class UserService:
    """
    Account operations.

    Attributes:
        users:       UserRepository
        credentials: CredentialManager used for hashing and verification
        tokens:      TokenService used to issue login tokens
    """

    def __init__(
        self,
        users: UserRepository,
        credentials: CredentialManager,
        tokens: TokenService,
    ):
        self.users = users
        self.credentials = credentials
        self.tokens = tokens

    async def register(self, db: AsyncSession, request: RegisterRequest) -> MessageResponse:
        """
        Create an account.

        Raises:
            ValidationError: username or email already registered
            InternalError:   hashing failed
        """
        # Unique indexes stay authoritative under concurrent registration
        existing = await self.users.get_by_email(db, request.email)
        if existing is not None:
            raise ValidationError(message="Email already registered", field="email")
        if await self.users.get_by_username(db, request.username) is not None:
            raise ValidationError(message="Username already taken", field="username")

        password_hash = await run_in_threadpool(self.credentials.hash, request.password)
        user = User(
            username=request.username,
            email=request.email,
            password_hash=password_hash,
            profile_pic="",
        )
        try:
            await self.users.add(db, user)
        except IntegrityError as e:
            logger.info("Registration rejected by unique index: %s", type(e.orig).__name__)
            raise ValidationError(
                message="Username or email already registered",
                context={"username": request.username},
            ) from e

        logger.info("Registered user %s (%s)", user.id, user.username)
        return MessageResponse(message="User registered successfully")

    async def login(self, db: AsyncSession, request: LoginRequest) -> LoginResponse:
        """
        Exchange email + password for an identity token.

        Raises:
            NotFoundError:          no account with that email
            InvalidCredentialError: wrong password
        """
        user = await self.users.get_by_email(db, request.email)
        if user is None:
            raise NotFoundError(resource="user", message="User not found")

        valid = await run_in_threadpool(
            self.credentials.verify, user.password_hash, request.password
        )
        if not valid:
            logger.info("Failed login for user %s", user.id)
            raise InvalidCredentialError()

        if self.credentials.needs_rehash(user.password_hash):
            user.password_hash = await run_in_threadpool(self.credentials.hash, request.password)
            await db.flush()
            logger.info("Rehashed password for user %s with current parameters", user.id)

        token = self.tokens.issue(user.id)
        public = to_public(user)
        return LoginResponse(**public.model_dump(), token=token)

    async def list_users(self, db: AsyncSession) -> List[UserPublic]:
        users = await self.users.list_all(db)
        return [to_public(user) for user in users]

    async def get_profile(self, db: AsyncSession, user_id: uuid.UUID) -> UserPublic:
        """
        Public profile of `user_id`.

        Raises:
            NotFoundError: the token is valid but the account no longer exists
        """
        user = await self.users.get_by_id(db, user_id)
        if user is None:
            raise NotFoundError(resource="user", resource_id=str(user_id), message="User not found")
        return to_public(user)
