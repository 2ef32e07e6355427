"""
SocialNet Backend — Post Service
================================

What:  Creates posts for the verified caller and assembles feeds.
How:   The author is always the identity produced by the Access Guard.
       Group-scoped posts go through the MembershipChecker first.
"""

import logging
import uuid
from typing import List, Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from socialnet.exceptions import NotFoundError, ValidationError
from socialnet.models.post import Post
from socialnet.repositories.post_repository import PostRepository
from socialnet.repositories.user_repository import UserRepository
from socialnet.schemas.post import AuthorSummary, PostCreateRequest, PostResponse, PostWithAuthor
from socialnet.services.membership import MembershipChecker

logger = logging.getLogger(__name__)


def to_response(post: Post) -> PostResponse:
    return PostResponse(
        id=post.id,
        author=post.author_id,
        content=post.content,
        images=list(post.images or []),
        group=post.group_id,
        created_at=post.created_at,
    )


def to_feed_item(post: Post) -> PostWithAuthor:
    """Requires `post.author` to be loaded."""
    return PostWithAuthor(
        id=post.id,
        author=AuthorSummary(
            id=post.author.id,
            username=post.author.username,
            profile_pic=post.author.profile_pic or "",
        ),
        content=post.content,
        images=list(post.images or []),
        group=post.group_id,
        created_at=post.created_at,
    )


class PostService:

    def __init__(
        self,
        posts: PostRepository,
        users: UserRepository,
        membership: MembershipChecker,
    ):
        self.posts = posts
        self.users = users
        self.membership = membership

    async def create_post(
        self,
        db: AsyncSession,
        author_id: uuid.UUID,
        request: PostCreateRequest,
        group_id: Optional[uuid.UUID] = None,
    ) -> PostResponse:
        """
        Store a post written by `author_id`.

        With `group_id` the post is scoped to that group and the author must
        be a member of it.

        Raises:
            NotFoundError:   author or group does not exist
            ForbiddenError:  author is not a member of the group
            ValidationError: the author was deleted concurrently
        """
        # A valid token can outlive its account
        if await self.users.get_by_id(db, author_id) is None:
            raise NotFoundError(resource="user", resource_id=str(author_id), message="User not found")

        if group_id is not None:
            await self.membership.ensure_member(db, group_id, author_id)

        post = Post(
            author_id=author_id,
            content=request.content,
            images=list(request.images),
            group_id=group_id,
        )
        try:
            await self.posts.add(db, post)
        except IntegrityError as e:
            raise ValidationError(message="Author does not exist", field="author") from e

        logger.info("Post %s created by %s (group=%s)", post.id, author_id, group_id)
        return to_response(post)

    async def list_feed(self, db: AsyncSession) -> List[PostWithAuthor]:
        """The public feed: posts without a group, newest first."""
        posts = await self.posts.list_public(db)
        return [to_feed_item(post) for post in posts]

    async def list_group_feed(self, db: AsyncSession, group_id: uuid.UUID) -> List[PostWithAuthor]:
        posts = await self.posts.list_by_group(db, group_id)
        return [to_feed_item(post) for post in posts]
