"""
SocialNet Backend — Group Service
=================================

What:  Group creation and group-scoped posting.

Membership policy:
    The creator is always a member. Extra member ids from the request must
    name existing users; repeats (including the creator's own id) collapse
    to one membership.
"""

import logging
import uuid
from typing import List

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from socialnet.exceptions import NotFoundError, ValidationError
from socialnet.models.group import Group
from socialnet.repositories.group_repository import GroupRepository
from socialnet.repositories.user_repository import UserRepository
from socialnet.schemas.group import GroupCreateRequest, GroupResponse
from socialnet.schemas.post import PostCreateRequest, PostResponse, PostWithAuthor
from socialnet.services.membership import MembershipChecker
from socialnet.services.post_service import PostService

logger = logging.getLogger(__name__)


class GroupService:

    def __init__(
        self,
        groups: GroupRepository,
        users: UserRepository,
        posts: PostService,
        membership: MembershipChecker,
    ):
        self.groups = groups
        self.users = users
        self.posts = posts
        self.membership = membership

    async def create_group(
        self,
        db: AsyncSession,
        creator_id: uuid.UUID,
        request: GroupCreateRequest,
    ) -> GroupResponse:
        """
        Create a group owned by `creator_id`.

        Raises:
            NotFoundError: a requested member id (or the creator) does not exist
        """
        # Creator first, then requested members in request order, no repeats
        member_ids = list(dict.fromkeys([creator_id, *request.members]))
        users = await self.users.get_many(db, member_ids)
        found = {user.id: user for user in users}
        missing = [str(mid) for mid in member_ids if mid not in found]
        if missing:
            raise NotFoundError(
                resource="user",
                message=f"User not found: {', '.join(missing)}",
                context={"missing": missing},
            )

        group = Group(
            name=request.name,
            description=request.description,
            members=[found[mid] for mid in member_ids],
        )
        try:
            await self.groups.add(db, group)
        except IntegrityError as e:
            raise ValidationError(message="Group could not be created") from e

        logger.info("Group %s created by %s with %d members", group.id, creator_id, len(member_ids))
        return GroupResponse(
            id=group.id,
            name=group.name,
            description=group.description,
            members=member_ids,
            created_at=group.created_at,
        )

    async def list_group_posts(self, db: AsyncSession, group_id: uuid.UUID) -> List[PostWithAuthor]:
        """
        Posts scoped to `group_id`, newest first.

        Raises:
            NotFoundError: no such group
        """
        await self.membership.ensure_group(db, group_id)
        return await self.posts.list_group_feed(db, group_id)

    async def create_group_post(
        self,
        db: AsyncSession,
        group_id: uuid.UUID,
        author_id: uuid.UUID,
        request: PostCreateRequest,
    ) -> PostResponse:
        """Post into a group; PostService enforces membership."""
        return await self.posts.create_post(db, author_id, request, group_id=group_id)
