"""
SocialNet Backend — Membership Checker
======================================

What:  Precondition gate for writing into a group.
How:   Looks the group up, then checks the association table for the
       caller. Reads only; the checker never changes membership.

Outcomes:
    group missing     → NotFoundError  (404)
    caller not member → ForbiddenError (403)
    otherwise         → the Group row
"""

import logging
import uuid

from sqlalchemy.ext.asyncio import AsyncSession

from socialnet.exceptions import ForbiddenError, NotFoundError
from socialnet.models.group import Group
from socialnet.repositories.group_repository import GroupRepository

logger = logging.getLogger(__name__)


class MembershipChecker:

    def __init__(self, groups: GroupRepository):
        self.groups = groups

    async def ensure_group(self, db: AsyncSession, group_id: uuid.UUID) -> Group:
        group = await self.groups.get(db, group_id)
        if group is None:
            raise NotFoundError(resource="group", resource_id=str(group_id))
        return group

    async def ensure_member(
        self,
        db: AsyncSession,
        group_id: uuid.UUID,
        user_id: uuid.UUID,
    ) -> Group:
        """
        Return the group if `user_id` belongs to it.

        Raises:
            NotFoundError:  no group with `group_id`
            ForbiddenError: the group exists but `user_id` is not a member
        """
        group = await self.ensure_group(db, group_id)
        if not await self.groups.is_member(db, group_id, user_id):
            logger.info("User %s refused write access to group %s", user_id, group_id)
            raise ForbiddenError(context={"group_id": str(group_id), "user_id": str(user_id)})
        return group
