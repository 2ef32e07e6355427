"""
SocialNet Backend — Repositories
================================

What:  Data-access objects, one per aggregate (users, posts, groups, messages).
How:   Repositories are stateless. They are constructed once in
       `create_app()` and every method receives the request's AsyncSession,
       so a repository never outlives or shares a transaction.
Who:   Called by services; never by routes directly.

Repositories only `flush()`. Committing is owned by `get_db_session`.
"""

from dataclasses import dataclass

from socialnet.repositories.group_repository import GroupRepository
from socialnet.repositories.message_repository import MessageRepository
from socialnet.repositories.post_repository import PostRepository
from socialnet.repositories.user_repository import UserRepository


@dataclass(frozen=True)
class Repositories:
    """The full set of data-access objects handed to services at startup."""
    users: UserRepository
    posts: PostRepository
    groups: GroupRepository
    messages: MessageRepository

    @classmethod
    def create(cls) -> "Repositories":
        return cls(
            users=UserRepository(),
            posts=PostRepository(),
            groups=GroupRepository(),
            messages=MessageRepository(),
        )


__all__ = [
    "Repositories",
    "UserRepository",
    "PostRepository",
    "GroupRepository",
    "MessageRepository",
]
