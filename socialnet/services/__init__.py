"""
SocialNet Backend — Services Layer
==================================

What:  Business rules between routes (HTTP) and repositories (persistence).
How:   Services are plain objects built once in `create_app()` with their
       collaborators passed in; every method receives the request's session.

Service Inventory:
    - MembershipChecker: group exists + caller is a member, before group writes
    - UserService:       registration, login, public profiles
    - PostService:       public and group-scoped posts, feeds with authors
    - GroupService:      group creation, group feeds, member-only group posting
    - MessageService:    direct messages from the verified caller
"""

from socialnet.services.group_service import GroupService
from socialnet.services.membership import MembershipChecker
from socialnet.services.message_service import MessageService
from socialnet.services.post_service import PostService
from socialnet.services.user_service import UserService

__all__ = [
    "MembershipChecker",
    "UserService",
    "PostService",
    "GroupService",
    "MessageService",
]
