"""
SocialNet Backend — ORM Models
==============================

Importing this package registers every table on `Base.metadata`.
"""

from socialnet.models.group import Group, group_members
from socialnet.models.message import Message
from socialnet.models.post import Post
from socialnet.models.user import User

__all__ = ["User", "Post", "Group", "group_members", "Message"]
