"""
SocialNet Backend — Service Container
=====================================

What:  Builds every long-lived collaborator exactly once.
How:   `ServiceContainer.from_settings()` wires credential manager, token
       service, repositories and services together. `create_app()` stores
       the container on `app.state`; routes reach it through
       `socialnet.dependencies`.
"""

import logging
import secrets
from dataclasses import dataclass
from datetime import timedelta

from socialnet.config import Settings
from socialnet.repositories import Repositories
from socialnet.security.passwords import CredentialManager
from socialnet.security.tokens import TokenService
from socialnet.services.group_service import GroupService
from socialnet.services.membership import MembershipChecker
from socialnet.services.message_service import MessageService
from socialnet.services.post_service import PostService
from socialnet.services.user_service import UserService

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ServiceContainer:
    credentials: CredentialManager
    tokens: TokenService
    repositories: Repositories
    membership: MembershipChecker
    users: UserService
    posts: PostService
    groups: GroupService
    messages: MessageService

    @classmethod
    def from_settings(cls, config: Settings) -> "ServiceContainer":
        secret = config.jwt_secret
        if not secret:
            logger.warning(
                "JWT_SECRET is not set; using an ephemeral secret. "
                "Issued tokens stop working when the process restarts."
            )
            secret = secrets.token_urlsafe(48)

        credentials = CredentialManager(
            time_cost=config.argon2_time_cost,
            memory_cost=config.argon2_memory_cost,
            parallelism=config.argon2_parallelism,
        )
        tokens = TokenService(
            secret_key=secret,
            algorithm=config.jwt_algorithm,
            expires_delta=timedelta(minutes=config.token_expire_minutes),
        )
        repositories = Repositories.create()
        membership = MembershipChecker(repositories.groups)
        posts = PostService(repositories.posts, repositories.users, membership)

        return cls(
            credentials=credentials,
            tokens=tokens,
            repositories=repositories,
            membership=membership,
            users=UserService(repositories.users, credentials, tokens),
            posts=posts,
            groups=GroupService(repositories.groups, repositories.users, posts, membership),
            messages=MessageService(repositories.messages, repositories.users),
        )
