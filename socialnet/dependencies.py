"""
SocialNet Backend — FastAPI Dependencies
========================================

Accessors for the startup-built ServiceContainer. Tests can swap any of
these through `app.dependency_overrides`.
"""

from fastapi import Depends, Request

from socialnet.container import ServiceContainer
from socialnet.security.tokens import TokenService
from socialnet.services.group_service import GroupService
from socialnet.services.message_service import MessageService
from socialnet.services.post_service import PostService
from socialnet.services.user_service import UserService


def get_container(request: Request) -> ServiceContainer:
    return request.app.state.container


def get_token_service(container: ServiceContainer = Depends(get_container)) -> TokenService:
    return container.tokens


def get_user_service(container: ServiceContainer = Depends(get_container)) -> UserService:
    return container.users


def get_post_service(container: ServiceContainer = Depends(get_container)) -> PostService:
    return container.posts


def get_group_service(container: ServiceContainer = Depends(get_container)) -> GroupService:
    return container.groups


def get_message_service(container: ServiceContainer = Depends(get_container)) -> MessageService:
    return container.messages
