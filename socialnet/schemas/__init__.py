"""
SocialNet Backend — Pydantic Request/Response Schemas
=====================================================

What:  The API contract. Request models validate bodies; response models
       control exactly which fields leave the server (never password hashes).
How:   All models share `APIModel`, which serializes snake_case attributes
       as camelCase keys (`profile_pic` → `profilePic`).
"""

from socialnet.schemas.common import APIModel, ErrorResponse, HealthResponse, MessageResponse
from socialnet.schemas.group import GroupCreateRequest, GroupResponse
from socialnet.schemas.message import DirectMessageResponse, MessageCreateRequest
from socialnet.schemas.post import AuthorSummary, PostCreateRequest, PostResponse, PostWithAuthor
from socialnet.schemas.user import LoginRequest, LoginResponse, RegisterRequest, UserPublic

__all__ = [
    "APIModel",
    "ErrorResponse",
    "HealthResponse",
    "MessageResponse",
    "RegisterRequest",
    "LoginRequest",
    "LoginResponse",
    "UserPublic",
    "PostCreateRequest",
    "PostResponse",
    "PostWithAuthor",
    "AuthorSummary",
    "GroupCreateRequest",
    "GroupResponse",
    "MessageCreateRequest",
    "DirectMessageResponse",
]
