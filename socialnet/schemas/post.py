"""Post schemas for the public feed and group feeds."""

import uuid
from datetime import datetime
from typing import List, Optional

from pydantic import Field, field_validator

from socialnet.schemas.common import APIModel


class PostCreateRequest(APIModel):
    """
    Body of POST /posts and POST /groups/{groupId}/posts.

    Any `author` key a client sends is dropped during validation; the
    verified identity is used instead.
    """
    content: str = Field(min_length=1, max_length=10_000)
    images: List[str] = Field(default_factory=list, max_length=20)

    @field_validator("content")
    @classmethod
    def reject_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("content must not be blank")
        return v


class PostResponse(APIModel):
    """A stored post with `author` as a bare user id."""
    id: uuid.UUID
    author: uuid.UUID
    content: str
    images: List[str] = Field(default_factory=list)
    group: Optional[uuid.UUID] = None
    created_at: datetime


class AuthorSummary(APIModel):
    """The author fields exposed in feeds."""
    id: uuid.UUID
    username: str
    profile_pic: str = ""


class PostWithAuthor(APIModel):
    """A feed entry with its author populated."""
    id: uuid.UUID
    author: AuthorSummary
    content: str
    images: List[str] = Field(default_factory=list)
    group: Optional[uuid.UUID] = None
    created_at: datetime
