"""Group schemas."""

import uuid
from datetime import datetime
from typing import List, Optional

from pydantic import Field, field_validator

from socialnet.schemas.common import APIModel


class GroupCreateRequest(APIModel):
    """
    Body of POST /groups.

    `members` lists additional user ids; the creator is always added,
    whether or not it appears here.
    """
    name: str = Field(min_length=1, max_length=200)
    description: Optional[str] = Field(default=None, max_length=2000)
    members: List[uuid.UUID] = Field(default_factory=list)

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("name must not be blank")
        return v


class GroupResponse(APIModel):
    id: uuid.UUID
    name: str
    description: Optional[str] = None
    members: List[uuid.UUID]
    created_at: datetime
