"""Direct message schemas."""

import uuid
from datetime import datetime

from pydantic import Field, field_validator

from socialnet.schemas.common import APIModel


class MessageCreateRequest(APIModel):
    """Body of POST /messages. The sender is the authenticated caller."""
    receiver: uuid.UUID
    content: str = Field(min_length=1, max_length=10_000)

    @field_validator("content")
    @classmethod
    def reject_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("content must not be blank")
        return v


class DirectMessageResponse(APIModel):
    id: uuid.UUID
    sender: uuid.UUID
    receiver: uuid.UUID
    content: str
    sent_at: datetime
