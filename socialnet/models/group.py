"""
SocialNet Backend — Group SQLAlchemy Model
==========================================

What:  ORM model for the `groups` table and the `group_members` association.

Membership is a many-to-many relation between groups and users. The
creator is always written into it when the group is created.
"""

import uuid
from datetime import datetime, timezone
from typing import List, Optional

from sqlalchemy import Column, DateTime, ForeignKey, String, Table, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from socialnet.database import Base
from socialnet.models.user import User


group_members = Table(
    "group_members",
    Base.metadata,
    Column("group_id", Uuid, ForeignKey("groups.id", ondelete="CASCADE"), primary_key=True),
    Column("user_id", Uuid, ForeignKey("users.id", ondelete="CASCADE"), primary_key=True),
)


class Group(Base):
    """A named set of users who may post into a shared feed."""

    __tablename__ = "groups"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid.uuid4,
    )

    name: Mapped[str] = mapped_column(String(200), nullable=False)

    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True, default=None)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    members: Mapped[List[User]] = relationship(
        User,
        secondary=group_members,
        lazy="raise",
    )

    def __repr__(self) -> str:
        return f"<Group(id={self.id}, name='{self.name}')>"
