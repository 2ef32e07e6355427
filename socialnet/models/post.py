"""
SocialNet Backend — Post SQLAlchemy Model
=========================================

What:  ORM model representing the `posts` table.

A post with `group_id` NULL belongs to the public feed; otherwise it is
scoped to that group. Posts are never updated or deleted.

Index on created_at DESC:
    Feeds are read newest first.
"""

import uuid
from datetime import datetime, timezone
from typing import List, Optional

from sqlalchemy import JSON, DateTime, ForeignKey, Index, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from socialnet.database import Base
from socialnet.models.user import User


class Post(Base):
    """A piece of content written by one user, optionally inside a group."""

    __tablename__ = "posts"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid.uuid4,
    )

    author_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    )

    content: Mapped[str] = mapped_column(Text, nullable=False)

    # Plain image references (URLs/paths); no media pipeline behind them
    images: Mapped[List[str]] = mapped_column(JSON, nullable=False, default=list)

    group_id: Mapped[Optional[uuid.UUID]] = mapped_column(
        Uuid,
        ForeignKey("groups.id", ondelete="CASCADE"),
        nullable=True,
        default=None,
        index=True,
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    # lazy="raise": async sessions cannot lazy-load; queries must selectinload
    author: Mapped[User] = relationship(User, lazy="raise")

    __table_args__ = (
        Index("idx_posts_created_at", created_at.desc()),
    )

    def __repr__(self) -> str:
        return f"<Post(id={self.id}, author_id={self.author_id}, group_id={self.group_id})>"
