"""
SocialNet Backend — User SQLAlchemy Model
=========================================

What:  ORM model representing the `users` table.
How:   Username and email carry unique indexes; the database enforces
       uniqueness and the user service reports a violation as a 400.

Table Design:
    - UUID primary key generated in Python (portable across PostgreSQL and SQLite)
    - password_hash: argon2id encoded hash, never the plaintext
    - profile_pic: free-form reference (URL/path), empty string when unset
"""

import uuid

from sqlalchemy import String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from socialnet.database import Base


class User(Base):
    """
    A registered account.

    Lifecycle:
        Created on registration; immutable afterwards except for profile
        fields, which no endpoint edits yet.
    """

    __tablename__ = "users"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid.uuid4,
    )

    username: Mapped[str] = mapped_column(
        String(150),
        nullable=False,
        unique=True,
        index=True,
    )

    email: Mapped[str] = mapped_column(
        String(320),
        nullable=False,
        unique=True,
        index=True,
    )

    # argon2 encoded hashes are ~100 chars; 255 leaves room for stronger parameters
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)

    profile_pic: Mapped[str] = mapped_column(
        String(1024),
        nullable=False,
        default="",
    )

    def __repr__(self) -> str:
        return f"<User(id={self.id}, username='{self.username}')>"
