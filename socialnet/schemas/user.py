"""User registration, login and public profile schemas."""

import uuid

from pydantic import Field, field_validator

from socialnet.schemas.common import APIModel


class RegisterRequest(APIModel):
    """
    Body of POST /users/register.

    The password is only ever held long enough to hash it; it is not part
    of any response model.
    """
    username: str = Field(min_length=1, max_length=150)
    email: str = Field(min_length=3, max_length=320)
    password: str = Field(min_length=1, max_length=1024)

    @field_validator("username")
    @classmethod
    def strip_username(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("username must not be blank")
        return v

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: str) -> str:
        v = v.strip().lower()
        if "@" not in v:
            raise ValueError("email must contain '@'")
        return v


class LoginRequest(APIModel):
    email: str = Field(min_length=1, max_length=320)
    password: str = Field(min_length=1, max_length=1024)

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: str) -> str:
        return v.strip().lower()


class UserPublic(APIModel):
    """Everything about a user that other users may see."""
    id: uuid.UUID
    username: str
    email: str
    profile_pic: str = ""


class LoginResponse(UserPublic):
    """Public profile plus the freshly issued identity token."""
    token: str
