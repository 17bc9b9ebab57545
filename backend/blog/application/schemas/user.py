"""Pydantic DTOs for the account endpoints. Password hashes are never serialized."""

from pydantic import Field

from .common import CamelModel


class UserResponse(CamelModel):
    id: int
    username: str
    name: str
    email: str | None = None
    avatar: str | None = None
    bio: str | None = None


class ProfileUpdate(CamelModel):
    """All fields optional; only the supplied ones are written."""

    username: str | None = Field(None, min_length=1, max_length=64)
    name: str | None = None
    email: str | None = None
    avatar: str | None = None
    bio: str | None = None


class ChangePasswordRequest(CamelModel):
    curr_password: str = ""
    new_password: str = ""
