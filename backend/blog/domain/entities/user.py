"""Domain entity for the site administrator."""

from dataclasses import dataclass, field
from datetime import datetime, timezone


@dataclass
class User:
    """An author account. ``password`` always holds a salted hash, never plaintext."""

    name: str
    username: str
    password: str
    id: int | None = None
    email: str | None = None
    avatar: str | None = None
    bio: str | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
