"""Domain entity for the travel map document."""

from dataclasses import dataclass, field
from datetime import datetime, timezone


@dataclass
class TravelRecord:
    """Singleton document: a serialized JSON array of visited places plus a visibility flag."""

    data: str = "[]"
    visible: bool = False
    id: int | None = None
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
