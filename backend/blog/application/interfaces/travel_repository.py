"""Port for the singleton travel-record document."""

from abc import ABC, abstractmethod

from blog.domain.entities import TravelRecord


class TravelRepository(ABC):

    @abstractmethod
    async def get(self) -> TravelRecord | None:
        """The most recent record, or None if none was ever saved."""
        ...

    @abstractmethod
    async def upsert(self, data: str, visible: bool) -> TravelRecord:
        """Update the existing row in place, or insert the first one."""
        ...
