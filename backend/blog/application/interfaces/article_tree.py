"""Port for the on-disk article tree (one directory per slug)."""

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass
class TreeEntry:
    """An immediate sub-directory of the content root."""

    slug: str
    modify_time: str
    created_time: str


class ArticleTree(ABC):
    """Canonical Markdown storage. All methods raise IOFailure on OSError."""

    @abstractmethod
    async def list_entries(self) -> list[TreeEntry]:
        """Immediate sub-directories; a failed stat yields epoch timestamps."""
        ...

    @abstractmethod
    async def exists(self, slug: str) -> bool:
        ...

    @abstractmethod
    async def has_document(self, slug: str) -> bool:
        """True when ``<slug>/index.md`` exists."""
        ...

    @abstractmethod
    async def read_document(self, slug: str) -> str:
        ...

    @abstractmethod
    async def write_document(self, slug: str, text: str) -> None:
        """Create the directory if needed and overwrite ``index.md``."""
        ...

    @abstractmethod
    async def rename(self, original: str, target: str) -> None:
        """Move a directory, replacing ``target`` if it already exists."""
        ...

    @abstractmethod
    async def remove(self, slug: str) -> str:
        """Remove a directory recursively (or a single file). Returns "directory" or "file"."""
        ...
