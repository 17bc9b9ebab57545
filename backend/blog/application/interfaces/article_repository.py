"""Abstract repository interfaces (ports) — define the contract, not the implementation."""

from abc import ABC, abstractmethod
from typing import Any

from blog.domain.entities import AdjacentArticles, Article, ArticlePage, ArticleQuery, AuthorInfo, TagCount


class ArticleRepository(ABC):
    """Port for the article metadata index — implemented in the infrastructure layer."""

    @abstractmethod
    async def get_by_path(self, path: str) -> Article | None:
        """Retrieve a single article row by its slug."""
        ...

    @abstractmethod
    async def create(self, article: Article) -> Article:
        """Insert a new row. ``modify_time`` is assigned by the repository."""
        ...

    @abstractmethod
    async def create_or_skip(self, article: Article) -> Article | None:
        """Insert a row in isolation; return None when the store rejects it.

        A rejected row leaves earlier inserts in the same unit of work intact.
        """
        ...

    @abstractmethod
    async def update_fields(self, path: str, values: dict[str, Any]) -> Article:
        """Update only the given columns and refresh ``modify_time``."""
        ...

    @abstractmethod
    async def delete(self, path: str) -> bool:
        """Delete a row. Returns True if deleted, False if not found."""
        ...

    @abstractmethod
    async def delete_all(self) -> int:
        """Delete every row and return how many were removed."""
        ...

    @abstractmethod
    async def get_all_paths(self) -> list[str]:
        ...

    @abstractmethod
    async def list_all(self) -> list[Article]:
        """Every row, drafts included, without content."""
        ...

    @abstractmethod
    async def query_published(self, query: ArticleQuery) -> ArticlePage:
        """Page through published rows. ``query`` is already normalized."""
        ...

    @abstractmethod
    async def tag_counts(self) -> list[TagCount]:
        """Trimmed tag frequencies over published rows, most frequent first."""
        ...

    @abstractmethod
    async def get_adjacent(self, date: str, path: str) -> AdjacentArticles:
        ...

    @abstractmethod
    async def query_author(self, path: str) -> AuthorInfo:
        """Author name and avatar for an article, defaulting when unlinked."""
        ...
