"""Application service for articles: keeps the Markdown tree and the metadata index in step.

The article tree is the source of truth for content; the database is a
rebuildable index over it. Multi-step writes touch the tree first and the
index second, with no transaction spanning both. ``rebuild_index`` is the
recovery path when the two diverge.
"""

import logging
from dataclasses import replace
from datetime import date, datetime
from typing import Any

from blog.application.interfaces import ArticleRepository, ArticleTree
from blog.domain.entities import (
    AdjacentArticles,
    Article,
    ArticleDocument,
    ArticleFields,
    ArticlePage,
    ArticleQuery,
    AuthorInfo,
    TagCount,
    short_id_for,
)
from blog.domain.exceptions import (
    EntityNotFoundError,
    IOFailure,
    NoOpError,
    ParseFailure,
    ValidationError,
)
from blog.infrastructure.content.front_matter import parse_front_matter, render_document
from blog.infrastructure.logging.colored_logger import ReconcileLogger, ReconcileStage

logger = logging.getLogger(__name__)
rlog = ReconcileLogger("ReconciliationEngine")

RECENT_PAGE_SIZE = 3
STICKY_PAGE_SIZE = 6


def _normalize_date(value: Any) -> str:
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    return str(value)


def _optional_str(value: Any) -> str | None:
    return None if value is None else str(value)


def _coerce_tags(value: Any) -> list[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, (list, tuple)):
        return [str(tag) for tag in value]
    logger.warning("Ignoring tags of unexpected type %s", type(value).__name__)
    return []


def _column_values(fields: ArticleFields) -> dict[str, Any]:
    """Coerce supplied front-matter fields into column values, keyed by entity attribute."""
    values: dict[str, Any] = {}
    for name, value in fields.supplied().items():
        if name in ("title", "date"):
            if value is None or value == "":
                raise ValidationError(f"'{name}' must not be empty", field=name)
            values[name] = _normalize_date(value) if name == "date" else str(value)
        elif name in ("description", "image"):
            values[name] = _optional_str(value)
        elif name == "tags":
            values[name] = _coerce_tags(value)
        elif name in ("published", "is_sticky"):
            values[name] = bool(value)
        else:
            values[name] = value
    return values


class ArticleService:
    """Orchestrates the article tree and the article index. Depends on both ports (DI)."""

    def __init__(self, repository: ArticleRepository, tree: ArticleTree):
        self._repository = repository
        self._tree = tree

    # ── Writes ───────────────────────────────────────────────────────

    async def save_article(
        self,
        slug: str,
        fields: ArticleFields,
        body: str,
        original_slug: str = "",
        author_id: int = 1,
    ) -> Article:
        """Write ``<slug>/index.md`` then upsert the row keyed by ``slug``.

        A non-empty ``original_slug`` different from ``slug`` renames the
        directory first and moves the row to the new key.
        """
        slug = (slug or "").strip()
        if not slug:
            raise ValidationError("Article path must not be empty", field="path")

        original_slug = (original_slug or "").strip()
        renamed = bool(original_slug) and original_slug != slug

        if renamed:
            await self._tree.rename(original_slug, slug)
            rlog.step(ReconcileStage.RENAME, "Moved article directory", source=original_slug, target=slug)

        await self._tree.write_document(slug, render_document(fields.to_front_matter(), body))
        rlog.step(ReconcileStage.WRITE, "Wrote index.md", path=slug, chars=len(body))

        inherited: Article | None = None
        if renamed:
            inherited = await self._repository.get_by_path(original_slug)
            await self._repository.delete(original_slug)

        return await self._upsert(slug, replace(fields, content=body), author_id, inherited)

    async def upsert_article(self, slug: str, fields: ArticleFields, author_id: int) -> Article:
        """Index-only save: insert when ``slug`` is new, otherwise update the supplied fields."""
        slug = (slug or "").strip()
        if not slug:
            raise ValidationError("Article path must not be empty", field="path")
        return await self._upsert(slug, fields, author_id, None)

    async def _upsert(
        self,
        slug: str,
        fields: ArticleFields,
        author_id: int,
        inherited: Article | None,
    ) -> Article:
        values = _column_values(fields)
        existing = await self._repository.get_by_path(slug)

        if existing is not None:
            if not values:
                raise NoOpError("Article", slug)
            return await self._repository.update_fields(slug, values)

        if inherited is not None:
            # A rename keeps the previous row's state and author
            base = {
                "title": inherited.title,
                "date": inherited.date,
                "description": inherited.description,
                "image": inherited.image,
                "tags": inherited.tags,
                "published": inherited.published,
                "is_sticky": inherited.is_sticky,
                "content": inherited.content,
            }
            values = {**base, **values}
            author_id = inherited.userid
        elif not values.get("title") or not values.get("date") or not values.get("published"):
            raise ValidationError("A new article requires title, date and published")

        article = Article(
            path=slug,
            title=values["title"],
            date=values["date"],
            userid=author_id,
            description=values.get("description"),
            image=values.get("image"),
            tags=values.get("tags", []),
            published=values.get("published", False),
            is_sticky=values.get("is_sticky", False),
            content=values.get("content"),
        )
        return await self._repository.create(article)

    async def delete_article(self, path: str) -> str:
        """Remove the row, then the directory (or file) from the tree.

        Returns "directory" or "file".
        """
        if not await self._tree.exists(path):
            raise EntityNotFoundError("Article", path)
        await self._repository.delete(path)
        return await self._tree.remove(path)

    async def delete_article_by_path(self, path: str) -> bool:
        if not path:
            raise ValidationError("Article path must not be empty", field="path")
        return await self._repository.delete(path)

    async def delete_all_articles(self) -> int:
        return await self._repository.delete_all()

    # ── Reconciliation ───────────────────────────────────────────────

    async def rebuild_index(self, author_id: int = 1) -> int:
        """Re-derive every row from the tree. Returns how many articles were indexed."""
        entries = await self._tree.list_entries()
        removed = await self._repository.delete_all()
        rlog.step(ReconcileStage.SCAN, "Rebuilding index", directories=len(entries), wiped=removed)

        count = 0
        for entry in entries:
            try:
                if not await self._tree.has_document(entry.slug):
                    rlog.warn(ReconcileStage.SKIP, "No index.md", path=entry.slug)
                    continue
                text = await self._tree.read_document(entry.slug)
                metadata, body = parse_front_matter(text, entry.slug)
                if not metadata.get("title") or not metadata.get("date"):
                    rlog.warn(ReconcileStage.SKIP, "Front matter lacks title or date", path=entry.slug)
                    continue
                created = await self._repository.create_or_skip(
                    Article(
                        path=entry.slug,
                        title=str(metadata["title"]),
                        date=_normalize_date(metadata["date"]),
                        userid=author_id,
                        description=_optional_str(metadata.get("description")),
                        image=_optional_str(metadata.get("image")),
                        tags=_coerce_tags(metadata.get("tags")),
                        published=bool(metadata.get("published", False)),
                        is_sticky=bool(metadata.get("isSticky", False)),
                        content=body,
                    )
                )
                if created is None:
                    rlog.warn(ReconcileStage.SKIP, "Index rejected the row", path=entry.slug)
                    continue
                count += 1
            except (IOFailure, ParseFailure, ValidationError) as exc:
                rlog.error("Skipping directory", error=exc, path=entry.slug)

        rlog.step(ReconcileStage.INDEX, "Index rebuilt", indexed=count, directories=len(entries))
        return count

    async def list_for_admin(self) -> list[Article]:
        """Every directory in the tree merged with its row, most recently modified first."""
        entries = await self._tree.list_entries()
        rows = {article.path: article for article in await self._repository.list_all()}

        summaries: list[Article] = []
        for entry in entries:
            row = rows.get(entry.slug)
            if row is not None:
                row.modify_time = entry.modify_time
                row.is_saved = True
                summaries.append(row)
            else:
                summaries.append(
                    Article(
                        path=entry.slug,
                        title=entry.slug,
                        date=entry.created_time,
                        userid=0,
                        modify_time=entry.modify_time,
                        is_saved=False,
                    )
                )
        summaries.sort(key=lambda article: article.modify_time, reverse=True)
        return summaries

    # ── Reads ────────────────────────────────────────────────────────

    async def query_published(self, query: ArticleQuery | None = None) -> ArticlePage:
        return await self._repository.query_published((query or ArticleQuery()).normalized())

    async def recent_articles(self) -> ArticlePage:
        return await self.query_published(ArticleQuery(page=1, page_size=RECENT_PAGE_SIZE, is_sticky=False))

    async def sticky_articles(self) -> ArticlePage:
        return await self.query_published(ArticleQuery(page=1, page_size=STICKY_PAGE_SIZE, is_sticky=True))

    async def get_tags_with_count(self) -> list[TagCount]:
        return await self._repository.tag_counts()

    async def get_adjacent_articles(self, date: str, path: str) -> AdjacentArticles:
        return await self._repository.get_adjacent(date, path)

    async def get_article_by_path(self, path: str) -> Article | None:
        return await self._repository.get_by_path(path)

    async def get_article_by_short_id(self, short_id: str) -> Article | None:
        if not short_id:
            return None
        for path in await self._repository.get_all_paths():
            if short_id_for(path) == short_id:
                return await self._repository.get_by_path(path)
        return None

    async def get_all_article_paths(self) -> list[str]:
        return await self._repository.get_all_paths()

    async def query_author(self, path: str) -> AuthorInfo:
        return await self._repository.query_author(path)

    async def read_source(self, path: str) -> tuple[dict[str, Any], str]:
        """Front matter and body straight from ``index.md`` (editor view)."""
        if not await self._tree.has_document(path):
            raise EntityNotFoundError("Article", path)
        return self._parse_or_degrade(await self._tree.read_document(path), path)

    async def read_article(self, path: str) -> ArticleDocument:
        """Reader view: body + front matter, author and neighbours.

        Served from the index when the row carries content, otherwise from the file.
        """
        row = await self._repository.get_by_path(path)
        if row is not None and row.content:
            front_matter: dict[str, Any] = {
                "title": row.title,
                "date": row.date,
                "description": row.description,
                "image": row.image,
                "tags": row.tags,
                "published": row.published,
                "isSticky": row.is_sticky,
            }
            body = row.content
        else:
            front_matter, body = await self.read_source(path)

        adjacent = AdjacentArticles()
        if front_matter.get("date"):
            adjacent = await self._repository.get_adjacent(_normalize_date(front_matter["date"]), path)

        return ArticleDocument(
            path=path,
            content=body,
            front_matter=front_matter,
            author=await self._repository.query_author(path),
            adjacent=adjacent,
        )

    @staticmethod
    def _parse_or_degrade(text: str, path: str) -> tuple[dict[str, Any], str]:
        try:
            return parse_front_matter(text, path)
        except ParseFailure as exc:
            rlog.warn(ReconcileStage.SKIP, f"{exc}; serving raw text", path=path)
            return {}, text
