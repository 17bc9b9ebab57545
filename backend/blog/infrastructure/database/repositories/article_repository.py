"""Concrete article index repository backed by SQLAlchemy."""

import logging
from collections import Counter
from typing import Any

from sqlalchemy import and_, delete, func, or_, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from blog.application.interfaces import ArticleRepository
from blog.domain.entities import (
    AdjacentArticles,
    Article,
    ArticleLink,
    ArticlePage,
    ArticleQuery,
    AuthorInfo,
    TagCount,
)
from blog.domain.entities.article import PLACEHOLDER_AUTHOR, utc_now_iso
from blog.domain.exceptions import EntityNotFoundError, ParseFailure
from blog.infrastructure.database.models import ArticleModel, UserModel
from blog.infrastructure.database.tag_codec import (
    decode_tags,
    encode_tags,
    escape_like,
    tag_match_pattern,
)

logger = logging.getLogger(__name__)

_SORT_COLUMNS = {
    "path": ArticleModel.path,
    "title": ArticleModel.title,
    "date": ArticleModel.date,
    "modifyTime": ArticleModel.modify_time,
    "published": ArticleModel.published,
}

_UPDATABLE = ("title", "date", "description", "image", "tags", "published", "is_sticky", "content")


class SQLAlchemyArticleRepository(ArticleRepository):
    """Implements the ArticleRepository port using SQLAlchemy async sessions."""

    def __init__(self, session: AsyncSession):
        self._session = session

    def _decode_tags(self, model: ArticleModel) -> list[str]:
        try:
            tags = decode_tags(model.tags, model.path)
        except ParseFailure as exc:
            logger.warning("%s; treating as no tags", exc)
            return []
        kept = [tag for tag in tags if isinstance(tag, str)]
        if len(kept) != len(tags):
            logger.warning("Dropped non-string tags of '%s'", model.path)
        return kept

    def _to_entity(self, model: ArticleModel, include_content: bool = True) -> Article:
        """Map ORM model → domain entity."""
        return Article(
            path=model.path,
            title=model.title,
            date=model.date,
            userid=model.userid,
            description=model.description,
            image=model.image,
            tags=self._decode_tags(model),
            published=bool(model.published),
            is_sticky=bool(model.is_sticky),
            content=model.content if include_content else None,
            modify_time=model.modify_time,
        )

    def _to_model(self, entity: Article) -> ArticleModel:
        """Map domain entity → ORM model (for creation)."""
        return ArticleModel(
            path=entity.path,
            title=entity.title,
            date=entity.date,
            description=entity.description,
            image=entity.image,
            tags=encode_tags(entity.tags),
            published=bool(entity.published),
            userid=entity.userid,
            is_sticky=bool(entity.is_sticky),
            content=entity.content,
            modify_time=utc_now_iso(),
        )

    # ── Writes ──────────────────────────────────────────────────────

    async def get_by_path(self, path: str) -> Article | None:
        if not path:
            return None
        result = await self._session.get(ArticleModel, path)
        return self._to_entity(result) if result else None

    async def create(self, article: Article) -> Article:
        model = self._to_model(article)
        self._session.add(model)
        await self._session.flush()
        return self._to_entity(model)

    async def create_or_skip(self, article: Article) -> Article | None:
        try:
            async with self._session.begin_nested():
                model = self._to_model(article)
                self._session.add(model)
                await self._session.flush()
        except SQLAlchemyError as exc:
            logger.error("Insert rejected for article '%s': %s", article.path, exc)
            return None
        return self._to_entity(model)

    async def update_fields(self, path: str, values: dict[str, Any]) -> Article:
        model = await self._session.get(ArticleModel, path)
        if model is None:
            raise EntityNotFoundError("Article", path)
        for name, value in values.items():
            if name not in _UPDATABLE:
                raise ValueError(f"Column '{name}' cannot be updated")
            if name == "tags":
                value = encode_tags(value)
            setattr(model, name, value)
        model.modify_time = utc_now_iso()
        await self._session.flush()
        return self._to_entity(model)

    async def delete(self, path: str) -> bool:
        model = await self._session.get(ArticleModel, path)
        if model is None:
            return False
        await self._session.delete(model)
        await self._session.flush()
        return True

    async def delete_all(self) -> int:
        result = await self._session.execute(delete(ArticleModel))
        await self._session.flush()
        return result.rowcount or 0

    # ── Reads ───────────────────────────────────────────────────────

    async def get_all_paths(self) -> list[str]:
        result = await self._session.execute(select(ArticleModel.path).order_by(ArticleModel.path))
        return list(result.scalars().all())

    async def list_all(self) -> list[Article]:
        result = await self._session.execute(select(ArticleModel).order_by(ArticleModel.path))
        return [self._to_entity(row, include_content=False) for row in result.scalars().all()]

    async def query_published(self, query: ArticleQuery) -> ArticlePage:
        conditions = [ArticleModel.published.is_(True)]
        if query.search:
            pattern = f"%{escape_like(query.search)}%"
            conditions.append(
                or_(
                    ArticleModel.title.ilike(pattern, escape="\\"),
                    ArticleModel.description.ilike(pattern, escape="\\"),
                )
            )
        if query.tag:
            conditions.append(ArticleModel.tags.like(tag_match_pattern(query.tag), escape="\\"))
        if query.is_sticky is not None:
            conditions.append(ArticleModel.is_sticky.is_(bool(query.is_sticky)))

        sort_column = _SORT_COLUMNS.get(query.sort_by, ArticleModel.date)
        if query.sort_order == "asc":
            ordering = (sort_column.asc(), ArticleModel.path.asc())
        else:
            ordering = (sort_column.desc(), ArticleModel.path.desc())

        stmt = (
            select(ArticleModel)
            .where(*conditions)
            .order_by(*ordering)
            .offset(query.offset)
            .limit(query.page_size)
        )
        result = await self._session.execute(stmt)
        items = [self._to_entity(row, include_content=False) for row in result.scalars().all()]

        count_stmt = select(func.count()).select_from(ArticleModel).where(*conditions)
        total = (await self._session.execute(count_stmt)).scalar_one()
        return ArticlePage(items=items, total=total)

    async def tag_counts(self) -> list[TagCount]:
        result = await self._session.execute(
            select(ArticleModel.path, ArticleModel.tags).where(ArticleModel.published.is_(True))
        )
        counter: Counter[str] = Counter()
        for path, raw in result.all():
            try:
                tags = decode_tags(raw, path)
            except ParseFailure as exc:
                logger.warning("%s; skipped in tag counts", exc)
                continue
            for tag in tags:
                if not isinstance(tag, str):
                    continue
                trimmed = tag.strip()
                if trimmed:
                    counter[trimmed] += 1
        return [TagCount(tag=tag, count=count) for tag, count in counter.most_common()]

    async def get_adjacent(self, date: str, path: str) -> AdjacentArticles:
        published = ArticleModel.published.is_(True)
        newer = (
            select(ArticleModel.title, ArticleModel.path)
            .where(
                published,
                or_(
                    ArticleModel.date > date,
                    and_(ArticleModel.date == date, ArticleModel.path > path),
                ),
            )
            .order_by(ArticleModel.date.asc(), ArticleModel.path.asc())
            .limit(1)
        )
        older = (
            select(ArticleModel.title, ArticleModel.path)
            .where(
                published,
                or_(
                    ArticleModel.date < date,
                    and_(ArticleModel.date == date, ArticleModel.path < path),
                ),
            )
            .order_by(ArticleModel.date.desc(), ArticleModel.path.desc())
            .limit(1)
        )
        prev_row = (await self._session.execute(newer)).first()
        next_row = (await self._session.execute(older)).first()
        return AdjacentArticles(
            prev=ArticleLink(title=prev_row.title, path=prev_row.path) if prev_row else None,
            next=ArticleLink(title=next_row.title, path=next_row.path) if next_row else None,
        )

    async def query_author(self, path: str) -> AuthorInfo:
        if not path:
            logger.warning("Author lookup without an article path")
            return AuthorInfo()
        stmt = (
            select(UserModel.name, UserModel.avatar)
            .select_from(ArticleModel)
            .outerjoin(UserModel, ArticleModel.userid == UserModel.id)
            .where(ArticleModel.path == path)
            .limit(1)
        )
        row = (await self._session.execute(stmt)).first()
        return AuthorInfo(
            name=(row.name if row and row.name else PLACEHOLDER_AUTHOR),
            avatar=(row.avatar if row and row.avatar else None),
        )
