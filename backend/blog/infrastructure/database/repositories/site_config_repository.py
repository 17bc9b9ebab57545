"""Concrete repository for the singleton configuration rows."""

from dataclasses import asdict
from typing import TypeVar

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from blog.application.interfaces import SiteConfigRepository
from blog.domain.entities import AnalyticsConfig, CommentConfig, ObjectStorageConfig
from blog.infrastructure.database.base import Base
from blog.infrastructure.database.models import CommentConfigModel, S3ConfigModel, UmamiConfigModel

_M = TypeVar("_M", bound=Base)


class SQLAlchemySiteConfigRepository(SiteConfigRepository):
    """Each config table holds at most one row; saves update it in place or insert it."""

    def __init__(self, session: AsyncSession):
        self._session = session

    async def _first(self, model_cls: type[_M]) -> _M | None:
        result = await self._session.execute(select(model_cls).order_by(model_cls.id).limit(1))
        return result.scalar_one_or_none()

    async def _save(self, model_cls: type[Base], values: dict) -> None:
        model = await self._first(model_cls)
        if model is None:
            self._session.add(model_cls(**values))
        else:
            for name, value in values.items():
                setattr(model, name, value)
        await self._session.flush()

    # ── Comments ────────────────────────────────────────────────────

    async def get_comment_config(self) -> CommentConfig | None:
        model = await self._first(CommentConfigModel)
        if model is None:
            return None
        return CommentConfig(
            enable_comments=bool(model.enable_comments),
            repo=model.repo or "",
            repo_id=model.repo_id or "",
            category=model.category or "",
            category_id=model.category_id or "",
        )

    async def save_comment_config(self, config: CommentConfig) -> None:
        await self._save(CommentConfigModel, asdict(config))

    # ── Analytics ───────────────────────────────────────────────────

    async def get_analytics_config(self) -> AnalyticsConfig | None:
        model = await self._first(UmamiConfigModel)
        if model is None:
            return None
        return AnalyticsConfig(
            enable_umami=bool(model.enable_umami),
            script_url=model.script_url or "",
            website_id=model.website_id or "",
            share_url=model.share_url or "",
        )

    async def save_analytics_config(self, config: AnalyticsConfig) -> None:
        await self._save(UmamiConfigModel, asdict(config))

    # ── Object storage ──────────────────────────────────────────────

    async def get_object_storage_config(self) -> ObjectStorageConfig | None:
        model = await self._first(S3ConfigModel)
        if model is None:
            return None
        return ObjectStorageConfig(
            enable_s3=bool(model.enable_s3),
            access_key_id=model.access_key_id or "",
            secret_access_key=model.secret_access_key or "",
            region=model.region or "",
            bucket=model.bucket or "",
            endpoint=model.endpoint or "",
            public_url=model.public_url or "",
            path=model.path or "",
        )

    async def save_object_storage_config(self, config: ObjectStorageConfig) -> None:
        await self._save(S3ConfigModel, asdict(config))
