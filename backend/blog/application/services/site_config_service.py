"""Application service for site configuration with a process-wide in-memory mirror.

Reads on the public path never touch the database: they are served from
``config_state``, which is filled at startup and replaced on every save.
A multi-process deployment would need a shared cache instead.
"""

import logging
from dataclasses import dataclass, replace

from blog.application.interfaces import SiteConfigRepository
from blog.domain.entities import AnalyticsConfig, CommentConfig, ObjectStorageConfig

logger = logging.getLogger(__name__)


@dataclass
class SiteConfigState:
    """Last loaded or saved value of each configuration document."""

    comments: CommentConfig | None = None
    analytics: AnalyticsConfig | None = None
    object_storage: ObjectStorageConfig | None = None


config_state = SiteConfigState()


class SiteConfigService:
    def __init__(self, repository: SiteConfigRepository, state: SiteConfigState | None = None):
        self._repository = repository
        self._state = state if state is not None else config_state

    async def seed_defaults(self) -> None:
        """Insert a default row for every configuration table that has none."""
        if await self._repository.get_comment_config() is None:
            await self._repository.save_comment_config(CommentConfig())
            logger.info("Created default comment configuration")
        if await self._repository.get_analytics_config() is None:
            await self._repository.save_analytics_config(AnalyticsConfig())
            logger.info("Created default analytics configuration")
        if await self._repository.get_object_storage_config() is None:
            await self._repository.save_object_storage_config(ObjectStorageConfig())
            logger.info("Created default object storage configuration")

    async def load(self) -> None:
        """Populate the in-memory mirror from the database."""
        self._state.comments = await self._repository.get_comment_config()
        self._state.analytics = await self._repository.get_analytics_config()
        self._state.object_storage = await self._repository.get_object_storage_config()
        logger.info(
            "Site configuration loaded: comments=%s, analytics=%s, object storage=%s",
            bool(self._state.comments and self._state.comments.enable_comments),
            bool(self._state.analytics and self._state.analytics.enable_umami),
            bool(self._state.object_storage and self._state.object_storage.enable_s3),
        )

    # ── Comments ────────────────────────────────────────────────────

    def get_comment_config(self) -> CommentConfig:
        return replace(self._state.comments) if self._state.comments else CommentConfig()

    async def save_comment_config(self, config: CommentConfig) -> CommentConfig:
        await self._repository.save_comment_config(config)
        self._state.comments = replace(config)
        return config

    # ── Analytics ───────────────────────────────────────────────────

    def get_analytics_config(self) -> AnalyticsConfig:
        return replace(self._state.analytics) if self._state.analytics else AnalyticsConfig()

    async def save_analytics_config(self, config: AnalyticsConfig) -> AnalyticsConfig:
        await self._repository.save_analytics_config(config)
        self._state.analytics = replace(config)
        return config

    # ── Object storage ──────────────────────────────────────────────

    def get_object_storage_config(self) -> ObjectStorageConfig:
        return replace(self._state.object_storage) if self._state.object_storage else ObjectStorageConfig()

    async def save_object_storage_config(self, config: ObjectStorageConfig) -> ObjectStorageConfig:
        await self._repository.save_object_storage_config(config)
        self._state.object_storage = replace(config)
        return config
