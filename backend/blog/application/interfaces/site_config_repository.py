"""Port for the singleton configuration rows."""

from abc import ABC, abstractmethod

from blog.domain.entities import AnalyticsConfig, CommentConfig, ObjectStorageConfig


class SiteConfigRepository(ABC):

    @abstractmethod
    async def get_comment_config(self) -> CommentConfig | None:
        ...

    @abstractmethod
    async def save_comment_config(self, config: CommentConfig) -> None:
        ...

    @abstractmethod
    async def get_analytics_config(self) -> AnalyticsConfig | None:
        ...

    @abstractmethod
    async def save_analytics_config(self, config: AnalyticsConfig) -> None:
        ...

    @abstractmethod
    async def get_object_storage_config(self) -> ObjectStorageConfig | None:
        ...

    @abstractmethod
    async def save_object_storage_config(self, config: ObjectStorageConfig) -> None:
        ...
