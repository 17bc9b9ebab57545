"""Pydantic DTOs for the comment, analytics and object-storage settings."""

from blog.domain.entities import AnalyticsConfig, CommentConfig, ObjectStorageConfig

from .common import CamelModel


class CommentConfigSchema(CamelModel):
    enable_comments: bool = False
    repo: str = ""
    repo_id: str = ""
    category: str = ""
    category_id: str = ""

    def to_entity(self) -> CommentConfig:
        return CommentConfig(**self.model_dump())


class AnalyticsConfigSchema(CamelModel):
    enable_umami: bool = False
    script_url: str = ""
    website_id: str = ""
    share_url: str = ""

    def to_entity(self) -> AnalyticsConfig:
        return AnalyticsConfig(**self.model_dump())


class ObjectStorageConfigSchema(CamelModel):
    enable_s3: bool = False
    access_key_id: str = ""
    secret_access_key: str = ""
    region: str = ""
    bucket: str = ""
    endpoint: str = ""
    public_url: str = ""
    path: str = ""

    def to_entity(self) -> ObjectStorageConfig:
        return ObjectStorageConfig(**self.model_dump())
