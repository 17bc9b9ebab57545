"""Singleton configuration documents mirrored in process memory."""

from dataclasses import dataclass


@dataclass
class CommentConfig:
    """Comment widget (GitHub discussions) settings."""

    enable_comments: bool = False
    repo: str = ""
    repo_id: str = ""
    category: str = ""
    category_id: str = ""


@dataclass
class AnalyticsConfig:
    """Umami analytics embedding settings."""

    enable_umami: bool = False
    script_url: str = ""
    website_id: str = ""
    share_url: str = ""


@dataclass
class ObjectStorageConfig:
    """S3-compatible bucket used for image uploads."""

    enable_s3: bool = False
    access_key_id: str = ""
    secret_access_key: str = ""
    region: str = ""
    bucket: str = ""
    endpoint: str = ""
    public_url: str = ""
    path: str = ""
