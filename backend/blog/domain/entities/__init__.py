from .article import (
    AdjacentArticles,
    Article,
    ArticleDocument,
    ArticleFields,
    ArticleLink,
    ArticlePage,
    ArticleQuery,
    AuthorInfo,
    TagCount,
    UNSET,
    short_id_for,
)
from .user import User
from .travel_record import TravelRecord
from .site_config import AnalyticsConfig, CommentConfig, ObjectStorageConfig

__all__ = [
    "AdjacentArticles",
    "Article",
    "ArticleDocument",
    "ArticleFields",
    "ArticleLink",
    "ArticlePage",
    "ArticleQuery",
    "AuthorInfo",
    "TagCount",
    "UNSET",
    "short_id_for",
    "User",
    "TravelRecord",
    "AnalyticsConfig",
    "CommentConfig",
    "ObjectStorageConfig",
]
