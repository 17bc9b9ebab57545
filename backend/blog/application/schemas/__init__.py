from .common import CamelModel, OperationResult
from .article import (
    AdjacentResponse,
    ArticleContentResponse,
    ArticleLinkResponse,
    ArticlePageResponse,
    ArticleSourceResponse,
    ArticleSummaryResponse,
    AuthorResponse,
    DeleteResult,
    PathRequest,
    RebuildResult,
    SaveArticleRequest,
    ShortLinkResponse,
    TagCountResponse,
)
from .travel import TravelRecordsResponse, TravelRecordsUpdate
from .site_config import AnalyticsConfigSchema, CommentConfigSchema, ObjectStorageConfigSchema
from .user import ChangePasswordRequest, ProfileUpdate, UserResponse
