from .article_service import ArticleService
from .site_config_service import SiteConfigService, SiteConfigState, config_state
from .travel_service import TravelService
from .user_service import UserService

__all__ = [
    "ArticleService",
    "SiteConfigService",
    "SiteConfigState",
    "config_state",
    "TravelService",
    "UserService",
]
