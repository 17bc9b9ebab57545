from .article_repository import ArticleRepository
from .article_tree import ArticleTree, TreeEntry
from .auth_oracle import AuthOracle
from .site_config_repository import SiteConfigRepository
from .travel_repository import TravelRepository
from .user_repository import UserRepository

__all__ = [
    "ArticleRepository",
    "ArticleTree",
    "TreeEntry",
    "AuthOracle",
    "SiteConfigRepository",
    "TravelRepository",
    "UserRepository",
]
