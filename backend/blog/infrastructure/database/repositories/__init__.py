from .article_repository import SQLAlchemyArticleRepository
from .user_repository import SQLAlchemyUserRepository
from .travel_repository import SQLAlchemyTravelRepository
from .site_config_repository import SQLAlchemySiteConfigRepository

__all__ = [
    "SQLAlchemyArticleRepository",
    "SQLAlchemyUserRepository",
    "SQLAlchemyTravelRepository",
    "SQLAlchemySiteConfigRepository",
]
