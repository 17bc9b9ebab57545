from .article import ArticleModel
from .user import UserModel
from .travel_record import TravelRecordModel
from .site_config import CommentConfigModel, UmamiConfigModel, S3ConfigModel

__all__ = [
    "ArticleModel",
    "UserModel",
    "TravelRecordModel",
    "CommentConfigModel",
    "UmamiConfigModel",
    "S3ConfigModel",
]
