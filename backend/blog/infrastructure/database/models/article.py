"""SQLAlchemy ORM model for the Article index."""

from sqlalchemy import Boolean, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from blog.domain.entities.article import utc_now_iso
from blog.infrastructure.database.base import Base
from blog.infrastructure.database.tag_codec import EMPTY_TAGS


class ArticleModel(Base):
    """ORM model — maps to the 'articles' table. ``path`` is the directory slug."""

    __tablename__ = "articles"

    path: Mapped[str] = mapped_column(String(255), primary_key=True)
    title: Mapped[str] = mapped_column(Text, nullable=False)
    date: Mapped[str] = mapped_column(String(64), nullable=False, index=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    image: Mapped[str | None] = mapped_column(Text, nullable=True)
    tags: Mapped[str] = mapped_column(Text, nullable=False, default=EMPTY_TAGS, server_default=EMPTY_TAGS)
    published: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False, server_default="0")
    userid: Mapped[int] = mapped_column(Integer, nullable=False)
    is_sticky: Mapped[bool] = mapped_column("isSticky", Boolean, default=False, server_default="0")
    content: Mapped[str | None] = mapped_column(Text, nullable=True)
    modify_time: Mapped[str] = mapped_column("modifyTime", String(40), nullable=False, default=utc_now_iso)

    def __repr__(self) -> str:
        return f"<ArticleModel(path='{self.path}', title='{self.title}')>"
