"""SQLAlchemy ORM models for the singleton configuration rows."""

from datetime import datetime, timezone

from sqlalchemy import Boolean, DateTime, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from blog.infrastructure.database.base import Base


def _now() -> datetime:
    return datetime.now(timezone.utc)


class CommentConfigModel(Base):
    __tablename__ = "comment_config"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    enable_comments: Mapped[bool] = mapped_column(Boolean, default=False)
    repo: Mapped[str] = mapped_column(Text, default="")
    repo_id: Mapped[str] = mapped_column(Text, default="")
    category: Mapped[str] = mapped_column(Text, default="")
    category_id: Mapped[str] = mapped_column(Text, default="")
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=_now, onupdate=_now)


class UmamiConfigModel(Base):
    __tablename__ = "umami_config"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    enable_umami: Mapped[bool] = mapped_column(Boolean, default=False)
    script_url: Mapped[str] = mapped_column(Text, default="")
    website_id: Mapped[str] = mapped_column(Text, default="")
    share_url: Mapped[str] = mapped_column(Text, default="")
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=_now, onupdate=_now)


class S3ConfigModel(Base):
    __tablename__ = "s3_config"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    enable_s3: Mapped[bool] = mapped_column(Boolean, default=False)
    access_key_id: Mapped[str] = mapped_column(Text, default="")
    secret_access_key: Mapped[str] = mapped_column(Text, default="")
    region: Mapped[str] = mapped_column(Text, default="")
    bucket: Mapped[str] = mapped_column(Text, default="")
    endpoint: Mapped[str] = mapped_column(Text, default="")
    public_url: Mapped[str] = mapped_column(Text, default="")
    path: Mapped[str] = mapped_column(Text, default="")
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=_now, onupdate=_now)
