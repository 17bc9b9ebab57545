"""Domain entities — pure Python business objects, no framework dependencies."""

import base64
import hashlib
import math
from dataclasses import dataclass, field, fields
from datetime import datetime, timezone
from typing import Any


EPOCH_ISO = "1970-01-01T00:00:00+00:00"

PLACEHOLDER_AUTHOR = "Unknown author"


def utc_now_iso() -> str:
    """Current instant as an ISO-8601 UTC string (uniform width, sorts chronologically)."""
    return datetime.now(timezone.utc).isoformat(timespec="microseconds")


def short_id_for(path: str) -> str:
    """Compact URL-safe identifier derived from an article path."""
    digest = hashlib.sha256(path.encode("utf-8")).digest()
    return base64.urlsafe_b64encode(digest).decode("ascii")[:8]


class _Unset:
    """Marker for a field the caller did not supply."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "UNSET"


UNSET: Any = _Unset()


@dataclass
class Article:
    """An article row: metadata plus optional Markdown body, keyed by its directory slug."""

    path: str
    title: str
    date: str
    userid: int
    description: str | None = None
    image: str | None = None
    tags: list[str] = field(default_factory=list)
    published: bool = False
    is_sticky: bool = False
    content: str | None = None
    modify_time: str = field(default_factory=utc_now_iso)

    # Derived per response, never persisted
    is_saved: bool = True
    author: str = ""
    avatar: str | None = None
    new_blog: bool = False

    @property
    def short_id(self) -> str:
        return short_id_for(self.path)


@dataclass
class ArticleFields:
    """Front-matter fields supplied to a save.

    Every attribute defaults to ``UNSET`` so an update can tell
    "not supplied" apart from "supplied as empty".
    """

    title: Any = UNSET
    date: Any = UNSET
    description: Any = UNSET
    image: Any = UNSET
    tags: Any = UNSET
    published: Any = UNSET
    is_sticky: Any = UNSET
    content: Any = UNSET

    _FRONT_MATTER_KEYS = {
        "title": "title",
        "date": "date",
        "description": "description",
        "image": "image",
        "tags": "tags",
        "published": "published",
        "isSticky": "is_sticky",
    }

    @classmethod
    def from_front_matter(cls, metadata: dict[str, Any]) -> "ArticleFields":
        """Build from a parsed front-matter mapping; absent keys stay UNSET."""
        values = {
            attr: metadata[key]
            for key, attr in cls._FRONT_MATTER_KEYS.items()
            if key in metadata
        }
        return cls(**values)

    def supplied(self) -> dict[str, Any]:
        """Only the fields the caller actually provided."""
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if getattr(self, f.name) is not UNSET
        }

    def to_front_matter(self) -> dict[str, Any]:
        """Inverse of from_front_matter, omitting UNSET fields and the body."""
        return {
            key: getattr(self, attr)
            for key, attr in self._FRONT_MATTER_KEYS.items()
            if getattr(self, attr) is not UNSET
        }


SORTABLE_FIELDS = ("path", "title", "date", "modifyTime", "published")

MAX_PAGE_SIZE = 100


def _coerce_positive_int(value: Any, default: int) -> int:
    """Floor ``value`` to an int; unparseable, NaN or zero falls back to ``default``."""
    try:
        number = float(value)
    except (TypeError, ValueError):
        return default
    if number != number or number == 0:
        return default
    if number in (float("inf"), float("-inf")):
        return default
    return math.floor(number)


@dataclass
class ArticleQuery:
    """Filter, sort and page parameters for published-article listings."""

    page: Any = 1
    page_size: Any = 10
    sort_by: str | None = "date"
    sort_order: str | None = "desc"
    search: str = ""
    tag: str = ""
    is_sticky: bool | None = None

    def normalized(self) -> "ArticleQuery":
        """Clamp paging, restrict sorting to the allow-list and strip filters."""
        sort_order = (self.sort_order or "").lower()
        return ArticleQuery(
            page=max(1, _coerce_positive_int(self.page, 1)),
            page_size=max(1, min(MAX_PAGE_SIZE, _coerce_positive_int(self.page_size, 10))),
            sort_by=self.sort_by if self.sort_by in SORTABLE_FIELDS else "date",
            sort_order="asc" if sort_order == "asc" else "desc",
            search=(self.search or "").strip(),
            tag=(self.tag or "").strip(),
            is_sticky=self.is_sticky,
        )

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.page_size


@dataclass
class ArticlePage:
    """One page of a listing plus the total number of matching rows."""

    items: list[Article]
    total: int


@dataclass
class TagCount:
    tag: str
    count: int


@dataclass
class ArticleLink:
    title: str
    path: str


@dataclass
class AdjacentArticles:
    """Neighbours of an article in (date desc, path desc) order."""

    prev: ArticleLink | None = None
    next: ArticleLink | None = None


@dataclass
class AuthorInfo:
    name: str = PLACEHOLDER_AUTHOR
    avatar: str | None = None


@dataclass
class ArticleDocument:
    """A rendered article as served to readers."""

    path: str
    content: str
    front_matter: dict[str, Any]
    author: AuthorInfo = field(default_factory=AuthorInfo)
    adjacent: AdjacentArticles = field(default_factory=AdjacentArticles)
