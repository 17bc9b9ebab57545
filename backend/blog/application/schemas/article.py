"""Pydantic DTOs for the article endpoints."""

from typing import Any

from pydantic import Field

from blog.domain.entities import ArticleDocument, ArticlePage, TagCount

from .common import CamelModel


class SaveArticleRequest(CamelModel):
    """Full ``index.md`` text (front matter + body) for ``path``."""

    path: str = Field(..., min_length=1, examples=["hello-world"])
    content: str = Field("", examples=["---\ntitle: Hello\ndate: 2024-01-01\npublished: true\n---\nBody"])
    original_path: str = ""


class PathRequest(CamelModel):
    path: str = Field(..., min_length=1)


class ArticleSummaryResponse(CamelModel):
    """An article as it appears in listings (no body)."""

    path: str
    title: str
    date: str
    description: str | None = None
    image: str | None = None
    tags: list[str] = Field(default_factory=list)
    published: bool = False
    is_sticky: bool = False
    modify_time: str
    is_saved: bool = True
    short_id: str
    userid: int = 0
    author: str = ""
    avatar: str | None = None
    new_blog: bool = False


class ArticlePageResponse(CamelModel):
    items: list[ArticleSummaryResponse] = Field(default_factory=list, alias="list")
    total: int = 0

    @classmethod
    def from_page(cls, page: ArticlePage) -> "ArticlePageResponse":
        return cls(
            items=[ArticleSummaryResponse.model_validate(a) for a in page.items],
            total=page.total,
        )


class TagCountResponse(CamelModel):
    tag: str
    count: int

    @classmethod
    def from_entities(cls, counts: list[TagCount]) -> list["TagCountResponse"]:
        return [cls.model_validate(c) for c in counts]


class ArticleLinkResponse(CamelModel):
    title: str
    path: str


class AdjacentResponse(CamelModel):
    prev: ArticleLinkResponse | None = None
    next: ArticleLinkResponse | None = None


class AuthorResponse(CamelModel):
    name: str
    avatar: str | None = None


class ArticleSourceResponse(CamelModel):
    """Editor view of ``index.md``."""

    content: str
    front_matter: dict[str, Any] = Field(default_factory=dict)


class ArticleContentResponse(ArticleSourceResponse):
    """Reader view: body, front matter, author and neighbours."""

    author: AuthorResponse
    adjacent: AdjacentResponse

    @classmethod
    def from_document(cls, document: ArticleDocument) -> "ArticleContentResponse":
        return cls.model_validate(document)


class DeleteResult(CamelModel):
    deleted_path: str
    type: str


class RebuildResult(CamelModel):
    count: int
    message: str


class ShortLinkResponse(CamelModel):
    path: str
