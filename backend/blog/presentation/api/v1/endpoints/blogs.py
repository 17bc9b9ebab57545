"""Public blog endpoints: published listings, tags and the reader view."""

import logging

from fastapi import APIRouter, Depends, Query

from blog.application.schemas import (
    ArticleContentResponse,
    ArticlePageResponse,
    OperationResult,
    PathRequest,
    TagCountResponse,
)
from blog.application.services import ArticleService
from blog.domain.entities import ArticleQuery
from blog.domain.exceptions import EntityNotFoundError, IOFailure
from blog.infrastructure.dependencies import get_article_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/blogs", tags=["Blogs"])


@router.get("", response_model=OperationResult)
async def list_published(
    page: str | None = None,
    page_size: str | None = Query(None, alias="pageSize"),
    sort_by: str | None = Query(None, alias="sortBy"),
    sort_order: str | None = Query(None, alias="sortOrder"),
    search: str = "",
    tag: str = "",
    is_sticky: bool | None = Query(None, alias="isSticky"),
    service: ArticleService = Depends(get_article_service),
) -> OperationResult:
    """Published articles, filtered, sorted and paged. Out-of-range paging is clamped."""
    query = ArticleQuery(
        page=page,
        page_size=page_size,
        sort_by=sort_by,
        sort_order=sort_order,
        search=search,
        tag=tag,
        is_sticky=is_sticky,
    )
    result = await service.query_published(query)
    return OperationResult.ok(ArticlePageResponse.from_page(result))


@router.get("/recent", response_model=OperationResult)
async def recent(service: ArticleService = Depends(get_article_service)) -> OperationResult:
    return OperationResult.ok(ArticlePageResponse.from_page(await service.recent_articles()))


@router.get("/sticky", response_model=OperationResult)
async def sticky(service: ArticleService = Depends(get_article_service)) -> OperationResult:
    return OperationResult.ok(ArticlePageResponse.from_page(await service.sticky_articles()))


@router.get("/tags", response_model=OperationResult)
async def tags(service: ArticleService = Depends(get_article_service)) -> OperationResult:
    """Tag histogram over published articles, most used first."""
    return OperationResult.ok(TagCountResponse.from_entities(await service.get_tags_with_count()))


@router.post("/content", response_model=OperationResult)
async def read_article(
    data: PathRequest,
    service: ArticleService = Depends(get_article_service),
) -> OperationResult:
    try:
        document = await service.read_article(data.path)
    except (EntityNotFoundError, IOFailure) as e:
        logger.warning("Reading article '%s' failed: %s", data.path, e)
        return OperationResult.fail(str(e))
    return OperationResult.ok(ArticleContentResponse.from_document(document))
