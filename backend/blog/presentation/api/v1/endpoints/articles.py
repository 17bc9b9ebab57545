"""Admin article endpoints: list, save, delete, rebuild and read the source of articles."""

import logging

from fastapi import APIRouter, Depends

from blog.application.schemas import (
    ArticleSourceResponse,
    ArticleSummaryResponse,
    DeleteResult,
    OperationResult,
    PathRequest,
    RebuildResult,
    SaveArticleRequest,
)
from blog.application.services import ArticleService
from blog.domain.entities import ArticleFields
from blog.domain.exceptions import (
    EntityNotFoundError,
    IOFailure,
    NoOpError,
    ParseFailure,
    ValidationError,
)
from blog.infrastructure.content import parse_front_matter
from blog.infrastructure.dependencies import get_article_service, require_user_id

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/articles", tags=["Articles"], dependencies=[Depends(require_user_id)])

_OPERATION_ERRORS = (EntityNotFoundError, IOFailure, NoOpError, ParseFailure, ValidationError)


@router.get("", response_model=OperationResult)
async def list_articles(
    service: ArticleService = Depends(get_article_service),
) -> OperationResult:
    """Every directory in the article tree, with index metadata where it exists."""
    try:
        articles = await service.list_for_admin()
    except IOFailure as e:
        logger.error("Listing articles failed: %s", e)
        return OperationResult.fail(str(e))
    return OperationResult.ok([ArticleSummaryResponse.model_validate(a) for a in articles])


@router.put("", response_model=OperationResult)
async def save_article(
    data: SaveArticleRequest,
    user_id: int = Depends(require_user_id),
    service: ArticleService = Depends(get_article_service),
) -> OperationResult:
    """Write ``index.md`` (renaming from ``originalPath`` if given) and update the index."""
    try:
        metadata, body = parse_front_matter(data.content, data.path)
        article = await service.save_article(
            data.path,
            ArticleFields.from_front_matter(metadata),
            body,
            original_slug=data.original_path,
            author_id=user_id,
        )
    except _OPERATION_ERRORS as e:
        logger.warning("Saving article '%s' failed: %s", data.path, e)
        return OperationResult.fail(str(e))
    return OperationResult.ok(ArticleSummaryResponse.model_validate(article))


@router.delete("", response_model=OperationResult)
async def delete_article(
    data: PathRequest,
    service: ArticleService = Depends(get_article_service),
) -> OperationResult:
    try:
        kind = await service.delete_article(data.path)
    except _OPERATION_ERRORS as e:
        logger.warning("Deleting article '%s' failed: %s", data.path, e)
        return OperationResult.fail(str(e))
    return OperationResult.ok(DeleteResult(deleted_path=data.path, type=kind))


@router.post("/rebuild", response_model=OperationResult)
async def rebuild_index(
    user_id: int = Depends(require_user_id),
    service: ArticleService = Depends(get_article_service),
) -> OperationResult:
    """Wipe the index and re-derive it from the article tree."""
    try:
        count = await service.rebuild_index(author_id=user_id)
    except IOFailure as e:
        logger.error("Rebuilding the index failed: %s", e)
        return OperationResult.fail(str(e))
    return OperationResult.ok(RebuildResult(count=count, message=f"Index rebuilt with {count} articles"))


@router.post("/source", response_model=OperationResult)
async def read_source(
    data: PathRequest,
    service: ArticleService = Depends(get_article_service),
) -> OperationResult:
    """Raw front matter and body of ``index.md`` for the editor."""
    try:
        front_matter, content = await service.read_source(data.path)
    except _OPERATION_ERRORS as e:
        logger.warning("Reading article '%s' failed: %s", data.path, e)
        return OperationResult.fail(str(e))
    return OperationResult.ok(ArticleSourceResponse(content=content, front_matter=front_matter))
