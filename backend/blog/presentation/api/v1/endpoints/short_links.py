"""Short link resolution: ``/s/{short_id}`` → article path."""

from fastapi import APIRouter, Depends, HTTPException, status

from blog.application.schemas import OperationResult, ShortLinkResponse
from blog.application.services import ArticleService
from blog.infrastructure.dependencies import get_article_service

router = APIRouter(prefix="/s", tags=["Short links"])


@router.get("/{short_id}", response_model=OperationResult)
async def resolve_short_id(
    short_id: str,
    service: ArticleService = Depends(get_article_service),
) -> OperationResult:
    article = await service.get_article_by_short_id(short_id)
    if article is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Article not found")
    return OperationResult.ok(ShortLinkResponse(path=article.path))
