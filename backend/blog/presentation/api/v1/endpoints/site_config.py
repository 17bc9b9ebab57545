"""Site configuration endpoints: comments, analytics and object storage.

Reads come from the in-memory mirror; saves write through to the database.
Object-storage credentials are only readable by an authenticated user.
"""

from fastapi import APIRouter, Depends

from blog.application.schemas import (
    AnalyticsConfigSchema,
    CommentConfigSchema,
    ObjectStorageConfigSchema,
    OperationResult,
)
from blog.application.services import SiteConfigService
from blog.infrastructure.dependencies import get_site_config_service, require_user_id

router = APIRouter(tags=["Site configuration"])


@router.get("/comments/config", response_model=OperationResult)
async def get_comment_config(
    service: SiteConfigService = Depends(get_site_config_service),
) -> OperationResult:
    return OperationResult.ok(CommentConfigSchema.model_validate(service.get_comment_config()))


@router.post("/comments/config", response_model=OperationResult, dependencies=[Depends(require_user_id)])
async def save_comment_config(
    data: CommentConfigSchema,
    service: SiteConfigService = Depends(get_site_config_service),
) -> OperationResult:
    saved = await service.save_comment_config(data.to_entity())
    return OperationResult.ok(CommentConfigSchema.model_validate(saved))


@router.get("/umami/config", response_model=OperationResult)
async def get_analytics_config(
    service: SiteConfigService = Depends(get_site_config_service),
) -> OperationResult:
    return OperationResult.ok(AnalyticsConfigSchema.model_validate(service.get_analytics_config()))


@router.post("/umami/config", response_model=OperationResult, dependencies=[Depends(require_user_id)])
async def save_analytics_config(
    data: AnalyticsConfigSchema,
    service: SiteConfigService = Depends(get_site_config_service),
) -> OperationResult:
    saved = await service.save_analytics_config(data.to_entity())
    return OperationResult.ok(AnalyticsConfigSchema.model_validate(saved))


@router.get("/s3/config", response_model=OperationResult, dependencies=[Depends(require_user_id)])
async def get_object_storage_config(
    service: SiteConfigService = Depends(get_site_config_service),
) -> OperationResult:
    return OperationResult.ok(ObjectStorageConfigSchema.model_validate(service.get_object_storage_config()))


@router.post("/s3/config", response_model=OperationResult, dependencies=[Depends(require_user_id)])
async def save_object_storage_config(
    data: ObjectStorageConfigSchema,
    service: SiteConfigService = Depends(get_site_config_service),
) -> OperationResult:
    saved = await service.save_object_storage_config(data.to_entity())
    return OperationResult.ok(ObjectStorageConfigSchema.model_validate(saved))
