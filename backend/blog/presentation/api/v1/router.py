"""V1 API router — aggregates all v1 endpoint routers."""

from fastapi import APIRouter

from blog.presentation.api.v1.endpoints.health import router as health_router
from blog.presentation.api.v1.endpoints.articles import router as articles_router
from blog.presentation.api.v1.endpoints.blogs import router as blogs_router
from blog.presentation.api.v1.endpoints.short_links import router as short_links_router
from blog.presentation.api.v1.endpoints.travel import router as travel_router
from blog.presentation.api.v1.endpoints.site_config import router as site_config_router
from blog.presentation.api.v1.endpoints.users import router as users_router

router = APIRouter(prefix="/v1")
router.include_router(health_router)
router.include_router(articles_router)
router.include_router(blogs_router)
router.include_router(short_links_router)
router.include_router(travel_router)
router.include_router(site_config_router)
router.include_router(users_router)
