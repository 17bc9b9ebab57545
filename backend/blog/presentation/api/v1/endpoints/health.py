"""Health check endpoint — no database access, always available."""

from pathlib import Path

from fastapi import APIRouter

from blog.config import get_settings

router = APIRouter(tags=["Health"])


@router.get("/health")
async def health_check() -> dict:
    """Application status plus whether the article tree root is present."""
    settings = get_settings()
    return {
        "status": "healthy",
        "version": settings.app_version,
        "environment": settings.app_env,
        "contentDir": Path(settings.content_dir).is_dir(),
    }
