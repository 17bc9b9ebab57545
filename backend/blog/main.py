"""FastAPI application factory."""

import logging
from contextlib import asynccontextmanager
from collections.abc import AsyncIterator
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from blog.config import get_settings
from blog.infrastructure.database import Base, engine
from blog.infrastructure.database.session import async_session_factory
from blog.infrastructure.database.repositories import (
    SQLAlchemySiteConfigRepository,
    SQLAlchemyTravelRepository,
    SQLAlchemyUserRepository,
)
from blog.application.services import SiteConfigService, TravelService, UserService
from blog.infrastructure.logging.log_config import setup_logging
from blog.presentation.api.router import router as api_router

logger = logging.getLogger(__name__)


async def _seed_defaults() -> None:
    """Create the first administrator, default settings rows and the sample travel map.

    Idempotent; every step only inserts when its table is empty.
    """
    settings = get_settings()
    async with async_session_factory() as session:
        users = UserService(SQLAlchemyUserRepository(session))
        await users.ensure_default_admin(
            username=settings.admin_username,
            password=settings.admin_password,
            name=settings.admin_name,
            email=settings.admin_email,
        )
        site_config = SiteConfigService(SQLAlchemySiteConfigRepository(session))
        await site_config.seed_defaults()
        await TravelService(SQLAlchemyTravelRepository(session)).seed_sample()
        await session.commit()

        # Mirror is filled from what is now committed
        await site_config.load()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan — prepare directories, create tables, seed and load settings."""
    settings = get_settings()
    setup_logging()

    # 1. SQLite database directory and article tree root
    if settings.sqlite_path is not None:
        settings.sqlite_path.parent.mkdir(parents=True, exist_ok=True)
    Path(settings.content_dir).mkdir(parents=True, exist_ok=True)

    # 2. Create all database tables
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    # 3. Seed defaults and load the configuration mirror
    await _seed_defaults()
    logger.info("Serving articles from %s", Path(settings.content_dir).resolve())

    yield

    await engine.dispose()


def create_app() -> FastAPI:
    """Factory function that builds and configures the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title=settings.app_title,
        version=settings.app_version,
        lifespan=lifespan,
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Mount API routes
    app.include_router(api_router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "blog.main:app",
        host="0.0.0.0",
        port=8020,
        reload=True,
    )
