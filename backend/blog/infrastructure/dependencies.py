"""FastAPI dependency injection — wires infrastructure to application layer."""

from collections.abc import AsyncGenerator
from functools import lru_cache

from fastapi import Depends, HTTPException, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from blog.config import get_settings
from blog.application.interfaces import ArticleTree, AuthOracle
from blog.application.services import (
    ArticleService,
    SiteConfigService,
    TravelService,
    UserService,
)
from blog.infrastructure.auth import StaticTokenAuthOracle
from blog.infrastructure.content import LocalArticleTree
from blog.infrastructure.database.session import get_db_session
from blog.infrastructure.database.repositories import (
    SQLAlchemyArticleRepository,
    SQLAlchemySiteConfigRepository,
    SQLAlchemyTravelRepository,
    SQLAlchemyUserRepository,
)

AUTH_COOKIE = "auth.token"


@lru_cache
def get_article_tree() -> LocalArticleTree:
    """Process-wide article tree rooted at the configured content directory."""
    return LocalArticleTree(get_settings().content_dir)


async def get_article_service(
    session: AsyncSession = Depends(get_db_session),
    tree: ArticleTree = Depends(get_article_tree),
) -> AsyncGenerator[ArticleService, None]:
    """Provides an ArticleService with its repository and article tree wired up."""
    repository = SQLAlchemyArticleRepository(session)
    yield ArticleService(repository, tree)


async def get_user_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[UserService, None]:
    yield UserService(SQLAlchemyUserRepository(session))


async def get_travel_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[TravelService, None]:
    yield TravelService(SQLAlchemyTravelRepository(session))


async def get_site_config_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[SiteConfigService, None]:
    """Provides a SiteConfigService bound to the process-wide configuration mirror."""
    yield SiteConfigService(SQLAlchemySiteConfigRepository(session))


@lru_cache
def get_auth_oracle() -> AuthOracle:
    settings = get_settings()
    return StaticTokenAuthOracle(settings.admin_token, settings.admin_user_id)


def _extract_credential(request: Request) -> str:
    header = request.headers.get("Authorization", "")
    scheme, _, token = header.partition(" ")
    if scheme.lower() == "bearer" and token.strip():
        return token.strip()
    return request.cookies.get(AUTH_COOKIE, "")


async def require_user_id(
    request: Request,
    oracle: AuthOracle = Depends(get_auth_oracle),
) -> int:
    """Resolve the caller's user id or reject with 401."""
    user_id = oracle.verify(_extract_credential(request))
    if user_id is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return user_id
