import logging
from pathlib import Path

from pydantic_settings import BaseSettings
from functools import lru_cache

_config_logger = logging.getLogger(__name__)

_BACKEND_DIR = Path(__file__).resolve().parents[1]
_ENV_FILES = (
    _BACKEND_DIR / ".env",
    ".env",
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    app_title: str = "Blog API"
    app_version: str = "0.1.0"
    app_env: str = "development"
    database_url: str = "sqlite:///data/blog.sqlite"
    cors_origins: list[str] = ["http://localhost:3000"]

    # Article tree: one sub-directory per slug, each holding index.md
    content_dir: str = "data/articles"

    # Bearer credential accepted by the default auth oracle
    admin_token: str = ""
    admin_user_id: int = 1

    # Administrator seeded on first boot
    admin_username: str = "admin"
    admin_password: str = "admin123"
    admin_name: str = "Administrator"
    admin_email: str = "admin@example.com"

    # Per-category log levels (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    log_level: str = "INFO"                  # Root / app-wide
    log_level_sql: str = "WARNING"           # sqlalchemy.engine SQL statements
    log_level_http: str = "WARNING"          # httpx / httpcore
    log_level_uvicorn: str = "INFO"          # uvicorn.access / uvicorn.error
    log_level_reconcile: str = "INFO"        # ReconciliationEngine pipeline

    model_config = {
        "env_file": _ENV_FILES,
        "env_file_encoding": "utf-8",
    }

    @property
    def sqlite_path(self) -> Path | None:
        """Filesystem location of the SQLite database, if the URL points at a file."""
        prefix = "sqlite:///"
        if not self.database_url.startswith(prefix):
            return None
        raw = self.database_url[len(prefix):]
        if not raw or raw == ":memory:":
            return None
        return Path(raw)

    def model_post_init(self, __context: object) -> None:
        if not self.admin_token:
            _config_logger.warning("ADMIN_TOKEN is not configured; admin endpoints will reject every request")


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance — reads .env once."""
    return Settings()
