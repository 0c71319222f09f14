import logging
from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic_settings import BaseSettings

_config_logger = logging.getLogger(__name__)

_BACKEND_DIR = Path(__file__).resolve().parents[1]
_ENV_FILES = (
    _BACKEND_DIR / ".env",
    ".env",
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    app_title: str = "Asset Dashboard API"
    app_version: str = "0.1.0"
    app_env: str = "development"
    cors_origins: list[str] = ["http://localhost:5173"]

    # Remote persistence backend: empty base URL runs fully offline
    remote_api_base_url: str = ""
    remote_api_key: str = ""
    remote_api_timeout: float = 10.0

    # Local persistence of collections
    storage_backend: Literal["none", "json", "sqlite"] = "json"
    storage_dir: str = "data/store"
    database_url: str = "sqlite:///data/assetdash.db"

    # Sample data used when neither remote nor storage has a collection
    seed_file: str = str(_BACKEND_DIR / "data" / "seed.yaml")
    load_seed_data: bool = True

    # Dashboard look-ahead windows (days)
    warranty_days: int = 30
    license_days: int = 60
    maintenance_days: int = 7

    # Logging: per-category log levels (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    log_level: str = "INFO"                  # Root / app-wide
    log_level_sql: str = "WARNING"           # sqlalchemy.engine: SQL queries
    log_level_http: str = "WARNING"          # httpx / httpcore: outbound HTTP
    log_level_uvicorn: str = "INFO"          # uvicorn.access / uvicorn.error
    log_level_store: str = "INFO"            # entity store and save coordinator
    log_level_remote: str = "INFO"           # remote backend client

    model_config = {
        "env_file": _ENV_FILES,
        "env_file_encoding": "utf-8",
    }

    @property
    def remote_configured(self) -> bool:
        return bool(self.remote_api_base_url.strip())

    def model_post_init(self, __context: object) -> None:
        if not self.remote_configured:
            _config_logger.debug("REMOTE_API_BASE_URL is empty; running offline")


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance: reads .env once."""
    return Settings()
