"""Logging setup for the dashboard service.

Each ``log_level_*`` setting drives a group of loggers, so SQL echo or
outbound HTTP chatter can be turned down while the entity store and the
remote client stay verbose (or the other way round).

Call :func:`setup_logging` once, from the FastAPI lifespan.
"""

import logging
import sys

from assetdash.config import Settings, get_settings

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"

# Settings field -> loggers it controls.
LOGGER_GROUPS: dict[str, tuple[str, ...]] = {
    "log_level_sql": ("sqlalchemy.engine", "sqlalchemy.pool", "aiosqlite"),
    "log_level_http": ("httpx", "httpcore"),
    "log_level_uvicorn": ("uvicorn", "uvicorn.access", "uvicorn.error"),
    "log_level_store": (
        "assetdash.application.services",
        "assetdash.infrastructure.storage",
        "assetdash.infrastructure.database",
        "assetdash.infrastructure.seed",
    ),
    "log_level_remote": ("assetdash.infrastructure.remote",),
}


def setup_logging(settings: Settings | None = None) -> dict[str, int]:
    """Apply root and per-group levels. Returns the level set on each logger."""
    settings = settings or get_settings()

    root = logging.getLogger()
    root.setLevel(level_from_name(settings.log_level))
    if not root.handlers:
        # uvicorn installs its own handler; tests and scripts do not.
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)

    applied: dict[str, int] = {}
    for field_name, logger_names in LOGGER_GROUPS.items():
        level = level_from_name(getattr(settings, field_name, "INFO"))
        for name in logger_names:
            logging.getLogger(name).setLevel(level)
            applied[name] = level

    logging.getLogger(__name__).debug(
        "Log levels: root=%s %s",
        settings.log_level,
        " ".join(
            f"{field_name.removeprefix('log_level_')}={getattr(settings, field_name)}"
            for field_name in LOGGER_GROUPS
        ),
    )
    return applied


def level_from_name(name: str) -> int:
    """``"debug"`` -> ``logging.DEBUG``; unknown names fall back to INFO."""
    level = logging.getLevelName(str(name).upper())
    return level if isinstance(level, int) else logging.INFO
