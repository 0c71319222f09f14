"""Local filesystem key-value storage: one JSON document per key.

Storage layout:
    <storage_dir>/<key>.json
"""

import json
import logging
import re
from pathlib import Path
from typing import Any

from assetdash.application.interfaces import KeyValueStorage

logger = logging.getLogger(__name__)


def _sanitise(key: str, max_len: int = 80) -> str:
    """Replace non-word characters with underscores and truncate."""
    return re.sub(r"[^\w\-]", "_", key)[:max_len].strip("_") or "unnamed"


class JsonFileStorage(KeyValueStorage):
    """Infrastructure adapter for local JSON-file persistence."""

    def __init__(self, storage_dir: str | Path):
        self._dir = Path(storage_dir)
        self._dir.mkdir(parents=True, exist_ok=True)

    def path_for(self, key: str) -> Path:
        return self._dir / f"{_sanitise(key)}.json"

    async def load(self, key: str, default: Any) -> Any:
        path = self.path_for(key)
        if not path.exists():
            return default
        try:
            return json.loads(path.read_text("utf-8"))
        except (OSError, ValueError):
            logger.warning("Could not read %s, using default", path)
            return default

    async def save(self, key: str, value: Any) -> None:
        path = self.path_for(key)
        tmp_path = path.with_suffix(".json.tmp")
        tmp_path.write_text(json.dumps(value, indent=2, default=str), encoding="utf-8")
        tmp_path.replace(path)
        logger.debug("Saved %s", path)
