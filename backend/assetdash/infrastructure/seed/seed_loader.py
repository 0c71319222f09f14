"""Sample data loader: parses the bundled YAML seed file.

The file maps storage keys (``assets``, ``compliance-checks``, ...) to lists
of flat records. It is only used when neither the remote backend nor local
storage can provide a collection.
"""

import logging
from pathlib import Path
from typing import Any

import yaml

from assetdash.domain.entities import EntityKind

logger = logging.getLogger(__name__)

_KINDS_BY_KEY = {kind.storage_key: kind for kind in EntityKind}


def load_seed_file(path: str | Path) -> dict[EntityKind, list[dict[str, Any]]]:
    """Read ``path`` and return sample rows per kind; {} if missing or invalid."""
    seed_path = Path(path)
    if not seed_path.exists():
        logger.info("No seed file at %s", seed_path)
        return {}
    try:
        with seed_path.open("r", encoding="utf-8") as fh:
            raw = yaml.safe_load(fh) or {}
    except (OSError, yaml.YAMLError) as exc:
        logger.warning("Could not parse seed file %s: %s", seed_path, exc)
        return {}
    if not isinstance(raw, dict):
        logger.warning("Seed file %s is not a mapping", seed_path)
        return {}

    seed: dict[EntityKind, list[dict[str, Any]]] = {}
    for key, rows in raw.items():
        kind = _KINDS_BY_KEY.get(str(key))
        if kind is None:
            logger.warning("Seed file has unknown section '%s'", key)
            continue
        if not isinstance(rows, list):
            continue
        seed[kind] = [row for row in rows if isinstance(row, dict)]
    logger.info(
        "Seed data: %s",
        ", ".join(f"{k.value}={len(v)}" for k, v in seed.items()) or "empty",
    )
    return seed
