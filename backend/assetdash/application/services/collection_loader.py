"""Initial population of collections: remote, then local storage, then sample data."""

import logging
from collections.abc import Mapping
from typing import Any, Literal

from assetdash.domain.entities import EntityKind, EntityRecord

from .entity_store import EntityStore
from .save_coordinator import SaveCoordinator

logger = logging.getLogger(__name__)

LoadSource = Literal["remote", "storage", "seed", "empty"]


class CollectionLoader:
    """Fills the store at startup or on an explicit reload. Never raises."""

    def __init__(
        self,
        store: EntityStore,
        coordinator: SaveCoordinator,
        seed: Mapping[EntityKind, list[dict[str, Any]]] | None = None,
    ):
        self._store = store
        self._coordinator = coordinator
        self._seed = dict(seed or {})

    async def load(self, kind: EntityKind) -> LoadSource:
        ok, payload = await self._coordinator.try_remote(
            f"list {kind.value}",
            lambda remote: remote.list_entities(kind),
        )
        if ok and isinstance(payload, list):
            records = self._to_records(kind, payload)
            await self._store.replace_all(kind, records)
            logger.info("Loaded %d %s records from remote", len(records), kind.value)
            return "remote"
        if ok:
            logger.warning("Remote list %s returned %s, not a list", kind.value, type(payload).__name__)

        if await self._store.load_from_storage(kind):
            logger.info("Loaded %s from local storage", kind.value)
            return "storage"

        seed_rows = self._seed.get(kind)
        if seed_rows:
            records = self._to_records(kind, seed_rows)
            await self._store.replace_all(kind, records)
            logger.info("Loaded %d sample %s records", len(records), kind.value)
            return "seed"

        return "empty"

    async def load_all(self) -> dict[EntityKind, LoadSource]:
        return {kind: await self.load(kind) for kind in EntityKind}

    @staticmethod
    def _to_records(kind: EntityKind, rows: list[Any]) -> list[EntityRecord]:
        records: list[EntityRecord] = []
        for row in rows:
            if not isinstance(row, dict):
                continue
            try:
                records.append(EntityRecord.from_payload(kind, row))
            except ValueError as exc:
                logger.warning("Skipping %s row: %s", kind.value, exc)
        return records
