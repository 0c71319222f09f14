"""Entity store: the single owner of every entity collection.

All mutations go through this object. Each one notifies subscribers and, when
a local storage adapter is configured, mirrors the changed collection to it
under the kind's storage key.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Literal

from assetdash.application.interfaces import KeyValueStorage
from assetdash.domain.entities import EntityKind, EntityRecord

from .entity_collection import EntityCollection

logger = logging.getLogger(__name__)

StoreAction = Literal["upsert", "remove", "replace"]


@dataclass(frozen=True)
class StoreChange:
    """Notification sent to subscribers after a collection changed."""

    kind: EntityKind
    action: StoreAction
    record_id: str | None = None


Subscriber = Callable[[StoreChange], None]


class EntityStore:
    """Explicit application state: one :class:`EntityCollection` per kind."""

    def __init__(self, storage: KeyValueStorage | None = None):
        self._storage = storage
        self._collections: dict[EntityKind, EntityCollection] = {
            kind: EntityCollection(kind) for kind in EntityKind
        }
        self._subscribers: list[Subscriber] = []

    @property
    def storage(self) -> KeyValueStorage | None:
        return self._storage

    # ── Reads ───────────────────────────────────────────────────────

    def collection(self, kind: EntityKind) -> EntityCollection:
        return self._collections[kind]

    def list(self, kind: EntityKind) -> list[EntityRecord]:
        return self._collections[kind].list()

    def get(self, kind: EntityKind, record_id: str) -> EntityRecord | None:
        return self._collections[kind].get(record_id)

    def pending_sync(self, kind: EntityKind | None = None) -> list[EntityRecord]:
        """Records whose latest local state the remote never confirmed."""
        kinds = [kind] if kind is not None else list(EntityKind)
        return [
            record
            for k in kinds
            for record in self._collections[k]
            if record.pending_sync
        ]

    # ── Mutations ───────────────────────────────────────────────────

    async def upsert(self, kind: EntityKind, record: EntityRecord) -> list[EntityRecord]:
        records = self._collections[kind].upsert(record)
        logger.debug("Upserted %s %s", kind.value, record.id)
        await self._after_change(StoreChange(kind, "upsert", record.id))
        return records

    async def remove(self, kind: EntityKind, record_id: str) -> bool:
        removed = self._collections[kind].remove(record_id)
        if not removed:
            logger.debug("Remove %s %s: not present", kind.value, record_id)
            return False
        logger.debug("Removed %s %s", kind.value, record_id)
        await self._after_change(StoreChange(kind, "remove", record_id))
        return True

    async def replace_all(
        self, kind: EntityKind, records: list[EntityRecord], *, persist: bool = True
    ) -> list[EntityRecord]:
        result = self._collections[kind].replace_all(records)
        logger.debug("Replaced %s collection (%d records)", kind.value, len(result))
        await self._after_change(StoreChange(kind, "replace"), persist=persist)
        return result

    # ── Subscriptions ───────────────────────────────────────────────

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """Register ``callback`` for change notifications; returns an unsubscribe function."""
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    # ── Local storage ───────────────────────────────────────────────

    async def load_from_storage(self, kind: EntityKind) -> list[EntityRecord]:
        """Populate ``kind`` from local storage. Returns what was loaded.

        Rows that cannot be turned into records are skipped. The collection is
        left untouched when storage holds nothing for the kind.
        """
        if self._storage is None:
            return []
        rows = await self._storage.load(kind.storage_key, [])
        if not isinstance(rows, list) or not rows:
            return []

        records: list[EntityRecord] = []
        for row in rows:
            if not isinstance(row, dict):
                logger.warning("Skipping non-object %s row in storage", kind.value)
                continue
            try:
                records.append(EntityRecord.from_storage(kind, row))
            except ValueError as exc:
                logger.warning("Skipping malformed %s row in storage: %s", kind.value, exc)

        if records:
            await self.replace_all(kind, records, persist=False)
        return records

    async def _after_change(self, change: StoreChange, *, persist: bool = True) -> None:
        if persist:
            await self._persist(change.kind)
        for callback in list(self._subscribers):
            try:
                callback(change)
            except Exception:
                logger.exception("Store subscriber failed for %s", change.kind.value)

    async def _persist(self, kind: EntityKind) -> None:
        if self._storage is None:
            return
        rows = [record.to_storage() for record in self._collections[kind]]
        try:
            await self._storage.save(kind.storage_key, rows)
        except Exception as exc:
            logger.warning("Could not persist %s collection: %s", kind.value, exc)
