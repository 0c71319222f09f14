"""Insertion-ordered collection of records of one kind, keyed by id."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from assetdash.domain.entities import EntityKind, EntityRecord
from assetdash.domain.exceptions import EntityKindMismatchError


class EntityCollection:
    """Authoritative in-memory set of records for a single entity kind.

    Replacing a record keeps its position; new ids are appended. No field
    validation happens here.
    """

    def __init__(self, kind: EntityKind, records: Iterable[EntityRecord] = ()):
        self._kind = kind
        self._records: dict[str, EntityRecord] = {}
        for record in records:
            self.upsert(record)

    @property
    def kind(self) -> EntityKind:
        return self._kind

    def list(self) -> list[EntityRecord]:
        """Current records in insertion order."""
        return list(self._records.values())

    def get(self, record_id: str) -> EntityRecord | None:
        return self._records.get(record_id)

    def ids(self) -> set[str]:
        return set(self._records)

    def upsert(self, record: EntityRecord) -> list[EntityRecord]:
        """Insert ``record`` or replace the one with the same id in place."""
        if record.kind is not self._kind:
            raise EntityKindMismatchError(self._kind.value, record.kind.value)
        self._records[record.id] = record
        return self.list()

    def remove(self, record_id: str) -> bool:
        """Drop the record with ``record_id``. Returns False if it was absent."""
        return self._records.pop(record_id, None) is not None

    def replace_all(self, records: Iterable[EntityRecord]) -> list[EntityRecord]:
        self._records.clear()
        for record in records:
            self.upsert(record)
        return self.list()

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, record_id: object) -> bool:
        return record_id in self._records

    def __iter__(self) -> Iterator[EntityRecord]:
        return iter(self.list())
