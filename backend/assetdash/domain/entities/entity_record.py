"""Domain entity: a tagged record of any managed kind."""

import copy
from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from typing import Any

from .entity_kind import EntityKind


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class EntityRecord:
    """A single asset, license, alert, ... held by the entity store.

    ``kind`` is fixed when the record is created and is never inferred from
    the attributes in ``data``. ``pending_sync`` is set when the latest local
    state of the record was not accepted by the remote backend.
    """

    kind: EntityKind
    id: str
    data: dict[str, Any] = field(default_factory=dict)
    pending_sync: bool = False
    created_at: datetime = field(default_factory=_utcnow)
    updated_at: datetime = field(default_factory=_utcnow)

    def get(self, key: str, default: Any = None) -> Any:
        return self.data.get(key, default)

    def merged(self, changes: dict[str, Any], *, pending_sync: bool | None = None) -> "EntityRecord":
        """Return a copy with ``changes`` laid over the current fields.

        The ``id`` is kept whatever ``changes`` contains.
        """
        data = {**self.data, **strip_id(changes)}
        return replace(
            self,
            data=data,
            pending_sync=self.pending_sync if pending_sync is None else pending_sync,
            updated_at=_utcnow(),
        )

    def to_payload(self) -> dict[str, Any]:
        """Flat JSON shape used by the remote API and the presentation layer."""
        return {"id": self.id, **copy.deepcopy(self.data)}

    def to_storage(self) -> dict[str, Any]:
        """Row shape written to local key-value storage."""
        return {
            "id": self.id,
            "kind": self.kind.value,
            "data": copy.deepcopy(self.data),
            "pendingSync": self.pending_sync,
            "createdAt": self.created_at.isoformat(),
            "updatedAt": self.updated_at.isoformat(),
        }

    @classmethod
    def from_payload(
        cls, kind: EntityKind, payload: dict[str, Any], *, pending_sync: bool = False
    ) -> "EntityRecord":
        """Build a record from a flat remote payload (``{"id": ..., **fields}``)."""
        record_id = payload.get("id")
        if record_id is None or str(record_id) == "":
            raise ValueError(f"{kind.label} payload has no id")
        return cls(
            kind=kind,
            id=str(record_id),
            data=strip_id(payload),
            pending_sync=pending_sync,
        )

    @classmethod
    def from_storage(cls, kind: EntityKind, row: dict[str, Any]) -> "EntityRecord":
        """Inverse of :meth:`to_storage`. Raises ``ValueError`` on malformed rows."""
        if "data" not in row:
            # Tolerate flat rows written by hand or by older exports.
            flat = {k: v for k, v in row.items() if k != "pendingSync"}
            return cls.from_payload(kind, flat, pending_sync=bool(row.get("pendingSync", False)))
        if not isinstance(row["data"], dict):
            raise ValueError(f"{kind.label} row has non-object data")
        record = cls.from_payload(kind, {"id": row.get("id"), **row["data"]})
        record.pending_sync = bool(row.get("pendingSync", False))
        record.created_at = _parse_timestamp(row.get("createdAt")) or record.created_at
        record.updated_at = _parse_timestamp(row.get("updatedAt")) or record.updated_at
        return record


def strip_id(fields: dict[str, Any]) -> dict[str, Any]:
    """Copy of ``fields`` without the ``id`` key (drafts never carry one)."""
    return {k: copy.deepcopy(v) for k, v in fields.items() if k != "id"}


def _parse_timestamp(raw: Any) -> datetime | None:
    if not isinstance(raw, str):
        return None
    try:
        return datetime.fromisoformat(raw)
    except ValueError:
        return None
