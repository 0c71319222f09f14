"""Save coordinator: remote-first writes with a local fallback, for every kind.

A save never fails from the caller's point of view: when the remote backend
is unreachable, rejects the write or answers without a usable record, the
change is applied locally and the record is flagged ``pending_sync``. There
is no later replay of those records.
"""

import logging
import time
from collections.abc import Awaitable, Callable
from typing import Any

from assetdash.application.interfaces import RemoteApi
from assetdash.domain.entities import (
    EntityKind,
    EntityRecord,
    apply_local_defaults,
    strip_id,
)
from assetdash.domain.exceptions import EntityKindMismatchError

from .editing_session import EditingSession
from .entity_store import EntityStore

logger = logging.getLogger(__name__)

RemoteCall = Callable[[RemoteApi], Awaitable[Any]]


class SaveCoordinator:
    """Creates, updates, patches and deletes records of any kind."""

    def __init__(
        self,
        store: EntityStore,
        session: EditingSession,
        remote: RemoteApi | None = None,
        clock: Callable[[], float] = time.time,
    ):
        self._store = store
        self._session = session
        self._remote = remote
        self._clock = clock

    @property
    def remote(self) -> RemoteApi | None:
        return self._remote

    async def save(
        self,
        kind: EntityKind,
        draft: dict[str, Any],
        editing: EntityRecord | None = None,
    ) -> EntityRecord | None:
        """Persist a form submission and close the kind's form.

        With ``editing`` the draft is merged onto the stored record with that
        id. When that record is no longer in the collection nothing is written
        and None is returned. Without ``editing`` a new record is created,
        server-assigned when possible.
        """
        fields = strip_id(draft)
        try:
            if editing is not None:
                if editing.kind is not kind:
                    raise EntityKindMismatchError(kind.value, editing.kind.value)
                current = self._store.get(kind, editing.id)
                if current is None:
                    logger.debug("Update %s %s: no longer present", kind.value, editing.id)
                    return None
                record = await self._update(kind, current, fields)
            else:
                record = await self._create(kind, fields)
            await self._store.upsert(kind, record)
            return record
        finally:
            self._session.close(kind)

    async def save_from_session(
        self, kind: EntityKind, draft: dict[str, Any]
    ) -> EntityRecord | None:
        """Submit the kind's open form: update if it edits a record, else create."""
        return await self.save(kind, draft, editing=self._session.editing(kind))

    async def delete(self, kind: EntityKind, record_id: str) -> bool:
        """Remove a record. Unknown ids are a no-op returning False."""
        if self._store.get(kind, record_id) is None:
            return False
        await self.try_remote(
            f"delete {kind.value} {record_id}",
            lambda remote: remote.delete_entity(kind, record_id),
        )
        editing = self._session.editing(kind)
        if editing is not None and editing.id == record_id:
            self._session.close(kind)
        return await self._store.remove(kind, record_id)

    async def patch(
        self,
        kind: EntityKind,
        record_id: str,
        changes: dict[str, Any],
        *,
        remote_path: str | None = None,
        remote_method: str = "PUT",
        remote_body: Any | None = None,
    ) -> EntityRecord | None:
        """Apply field changes to an existing record, remote first.

        By default ``changes`` are sent to ``PUT {path}/{id}``. Action
        endpoints (``/resolve``, ``/sync``) pass their own path and body.
        Returns None when the record does not exist.
        """
        record = self._store.get(kind, record_id)
        if record is None:
            logger.debug("Patch %s %s: not present", kind.value, record_id)
            return None

        if remote_path is None:
            remote_path = f"{kind.remote_path}/{record_id}"
            remote_body = changes
        ok, _ = await self.try_remote(
            f"{remote_method} {remote_path}",
            lambda remote: remote.request(remote_path, method=remote_method, body=remote_body),
        )
        updated = record.merged(changes, pending_sync=record.pending_sync if ok else True)
        await self._store.upsert(kind, updated)
        return updated

    async def try_remote(self, description: str, call: RemoteCall) -> tuple[bool, Any]:
        """Run ``call`` against the remote; failures are logged, never raised.

        Returns ``(True, payload)`` on success and ``(False, None)`` when the
        remote is missing or the call failed.
        """
        if self._remote is None:
            logger.debug("No remote configured; %s stays local", description)
            return False, None
        try:
            return True, await call(self._remote)
        except Exception as exc:
            logger.warning("Remote %s failed, using local state: %s", description, exc)
            return False, None

    # ── Internals ───────────────────────────────────────────────────

    async def _create(self, kind: EntityKind, fields: dict[str, Any]) -> EntityRecord:
        ok, payload = await self.try_remote(
            f"create {kind.value}",
            lambda remote: remote.create_entity(kind, fields),
        )
        if ok:
            record = self._record_from_remote(kind, payload)
            if record is not None:
                logger.info("Created %s %s on remote", kind.value, record.id)
                return record
            logger.warning("Remote create %s returned no usable record; keeping it local", kind.value)

        record = EntityRecord(
            kind=kind,
            id=self._local_id(kind),
            data=apply_local_defaults(kind, fields),
            pending_sync=True,
        )
        logger.info("Created %s %s locally", kind.value, record.id)
        return record

    async def _update(
        self, kind: EntityKind, current: EntityRecord, fields: dict[str, Any]
    ) -> EntityRecord:
        merged = current.merged(fields)
        ok, _ = await self.try_remote(
            f"update {kind.value} {merged.id}",
            lambda remote: remote.update_entity(kind, merged.id, merged.to_payload()),
        )
        if not ok:
            merged.pending_sync = True
        return merged

    def _record_from_remote(self, kind: EntityKind, payload: Any) -> EntityRecord | None:
        if not isinstance(payload, dict):
            return None
        try:
            record = EntityRecord.from_payload(kind, payload)
        except ValueError:
            return None
        if record.id in self._store.collection(kind):
            logger.warning("Remote assigned an id already in use: %s %s", kind.value, record.id)
            return None
        return record

    def _local_id(self, kind: EntityKind) -> str:
        """Millisecond timestamp, bumped until it is free within the collection."""
        candidate = int(self._clock() * 1000)
        taken = self._store.collection(kind).ids()
        while str(candidate) in taken:
            candidate += 1
        return str(candidate)
