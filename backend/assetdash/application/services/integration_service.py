"""Integration use cases: triggering syncs with discovery/ITSM/CMDB tools.

The integrations themselves are opaque; this service only records what the
remote reports about a sync request.
"""

import logging
from datetime import datetime, timezone

from assetdash.domain.entities import EntityKind, EntityRecord, IntegrationStatus

from .entity_store import EntityStore
from .save_coordinator import SaveCoordinator

logger = logging.getLogger(__name__)

_BUSINESS_SYSTEM_TYPES = frozenset({"HR System", "Financial", "Procurement"})


class IntegrationService:
    def __init__(self, store: EntityStore, coordinator: SaveCoordinator):
        self._store = store
        self._coordinator = coordinator

    async def sync(self, integration_id: str) -> EntityRecord | None:
        """Ask the remote to sync one integration.

        On success the integration shows ``Syncing`` with a fresh
        ``lastSync``; on failure it shows ``Error`` and gains an error-log
        entry. Unknown ids return None.
        """
        integration = self._store.get(EntityKind.INTEGRATION, integration_id)
        if integration is None:
            return None

        now = datetime.now(timezone.utc).isoformat()
        ok, _ = await self._coordinator.try_remote(
            f"sync integration {integration_id}",
            lambda remote: remote.request(
                f"{EntityKind.INTEGRATION.remote_path}/{integration_id}/sync", method="POST"
            ),
        )
        if ok:
            changes = {"status": IntegrationStatus.SYNCING.value, "lastSync": now}
        else:
            error_log = list(integration.get("errorLog") or [])
            error_log.append({
                "timestamp": now,
                "error": "Sync request failed",
                "details": "The remote backend did not accept the sync request",
                "resolved": False,
            })
            changes = {"status": IntegrationStatus.ERROR.value, "errorLog": error_log}

        record = integration.merged(changes)
        await self._store.upsert(EntityKind.INTEGRATION, record)
        return record

    async def complete_sync(self, integration_id: str) -> EntityRecord | None:
        """Return a syncing integration to ``Active``."""
        integration = self._store.get(EntityKind.INTEGRATION, integration_id)
        if integration is None:
            return None
        if integration.get("status") != IntegrationStatus.SYNCING.value:
            logger.debug("Integration %s is not syncing; nothing to complete", integration_id)
            return integration
        record = integration.merged({"status": IntegrationStatus.ACTIVE.value})
        await self._store.upsert(EntityKind.INTEGRATION, record)
        return record

    def type_counts(self) -> dict[str, int]:
        integrations = self._store.list(EntityKind.INTEGRATION)
        return {
            "discoveryTools": sum(1 for i in integrations if i.get("type") == "Discovery Tool"),
            "itsm": sum(1 for i in integrations if i.get("type") == "ITSM"),
            "businessSystems": sum(
                1 for i in integrations if i.get("type") in _BUSINESS_SYSTEM_TYPES
            ),
        }
