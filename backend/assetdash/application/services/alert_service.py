"""Alert use cases: status transitions, bulk actions, filtering and settings."""

import logging
from datetime import datetime, timezone
from typing import Any, Literal

from pydantic import ValidationError

from assetdash.application.schemas import AlertSettingsPayload
from assetdash.domain.entities import (
    ALERT_TRANSITIONS,
    AlertSeverity,
    AlertStatus,
    AlertType,
    EntityKind,
    EntityRecord,
)
from assetdash.domain.exceptions import InvalidStatusTransitionError

from .entity_store import EntityStore
from .metrics_service import MetricsService
from .save_coordinator import SaveCoordinator

logger = logging.getLogger(__name__)

AlertAction = Literal["acknowledge", "resolve", "dismiss"]
AlertTab = Literal["all", "active", "acknowledged", "resolved"]

_ACTION_TARGETS: dict[str, AlertStatus] = {
    "acknowledge": AlertStatus.ACKNOWLEDGED,
    "resolve": AlertStatus.RESOLVED,
    "dismiss": AlertStatus.DISMISSED,
}
_ACTION_STAMPS: dict[str, str] = {
    "acknowledge": "acknowledgedDate",
    "resolve": "resolvedDate",
    "dismiss": "dismissedDate",
}
_TAB_STATUSES: dict[str, AlertStatus] = {
    "active": AlertStatus.ACTIVE,
    "acknowledged": AlertStatus.ACKNOWLEDGED,
    "resolved": AlertStatus.RESOLVED,
}

DEFAULT_ALERT_SETTINGS: dict[str, Any] = {
    "warrantyDays": 30,
    "licenseDays": 60,
    "maintenanceDays": 7,
    "emailNotifications": True,
    "autoResolve": False,
}


class AlertService:
    """Orchestrates alert lifecycle on top of the save coordinator."""

    def __init__(
        self,
        store: EntityStore,
        coordinator: SaveCoordinator,
        metrics: MetricsService | None = None,
        settings: dict[str, Any] | None = None,
    ):
        self._store = store
        self._coordinator = coordinator
        self._metrics = metrics
        self._settings: dict[str, Any] = {**DEFAULT_ALERT_SETTINGS, **(settings or {})}
        self._sync_thresholds()

    # ── Transitions ─────────────────────────────────────────────────

    async def acknowledge(self, alert_id: str) -> EntityRecord | None:
        return await self.apply_action("acknowledge", alert_id)

    async def resolve(self, alert_id: str) -> EntityRecord | None:
        return await self.apply_action("resolve", alert_id)

    async def dismiss(self, alert_id: str) -> EntityRecord | None:
        return await self.apply_action("dismiss", alert_id)

    async def apply_action(self, action: AlertAction, alert_id: str) -> EntityRecord | None:
        """Move one alert to the status ``action`` implies.

        Unknown ids are a no-op (None). A move the current status does not
        allow raises :class:`InvalidStatusTransitionError`.
        """
        alert = self._store.get(EntityKind.ALERT, alert_id)
        if alert is None:
            return None
        changes = self._transition_changes(alert, action)
        return await self._coordinator.patch(EntityKind.ALERT, alert_id, changes)

    async def bulk_action(self, action: AlertAction, alert_ids: list[str]) -> list[EntityRecord]:
        """Apply ``action`` to many alerts once the remote accepted the batch.

        A failed batch call leaves every alert untouched. Alerts whose
        current status does not allow the move are skipped.
        """
        ok, _ = await self._coordinator.try_remote(
            f"bulk {action} of {len(alert_ids)} alerts",
            lambda remote: remote.request(
                "/alerts/bulk",
                method="POST",
                body={"action": action, "alertIds": alert_ids},
            ),
        )
        if not ok:
            return []

        updated: list[EntityRecord] = []
        for alert_id in alert_ids:
            alert = self._store.get(EntityKind.ALERT, alert_id)
            if alert is None:
                continue
            try:
                changes = self._transition_changes(alert, action)
            except InvalidStatusTransitionError as exc:
                logger.info("Bulk %s skipped alert %s: %s", action, alert_id, exc)
                continue
            record = alert.merged(changes)
            await self._store.upsert(EntityKind.ALERT, record)
            updated.append(record)
        return updated

    # ── Queries ─────────────────────────────────────────────────────

    def filter_alerts(
        self,
        *,
        tab: AlertTab = "all",
        severity: str = "all",
        alert_type: str = "all",
        search: str = "",
    ) -> list[EntityRecord]:
        wanted_status = _TAB_STATUSES.get(tab)
        needle = search.strip().lower()
        result = []
        for alert in self._store.list(EntityKind.ALERT):
            if wanted_status is not None and alert.get("status") != wanted_status.value:
                continue
            if severity != "all" and alert.get("severity") != severity:
                continue
            if alert_type != "all" and alert.get("type") != alert_type:
                continue
            if needle and not (
                needle in str(alert.get("title", "")).lower()
                or needle in str(alert.get("message", "")).lower()
            ):
                continue
            result.append(alert)
        return result

    def summary(self) -> dict[str, Any]:
        alerts = self._store.list(EntityKind.ALERT)

        def count(status: AlertStatus, **match: str) -> int:
            return sum(
                1 for a in alerts
                if a.get("status") == status.value
                and all(a.get(k) == v for k, v in match.items())
            )

        return {
            "critical": count(AlertStatus.ACTIVE, severity=AlertSeverity.CRITICAL.value),
            "active": count(AlertStatus.ACTIVE),
            "acknowledged": count(AlertStatus.ACKNOWLEDGED),
            "resolved": count(AlertStatus.RESOLVED),
            "byType": {t.value: count(AlertStatus.ACTIVE, type=t.value) for t in AlertType},
        }

    # ── Settings ────────────────────────────────────────────────────

    @property
    def settings(self) -> dict[str, Any]:
        return dict(self._settings)

    async def load_settings(self) -> dict[str, Any]:
        """Pull settings from the remote; keep the current ones if that fails."""
        ok, payload = await self._coordinator.try_remote(
            "load alert settings",
            lambda remote: remote.request("/alerts/settings"),
        )
        if not ok or not isinstance(payload, dict):
            logger.warning("Using current alert settings")
            return self.settings
        try:
            loaded = AlertSettingsPayload.model_validate(payload)
        except ValidationError as exc:
            logger.warning(
                "Remote alert settings rejected (%d errors), using current ones",
                exc.error_count(),
            )
            return self.settings
        self._settings = {**self._settings, **loaded.model_dump(exclude_none=True)}
        self._sync_thresholds()
        return self.settings

    async def update_settings(self, new_settings: dict[str, Any]) -> dict[str, Any]:
        """Push settings to the remote; applied locally only once accepted."""
        merged = {**self._settings, **new_settings}
        ok, _ = await self._coordinator.try_remote(
            "update alert settings",
            lambda remote: remote.request("/alerts/settings", method="PUT", body=merged),
        )
        if ok:
            self._settings = merged
            self._sync_thresholds()
            logger.info("Alert settings updated")
        return self.settings

    # ── Internals ───────────────────────────────────────────────────

    def _transition_changes(self, alert: EntityRecord, action: str) -> dict[str, Any]:
        target = _ACTION_TARGETS[action]
        try:
            current = AlertStatus(alert.get("status", AlertStatus.ACTIVE.value))
        except ValueError:
            current = AlertStatus.ACTIVE
        if target not in ALERT_TRANSITIONS[current]:
            raise InvalidStatusTransitionError("Alert", current.value, target.value)
        return {
            "status": target.value,
            _ACTION_STAMPS[action]: datetime.now(timezone.utc).isoformat(),
        }

    def _sync_thresholds(self) -> None:
        if self._metrics is None:
            return
        self._metrics.update_thresholds(
            warranty_days=self._settings.get("warrantyDays"),
            license_days=self._settings.get("licenseDays"),
            maintenance_days=self._settings.get("maintenanceDays"),
        )
