"""Derived dashboard metrics: recomputed from the store on every change."""

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Any

from assetdash.domain.entities import (
    AlertSeverity,
    AlertStatus,
    ComplianceStatus,
    DashboardMetrics,
    EntityKind,
    EntityRecord,
    ViolationStatus,
)

from .entity_store import EntityStore, StoreChange

logger = logging.getLogger(__name__)

_VALUE_KINDS = (
    EntityKind.ASSET,
    EntityKind.LICENSE,
    EntityKind.ACCESSORY,
    EntityKind.COMPONENT,
)
_ISSUE_CHECK_STATUSES = {
    ComplianceStatus.NON_COMPLIANT.value,
    ComplianceStatus.REMEDIATION_REQUIRED.value,
}
_ISSUE_VIOLATION_STATUSES = {
    ViolationStatus.OPEN.value,
    ViolationStatus.IN_PROGRESS.value,
}


@dataclass
class MetricThresholds:
    """Look-ahead windows (days) for the expiry and maintenance counters."""

    warranty_days: int = 30
    license_days: int = 60
    maintenance_days: int = 7


def compute_dashboard_metrics(
    store: EntityStore,
    thresholds: MetricThresholds | None = None,
    today: date | None = None,
) -> DashboardMetrics:
    """Pure aggregation over the current collections."""
    thresholds = thresholds or MetricThresholds()
    today = today or date.today()

    assets = store.list(EntityKind.ASSET)
    licenses = store.list(EntityKind.LICENSE)
    alerts = store.list(EntityKind.ALERT)

    active_alerts = [a for a in alerts if a.get("status") == AlertStatus.ACTIVE.value]

    return DashboardMetrics(
        assets=len(assets),
        licenses=len(licenses),
        accessories=len(store.collection(EntityKind.ACCESSORY)),
        consumables=len(store.collection(EntityKind.CONSUMABLE)),
        components=len(store.collection(EntityKind.COMPONENT)),
        people=len(store.collection(EntityKind.USER)),
        predefined_kits=len(store.collection(EntityKind.KIT)),
        requestable_items=len(store.collection(EntityKind.REQUESTABLE_ITEM)),
        integrations=len(store.collection(EntityKind.INTEGRATION)),
        alerts=len(active_alerts),
        critical_alerts=sum(
            1 for a in active_alerts if a.get("severity") == AlertSeverity.CRITICAL.value
        ),
        expiring_warranties=_count_within(
            assets, "warrantyExpiry", today, thresholds.warranty_days
        ),
        expiring_licenses=_count_within(
            licenses, "expiryDate", today, thresholds.license_days
        ),
        maintenance_due=sum(
            1 for a in assets if _is_maintenance_due(a, today, thresholds.maintenance_days)
        ),
        compliance_issues=(
            sum(
                1 for c in store.list(EntityKind.COMPLIANCE_CHECK)
                if c.get("status") in _ISSUE_CHECK_STATUSES
            )
            + sum(
                1 for v in store.list(EntityKind.POLICY_VIOLATION)
                if v.get("status") in _ISSUE_VIOLATION_STATUSES
            )
        ),
        pending_sync=len(store.pending_sync()),
        total_value=round(total_value(store), 2),
    )


def total_value(store: EntityStore) -> float:
    """Sum of each valued kind's designated cost field."""
    total = 0.0
    for kind in _VALUE_KINDS:
        cost_field = kind.cost_field
        for record in store.list(kind):
            total += _as_number(record.get(cost_field))
    return total


class MetricsService:
    """Keeps the latest :class:`DashboardMetrics` in step with the store."""

    def __init__(
        self,
        store: EntityStore,
        thresholds: MetricThresholds | None = None,
        today: Callable[[], date] = date.today,
    ):
        self._store = store
        self._thresholds = thresholds or MetricThresholds()
        self._today = today
        self._current = self.recompute()
        self._unsubscribe = store.subscribe(self._on_change)

    @property
    def thresholds(self) -> MetricThresholds:
        return self._thresholds

    @property
    def current(self) -> DashboardMetrics:
        return self._current

    def recompute(self) -> DashboardMetrics:
        self._current = compute_dashboard_metrics(
            self._store, self._thresholds, self._today()
        )
        return self._current

    def update_thresholds(self, **changes: int) -> MetricThresholds:
        for name, value in changes.items():
            if hasattr(self._thresholds, name) and value is not None:
                setattr(self._thresholds, name, int(value))
        self.recompute()
        return self._thresholds

    def close(self) -> None:
        self._unsubscribe()

    def _on_change(self, change: StoreChange) -> None:
        self.recompute()
        logger.debug("Metrics recomputed after %s on %s", change.action, change.kind.value)


# ── Helpers ─────────────────────────────────────────────────────────


def _as_number(raw: Any) -> float:
    if isinstance(raw, bool):
        return 0.0
    if isinstance(raw, (int, float)):
        return float(raw)
    if isinstance(raw, str):
        try:
            return float(raw)
        except ValueError:
            return 0.0
    return 0.0


def parse_date(raw: Any) -> date | None:
    """Accept ISO dates (``2025-01-31``) and datetimes; anything else is None."""
    if isinstance(raw, datetime):
        return raw.date()
    if isinstance(raw, date):
        return raw
    if not isinstance(raw, str) or not raw:
        return None
    try:
        return datetime.fromisoformat(raw.replace("Z", "+00:00")).date()
    except ValueError:
        return None


def _count_within(
    records: Iterable[EntityRecord], field_name: str, today: date, days: int
) -> int:
    horizon = today + timedelta(days=days)
    count = 0
    for record in records:
        when = parse_date(record.get(field_name))
        if when is not None and today <= when <= horizon:
            count += 1
    return count


def _is_maintenance_due(asset: EntityRecord, today: date, days: int) -> bool:
    raw = asset.get("nextMaintenanceDate")
    if raw is None:
        maintenance = asset.get("maintenance")
        if isinstance(maintenance, dict):
            raw = maintenance.get("nextDate")
    when = parse_date(raw)
    return when is not None and when <= today + timedelta(days=days)
