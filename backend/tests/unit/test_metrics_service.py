"""Unit tests for dashboard metrics."""

from datetime import date, timedelta

import pytest

from assetdash.application.services import (
    EntityStore,
    MetricsService,
    MetricThresholds,
    compute_dashboard_metrics,
)
from assetdash.application.services.metrics_service import parse_date, total_value
from assetdash.domain.entities import DashboardMetrics, EntityKind, EntityRecord

TODAY = date(2025, 6, 1)


def _rec(kind: EntityKind, record_id: str, **data) -> EntityRecord:
    return EntityRecord(kind=kind, id=record_id, data=data)


def _in_days(days: int) -> str:
    return (TODAY + timedelta(days=days)).isoformat()


async def _store_with(*records: EntityRecord) -> EntityStore:
    store = EntityStore()
    for record in records:
        await store.upsert(record.kind, record)
    return store


# ── Counts ──


def test_empty_store_gives_zero_metrics():
    metrics = compute_dashboard_metrics(EntityStore(), today=TODAY)

    assert metrics == DashboardMetrics()
    assert metrics.total_value == 0


@pytest.mark.asyncio
async def test_collection_counts():
    store = await _store_with(
        _rec(EntityKind.ASSET, "a1"),
        _rec(EntityKind.ASSET, "a2"),
        _rec(EntityKind.LICENSE, "l1"),
        _rec(EntityKind.USER, "u1"),
        _rec(EntityKind.KIT, "k1"),
        _rec(EntityKind.REQUESTABLE_ITEM, "r1"),
        _rec(EntityKind.CONSUMABLE, "c1"),
        _rec(EntityKind.INTEGRATION, "i1"),
    )

    metrics = compute_dashboard_metrics(store, today=TODAY)

    assert metrics.assets == 2
    assert metrics.licenses == 1
    assert metrics.people == 1
    assert metrics.predefined_kits == 1
    assert metrics.requestable_items == 1
    assert metrics.consumables == 1
    assert metrics.integrations == 1
    assert metrics.accessories == 0


@pytest.mark.asyncio
async def test_alert_counts_only_active_alerts():
    store = await _store_with(
        _rec(EntityKind.ALERT, "1", status="Active", severity="Critical"),
        _rec(EntityKind.ALERT, "2", status="Active", severity="Warning"),
        _rec(EntityKind.ALERT, "3", status="Resolved", severity="Critical"),
        _rec(EntityKind.ALERT, "4", status="Acknowledged", severity="Critical"),
    )

    metrics = compute_dashboard_metrics(store, today=TODAY)

    assert metrics.alerts == 2
    assert metrics.critical_alerts == 1


# ── Date windows ──


@pytest.mark.asyncio
async def test_expiring_warranties_within_window():
    store = await _store_with(
        _rec(EntityKind.ASSET, "1", warrantyExpiry=_in_days(0)),
        _rec(EntityKind.ASSET, "2", warrantyExpiry=_in_days(30)),
        _rec(EntityKind.ASSET, "3", warrantyExpiry=_in_days(31)),
        _rec(EntityKind.ASSET, "4", warrantyExpiry=_in_days(-1)),
        _rec(EntityKind.ASSET, "5", warrantyExpiry="not a date"),
        _rec(EntityKind.ASSET, "6"),
    )

    metrics = compute_dashboard_metrics(store, today=TODAY)

    assert metrics.expiring_warranties == 2


@pytest.mark.asyncio
async def test_expiring_licenses_use_their_own_window():
    store = await _store_with(
        _rec(EntityKind.LICENSE, "1", expiryDate=_in_days(45)),
        _rec(EntityKind.LICENSE, "2", expiryDate=_in_days(90)),
    )

    assert compute_dashboard_metrics(store, today=TODAY).expiring_licenses == 1
    narrow = MetricThresholds(license_days=10)
    assert compute_dashboard_metrics(store, narrow, today=TODAY).expiring_licenses == 0


@pytest.mark.asyncio
async def test_maintenance_due_includes_overdue_and_nested_dates():
    store = await _store_with(
        _rec(EntityKind.ASSET, "1", nextMaintenanceDate=_in_days(3)),
        _rec(EntityKind.ASSET, "2", nextMaintenanceDate=_in_days(-10)),
        _rec(EntityKind.ASSET, "3", maintenance={"nextDate": _in_days(7)}),
        _rec(EntityKind.ASSET, "4", nextMaintenanceDate=_in_days(8)),
    )

    assert compute_dashboard_metrics(store, today=TODAY).maintenance_due == 3


# ── Compliance / sync / value ──


@pytest.mark.asyncio
async def test_compliance_issues_count_failing_checks_and_open_violations():
    store = await _store_with(
        _rec(EntityKind.COMPLIANCE_CHECK, "c1", status="Compliant"),
        _rec(EntityKind.COMPLIANCE_CHECK, "c2", status="Non-Compliant"),
        _rec(EntityKind.COMPLIANCE_CHECK, "c3", status="Remediation Required"),
        _rec(EntityKind.POLICY_VIOLATION, "v1", status="Open"),
        _rec(EntityKind.POLICY_VIOLATION, "v2", status="In Progress"),
        _rec(EntityKind.POLICY_VIOLATION, "v3", status="Resolved"),
    )

    assert compute_dashboard_metrics(store, today=TODAY).compliance_issues == 4


@pytest.mark.asyncio
async def test_pending_sync_counts_flagged_records_across_kinds():
    store = await _store_with(
        EntityRecord(kind=EntityKind.ASSET, id="1", pending_sync=True),
        EntityRecord(kind=EntityKind.LICENSE, id="2", pending_sync=True),
        EntityRecord(kind=EntityKind.LICENSE, id="3"),
    )

    assert compute_dashboard_metrics(store, today=TODAY).pending_sync == 2


@pytest.mark.asyncio
async def test_total_value_sums_each_kinds_cost_field():
    store = await _store_with(
        _rec(EntityKind.ASSET, "1", purchaseCost=1000),
        _rec(EntityKind.ASSET, "2", purchaseCost="250.50"),
        _rec(EntityKind.ASSET, "3"),
        _rec(EntityKind.LICENSE, "1", cost=300),
        _rec(EntityKind.LICENSE, "2", purchaseCost=9999),
        _rec(EntityKind.ACCESSORY, "1", purchaseCost=49.5),
        _rec(EntityKind.COMPONENT, "1", purchaseCost=100),
        _rec(EntityKind.CONSUMABLE, "1", purchaseCost=5000),
        _rec(EntityKind.ASSET, "4", purchaseCost=True),
    )

    assert total_value(store) == pytest.approx(1700.0)
    assert compute_dashboard_metrics(store, today=TODAY).total_value == 1700.0


def test_parse_date_accepts_dates_and_datetimes():
    assert parse_date("2025-01-31") == date(2025, 1, 31)
    assert parse_date("2025-01-31T10:00:00Z") == date(2025, 1, 31)
    assert parse_date(date(2025, 1, 31)) == date(2025, 1, 31)
    assert parse_date("") is None
    assert parse_date(None) is None
    assert parse_date("31/01/2025") is None


# ── MetricsService ──


@pytest.mark.asyncio
async def test_metrics_service_recomputes_on_store_change():
    store = EntityStore()
    service = MetricsService(store, today=lambda: TODAY)
    assert service.current.assets == 0

    await store.upsert(EntityKind.ASSET, _rec(EntityKind.ASSET, "1", purchaseCost=1000))

    assert service.current.assets == 1
    assert service.current.total_value == 1000

    await store.remove(EntityKind.ASSET, "1")

    assert service.current.assets == 0


@pytest.mark.asyncio
async def test_metrics_service_close_stops_updates():
    store = EntityStore()
    service = MetricsService(store, today=lambda: TODAY)
    service.close()

    await store.upsert(EntityKind.ASSET, _rec(EntityKind.ASSET, "1"))

    assert service.current.assets == 0


@pytest.mark.asyncio
async def test_update_thresholds_recomputes():
    store = await _store_with(_rec(EntityKind.ASSET, "1", warrantyExpiry=_in_days(40)))
    service = MetricsService(store, today=lambda: TODAY)
    assert service.current.expiring_warranties == 0

    thresholds = service.update_thresholds(warranty_days=45, unknown=3, license_days=None)

    assert thresholds.warranty_days == 45
    assert thresholds.license_days == 60
    assert service.current.expiring_warranties == 1
