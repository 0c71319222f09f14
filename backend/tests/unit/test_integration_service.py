"""Unit tests for IntegrationService."""

import pytest

from assetdash.application.services import (
    EditingSession,
    EntityStore,
    IntegrationService,
    SaveCoordinator,
)
from assetdash.domain.entities import EntityKind, EntityRecord
from store_fakes import FakeRemoteApi


def _integration(integration_id: str, **data) -> EntityRecord:
    return EntityRecord(kind=EntityKind.INTEGRATION, id=integration_id, data=data)


async def _service(*records: EntityRecord, remote: FakeRemoteApi | None = None):
    remote = remote if remote is not None else FakeRemoteApi()
    store = EntityStore()
    for record in records:
        await store.upsert(record.kind, record)
    coordinator = SaveCoordinator(store, EditingSession(), remote=remote)
    return IntegrationService(store, coordinator), store, remote


@pytest.mark.asyncio
async def test_sync_marks_integration_syncing():
    service, store, remote = await _service(_integration("1", name="SCCM", status="Active"))

    record = await service.sync("1")

    assert record.get("status") == "Syncing"
    assert record.get("lastSync")
    assert store.get(EntityKind.INTEGRATION, "1").get("status") == "Syncing"
    assert remote.calls == [("POST", "/integrations/1/sync", None)]


@pytest.mark.asyncio
async def test_sync_failure_sets_error_and_appends_log():
    existing_log = [{"timestamp": "2025-01-01T00:00:00Z", "error": "Timeout", "resolved": True}]
    service, store, _ = await _service(
        _integration("1", status="Active", errorLog=existing_log),
        remote=FakeRemoteApi(fail=True),
    )

    record = await service.sync("1")

    assert record.get("status") == "Error"
    log = record.get("errorLog")
    assert len(log) == 2
    assert log[0] == existing_log[0]
    assert log[1]["resolved"] is False
    assert store.get(EntityKind.INTEGRATION, "1").get("errorLog") == log


@pytest.mark.asyncio
async def test_sync_missing_integration_returns_none():
    service, _, remote = await _service()

    assert await service.sync("missing") is None
    assert remote.calls == []


@pytest.mark.asyncio
async def test_complete_sync_returns_to_active():
    service, _, _ = await _service(_integration("1", status="Active"))
    await service.sync("1")

    record = await service.complete_sync("1")

    assert record.get("status") == "Active"


@pytest.mark.asyncio
async def test_complete_sync_leaves_non_syncing_integration_alone():
    service, _, _ = await _service(_integration("1", status="Error"))

    record = await service.complete_sync("1")

    assert record.get("status") == "Error"
    assert await service.complete_sync("missing") is None


@pytest.mark.asyncio
async def test_type_counts():
    service, _, _ = await _service(
        _integration("1", type="Discovery Tool"),
        _integration("2", type="Discovery Tool"),
        _integration("3", type="ITSM"),
        _integration("4", type="HR System"),
        _integration("5", type="Financial"),
        _integration("6", type="CMDB"),
    )

    assert service.type_counts() == {"discoveryTools": 2, "itsm": 1, "businessSystems": 2}
