"""Unit tests for JsonFileStorage."""

import pytest

from assetdash.application.services import EntityStore
from assetdash.domain.entities import EntityKind, EntityRecord
from assetdash.infrastructure.storage import JsonFileStorage


@pytest.mark.asyncio
async def test_missing_key_returns_default(tmp_path):
    storage = JsonFileStorage(tmp_path / "store")

    assert await storage.load("assets", []) == []


@pytest.mark.asyncio
async def test_save_then_load(tmp_path):
    storage = JsonFileStorage(tmp_path)

    await storage.save("assets", [{"id": "1", "data": {"name": "Laptop"}}])

    assert storage.path_for("assets").exists()
    assert await storage.load("assets", []) == [{"id": "1", "data": {"name": "Laptop"}}]


@pytest.mark.asyncio
async def test_corrupt_file_returns_default(tmp_path):
    storage = JsonFileStorage(tmp_path)
    storage.path_for("licenses").write_text("{not json", encoding="utf-8")

    assert await storage.load("licenses", "fallback") == "fallback"


def test_keys_are_sanitised_into_file_names(tmp_path):
    storage = JsonFileStorage(tmp_path)

    assert storage.path_for("requestable-items").name == "requestable-items.json"
    assert storage.path_for("../etc/passwd").parent == tmp_path


@pytest.mark.asyncio
async def test_store_collections_survive_a_restart(tmp_path):
    first = EntityStore(storage=JsonFileStorage(tmp_path))
    await first.upsert(
        EntityKind.ASSET,
        EntityRecord(kind=EntityKind.ASSET, id="1", data={"name": "Laptop"}, pending_sync=True),
    )

    second = EntityStore(storage=JsonFileStorage(tmp_path))
    loaded = await second.load_from_storage(EntityKind.ASSET)

    assert [r.id for r in loaded] == ["1"]
    assert second.get(EntityKind.ASSET, "1").get("name") == "Laptop"
    assert second.get(EntityKind.ASSET, "1").pending_sync is True
