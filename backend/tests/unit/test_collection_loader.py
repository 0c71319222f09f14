"""Unit tests for CollectionLoader: remote, then local storage, then sample data."""

import pytest

from assetdash.application.services import (
    CollectionLoader,
    EditingSession,
    EntityStore,
    SaveCoordinator,
)
from assetdash.domain.entities import EntityKind
from store_fakes import FakeRemoteApi, InMemoryStorage

SEED = {
    EntityKind.ASSET: [{"id": "seed-1", "name": "Seed laptop"}],
}


def _loader(remote: FakeRemoteApi | None, storage: InMemoryStorage | None = None, seed=None):
    store = EntityStore(storage=storage)
    coordinator = SaveCoordinator(store, EditingSession(), remote=remote)
    return CollectionLoader(store, coordinator, seed=seed), store


@pytest.mark.asyncio
async def test_remote_list_wins():
    remote = FakeRemoteApi(responses={("GET", "/assets"): [
        {"id": "r1", "name": "Remote laptop"},
        {"name": "no id"},
        "garbage",
    ]})
    storage = InMemoryStorage({"assets": [{"id": "s1", "kind": "asset", "data": {}}]})
    loader, store = _loader(remote, storage, SEED)

    source = await loader.load(EntityKind.ASSET)

    assert source == "remote"
    assert [r.id for r in store.list(EntityKind.ASSET)] == ["r1"]
    assert [row["id"] for row in storage.data["assets"]] == ["r1"]


@pytest.mark.asyncio
async def test_falls_back_to_storage_when_remote_fails():
    storage = InMemoryStorage({
        "assets": [{"id": "s1", "kind": "asset", "data": {"name": "Stored"}, "pendingSync": True}]
    })
    loader, store = _loader(FakeRemoteApi(fail=True), storage, SEED)

    source = await loader.load(EntityKind.ASSET)

    assert source == "storage"
    record = store.get(EntityKind.ASSET, "s1")
    assert record.get("name") == "Stored"
    assert record.pending_sync is True


@pytest.mark.asyncio
async def test_falls_back_to_storage_when_remote_answers_with_non_list():
    remote = FakeRemoteApi(responses={("GET", "/assets"): {"unexpected": True}})
    storage = InMemoryStorage({"assets": [{"id": "s1", "kind": "asset", "data": {}}]})
    loader, _ = _loader(remote, storage)

    assert await loader.load(EntityKind.ASSET) == "storage"


@pytest.mark.asyncio
async def test_falls_back_to_seed_when_storage_empty():
    loader, store = _loader(FakeRemoteApi(fail=True), InMemoryStorage(), SEED)

    source = await loader.load(EntityKind.ASSET)

    assert source == "seed"
    assert store.get(EntityKind.ASSET, "seed-1").get("name") == "Seed laptop"


@pytest.mark.asyncio
async def test_empty_when_nothing_available():
    loader, store = _loader(None, InMemoryStorage(), SEED)

    assert await loader.load(EntityKind.LICENSE) == "empty"
    assert store.list(EntityKind.LICENSE) == []


@pytest.mark.asyncio
async def test_load_all_covers_every_kind():
    loader, _ = _loader(None, None, SEED)

    sources = await loader.load_all()

    assert set(sources) == set(EntityKind)
    assert sources[EntityKind.ASSET] == "seed"
    assert sources[EntityKind.ALERT] == "empty"
