"""Unit tests for the SQLAlchemy-backed key-value storage (SQLite file in tmp_path)."""

import pytest

from assetdash.infrastructure.database import create_engine_for, create_session_factory
from assetdash.infrastructure.database.repositories import SQLAlchemyKeyValueStorage
from assetdash.infrastructure.database.session import _get_async_url


def test_sync_sqlite_url_is_made_async():
    assert _get_async_url("sqlite:///data/x.db") == "sqlite+aiosqlite:///data/x.db"
    assert _get_async_url("sqlite+aiosqlite:///x.db") == "sqlite+aiosqlite:///x.db"


@pytest.mark.asyncio
async def test_save_load_and_overwrite(tmp_path):
    engine = create_engine_for(f"sqlite:///{tmp_path / 'kv.db'}")
    try:
        await SQLAlchemyKeyValueStorage.create_tables(engine)
        storage = SQLAlchemyKeyValueStorage(create_session_factory(engine))

        assert await storage.load("assets", []) == []

        await storage.save("assets", [{"id": "1", "data": {"name": "Laptop"}}])
        assert await storage.load("assets", []) == [{"id": "1", "data": {"name": "Laptop"}}]

        await storage.save("assets", [])
        assert await storage.load("assets", None) == []
    finally:
        await engine.dispose()
