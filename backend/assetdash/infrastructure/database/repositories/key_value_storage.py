"""Concrete KeyValueStorage backed by SQLAlchemy (SQLite via aiosqlite)."""

import logging
from datetime import datetime, timezone
from typing import Any

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from assetdash.application.interfaces import KeyValueStorage
from assetdash.infrastructure.database.base import Base
from assetdash.infrastructure.database.models import KeyValueEntryModel

logger = logging.getLogger(__name__)


class SQLAlchemyKeyValueStorage(KeyValueStorage):
    """Implements the KeyValueStorage port with one short session per call."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self._session_factory = session_factory

    @staticmethod
    async def create_tables(engine: AsyncEngine) -> None:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def load(self, key: str, default: Any) -> Any:
        async with self._session_factory() as session:
            model = await session.get(KeyValueEntryModel, key)
            if model is None or model.value is None:
                return default
            return model.value

    async def save(self, key: str, value: Any) -> None:
        async with self._session_factory() as session:
            try:
                model = await session.get(KeyValueEntryModel, key)
                if model is None:
                    session.add(KeyValueEntryModel(key=key, value=value))
                else:
                    model.value = value
                    model.updated_at = datetime.now(timezone.utc)
                await session.commit()
            except Exception:
                await session.rollback()
                raise
        logger.debug("Saved key '%s'", key)
