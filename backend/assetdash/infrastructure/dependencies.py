"""Composition root and FastAPI dependency injection.

``build_container`` wires infrastructure adapters to the application
services once per process. Endpoints receive only the pieces they need
through the ``get_*`` dependencies, which read the container from
``app.state``.
"""

import logging
from dataclasses import dataclass

import httpx
from fastapi import Request
from sqlalchemy.ext.asyncio import AsyncEngine

from assetdash.application.interfaces import KeyValueStorage, RemoteApi
from assetdash.application.services import (
    AlertService,
    CollectionLoader,
    ComplianceService,
    EditingSession,
    EntityStore,
    IntegrationService,
    MetricsService,
    MetricThresholds,
    SaveCoordinator,
)
from assetdash.config import Settings, get_settings
from assetdash.infrastructure.database import create_engine_for, create_session_factory
from assetdash.infrastructure.database.repositories import SQLAlchemyKeyValueStorage
from assetdash.infrastructure.remote import HttpRemoteApi
from assetdash.infrastructure.seed import load_seed_file
from assetdash.infrastructure.storage import JsonFileStorage

logger = logging.getLogger(__name__)


@dataclass
class AppContainer:
    """Everything the application owns for the lifetime of the process."""

    store: EntityStore
    session: EditingSession
    coordinator: SaveCoordinator
    metrics: MetricsService
    alerts: AlertService
    compliance: ComplianceService
    integrations: IntegrationService
    loader: CollectionLoader
    remote: RemoteApi | None = None
    engine: AsyncEngine | None = None

    async def aclose(self) -> None:
        self.metrics.close()
        if isinstance(self.remote, HttpRemoteApi):
            await self.remote.aclose()
        if self.engine is not None:
            await self.engine.dispose()


async def build_storage(settings: Settings) -> tuple[KeyValueStorage | None, AsyncEngine | None]:
    """Create the configured local storage adapter (and its engine, for SQLite)."""
    if settings.storage_backend == "json":
        return JsonFileStorage(settings.storage_dir), None
    if settings.storage_backend == "sqlite":
        engine = create_engine_for(settings.database_url, echo=False)
        await SQLAlchemyKeyValueStorage.create_tables(engine)
        return SQLAlchemyKeyValueStorage(create_session_factory(engine)), engine
    return None, None


def build_remote(settings: Settings) -> RemoteApi | None:
    if not settings.remote_configured:
        logger.warning("REMOTE_API_BASE_URL is not configured; all saves stay local.")
        return None
    return HttpRemoteApi(
        base_url=settings.remote_api_base_url,
        api_key=settings.remote_api_key,
        http_client=httpx.AsyncClient(timeout=settings.remote_api_timeout),
        timeout=settings.remote_api_timeout,
    )


def build_container(
    settings: Settings | None = None,
    *,
    storage: KeyValueStorage | None = None,
    remote: RemoteApi | None = None,
    engine: AsyncEngine | None = None,
) -> AppContainer:
    """Wire the services around one store. Adapters are passed in ready-made."""
    settings = settings or get_settings()

    store = EntityStore(storage=storage)
    session = EditingSession()
    coordinator = SaveCoordinator(store, session, remote=remote)
    metrics = MetricsService(
        store,
        MetricThresholds(
            warranty_days=settings.warranty_days,
            license_days=settings.license_days,
            maintenance_days=settings.maintenance_days,
        ),
    )
    alerts = AlertService(
        store,
        coordinator,
        metrics,
        settings={
            "warrantyDays": settings.warranty_days,
            "licenseDays": settings.license_days,
            "maintenanceDays": settings.maintenance_days,
        },
    )
    seed = load_seed_file(settings.seed_file) if settings.load_seed_data else {}

    return AppContainer(
        store=store,
        session=session,
        coordinator=coordinator,
        metrics=metrics,
        alerts=alerts,
        compliance=ComplianceService(store, coordinator),
        integrations=IntegrationService(store, coordinator),
        loader=CollectionLoader(store, coordinator, seed),
        remote=remote,
        engine=engine,
    )


# ── FastAPI dependencies ────────────────────────────────────────────


def get_container(request: Request) -> AppContainer:
    return request.app.state.container


def get_store(request: Request) -> EntityStore:
    return get_container(request).store


def get_editing_session(request: Request) -> EditingSession:
    return get_container(request).session


def get_save_coordinator(request: Request) -> SaveCoordinator:
    return get_container(request).coordinator


def get_metrics_service(request: Request) -> MetricsService:
    return get_container(request).metrics


def get_alert_service(request: Request) -> AlertService:
    return get_container(request).alerts


def get_compliance_service(request: Request) -> ComplianceService:
    return get_container(request).compliance


def get_integration_service(request: Request) -> IntegrationService:
    return get_container(request).integrations


def get_collection_loader(request: Request) -> CollectionLoader:
    return get_container(request).loader
