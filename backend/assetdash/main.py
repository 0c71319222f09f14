"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from assetdash.config import get_settings
from assetdash.infrastructure.dependencies import (
    AppContainer,
    build_container,
    build_remote,
    build_storage,
)
from assetdash.infrastructure.logging.log_config import setup_logging
from assetdash.presentation.api.router import router as api_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan: wire the store, load collections, close clients."""
    settings = get_settings()
    setup_logging(settings)

    owns_container = getattr(app.state, "container", None) is None
    if owns_container:
        # 1. Local storage and remote backend adapters
        storage, engine = await build_storage(settings)
        remote = build_remote(settings)

        # 2. Composition root
        app.state.container = build_container(
            settings, storage=storage, remote=remote, engine=engine
        )

        # 3. Initial collections: remote, else local storage, else sample data
        sources = await app.state.container.loader.load_all()
        logger.info(
            "Collections loaded: %s",
            ", ".join(f"{kind.value}={source}" for kind, source in sources.items()),
        )

        # 4. Alert thresholds from the remote, if it has any
        await app.state.container.alerts.load_settings()

    yield

    # Shutdown
    if owns_container:
        container: AppContainer = app.state.container
        await container.aclose()
        app.state.container = None


def create_app(container: AppContainer | None = None) -> FastAPI:
    """Factory function that builds and configures the FastAPI application.

    A ready-made ``container`` skips the startup wiring (used by tests).
    """
    settings = get_settings()

    app = FastAPI(
        title=settings.app_title,
        version=settings.app_version,
        lifespan=lifespan,
    )
    app.state.container = container

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Mount API routes
    app.include_router(api_router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "assetdash.main:app",
        host="0.0.0.0",
        port=8020,
        reload=True,
    )
