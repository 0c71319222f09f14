"""Health check endpoints."""

from fastapi import APIRouter, Depends

from assetdash.application.schemas import ConnectionStatusResponse
from assetdash.config import get_settings
from assetdash.infrastructure.dependencies import AppContainer, get_container

router = APIRouter(tags=["Health"])


@router.get("/health")
async def health_check() -> dict:
    """Returns the current application health status."""
    settings = get_settings()
    return {
        "status": "healthy",
        "version": settings.app_version,
        "environment": settings.app_env,
    }


@router.get("/health/remote", response_model=ConnectionStatusResponse)
async def remote_status(
    container: AppContainer = Depends(get_container),
) -> ConnectionStatusResponse:
    """Reachability of the remote persistence backend."""
    if container.remote is None:
        return ConnectionStatusResponse(
            configured=False,
            connected=False,
            error="Remote backend not configured",
        )
    status = await container.remote.check_connection()
    return ConnectionStatusResponse(
        configured=True, connected=status.connected, error=status.error
    )
