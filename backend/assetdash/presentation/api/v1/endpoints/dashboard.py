"""Dashboard summary endpoint."""

from fastapi import APIRouter, Depends

from assetdash.application.schemas import DashboardMetricsResponse
from assetdash.application.services import MetricsService
from assetdash.infrastructure.dependencies import get_metrics_service

router = APIRouter(prefix="/dashboard", tags=["Dashboard"])


@router.get("/metrics", response_model=DashboardMetricsResponse)
async def dashboard_metrics(
    metrics: MetricsService = Depends(get_metrics_service),
) -> DashboardMetricsResponse:
    """Aggregates over the current collections (date windows use today's date)."""
    return DashboardMetricsResponse.model_validate(metrics.recompute(), from_attributes=True)
