from .entity import EntityDraft, EntityResponse, FormStateResponse, ReloadResponse
from .dashboard import (
    AlertSettingsPayload,
    BulkAlertActionRequest,
    ComplianceScoreResponse,
    ConnectionStatusResponse,
    DashboardMetricsResponse,
)

__all__ = [
    "EntityDraft",
    "EntityResponse",
    "FormStateResponse",
    "ReloadResponse",
    "AlertSettingsPayload",
    "BulkAlertActionRequest",
    "ComplianceScoreResponse",
    "ConnectionStatusResponse",
    "DashboardMetricsResponse",
]
