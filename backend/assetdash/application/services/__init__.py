from .entity_collection import EntityCollection
from .entity_store import EntityStore, StoreChange
from .editing_session import EditingSession
from .save_coordinator import SaveCoordinator
from .metrics_service import MetricsService, MetricThresholds, compute_dashboard_metrics
from .alert_service import AlertService, DEFAULT_ALERT_SETTINGS
from .compliance_service import ComplianceService
from .integration_service import IntegrationService
from .collection_loader import CollectionLoader

__all__ = [
    "EntityCollection",
    "EntityStore",
    "StoreChange",
    "EditingSession",
    "SaveCoordinator",
    "MetricsService",
    "MetricThresholds",
    "compute_dashboard_metrics",
    "AlertService",
    "DEFAULT_ALERT_SETTINGS",
    "ComplianceService",
    "IntegrationService",
    "CollectionLoader",
]
