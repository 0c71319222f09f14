from .entity_kind import EntityKind
from .entity_record import EntityRecord, strip_id
from .local_defaults import apply_local_defaults, local_defaults
from .dashboard_metrics import DashboardMetrics, FormState
from .connection_status import ConnectionStatus
from .statuses import (
    ALERT_TRANSITIONS,
    AlertSeverity,
    AlertStatus,
    AlertType,
    ComplianceStatus,
    IntegrationStatus,
    LifecycleStage,
    ViolationSeverity,
    ViolationStatus,
)

__all__ = [
    "EntityKind",
    "EntityRecord",
    "strip_id",
    "apply_local_defaults",
    "local_defaults",
    "DashboardMetrics",
    "FormState",
    "ConnectionStatus",
    "ALERT_TRANSITIONS",
    "AlertSeverity",
    "AlertStatus",
    "AlertType",
    "ComplianceStatus",
    "IntegrationStatus",
    "LifecycleStage",
    "ViolationSeverity",
    "ViolationStatus",
]
