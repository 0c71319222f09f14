"""Status and classification enumerations used by alerts, compliance and integrations."""

from enum import Enum


class AlertStatus(str, Enum):
    ACTIVE = "Active"
    ACKNOWLEDGED = "Acknowledged"
    RESOLVED = "Resolved"
    DISMISSED = "Dismissed"


class AlertSeverity(str, Enum):
    INFO = "Info"
    WARNING = "Warning"
    ERROR = "Error"
    CRITICAL = "Critical"


class AlertType(str, Enum):
    WARRANTY_EXPIRY = "Warranty Expiry"
    LICENSE_EXPIRY = "License Expiry"
    MAINTENANCE_DUE = "Maintenance Due"
    COMPLIANCE_WARNING = "Compliance Warning"
    SECURITY_ALERT = "Security Alert"
    COST_THRESHOLD = "Cost Threshold"


class ComplianceStatus(str, Enum):
    COMPLIANT = "Compliant"
    NON_COMPLIANT = "Non-Compliant"
    UNDER_REVIEW = "Under Review"
    REMEDIATION_REQUIRED = "Remediation Required"


class ViolationStatus(str, Enum):
    OPEN = "Open"
    IN_PROGRESS = "In Progress"
    RESOLVED = "Resolved"


class ViolationSeverity(str, Enum):
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"
    CRITICAL = "Critical"


class IntegrationStatus(str, Enum):
    ACTIVE = "Active"
    INACTIVE = "Inactive"
    ERROR = "Error"
    SYNCING = "Syncing"


class LifecycleStage(str, Enum):
    PLANNING = "Planning"
    PROCUREMENT = "Procurement"
    ACTIVE = "Active"
    MAINTENANCE = "Maintenance"
    RETIRED = "Retired"
    DISPOSED = "Disposed"


# Allowed alert moves: current status -> statuses it may move to.
ALERT_TRANSITIONS: dict[AlertStatus, frozenset[AlertStatus]] = {
    AlertStatus.ACTIVE: frozenset({
        AlertStatus.ACKNOWLEDGED,
        AlertStatus.RESOLVED,
        AlertStatus.DISMISSED,
    }),
    AlertStatus.ACKNOWLEDGED: frozenset({
        AlertStatus.RESOLVED,
        AlertStatus.DISMISSED,
    }),
    AlertStatus.RESOLVED: frozenset(),
    AlertStatus.DISMISSED: frozenset(),
}
