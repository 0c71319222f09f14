"""Pydantic DTOs for dashboard, alert, compliance and integration endpoints."""

from typing import Literal

from pydantic import BaseModel, Field


class DashboardMetricsResponse(BaseModel):
    assets: int
    licenses: int
    accessories: int
    consumables: int
    components: int
    people: int
    predefined_kits: int
    requestable_items: int
    integrations: int
    alerts: int
    critical_alerts: int
    expiring_warranties: int
    expiring_licenses: int
    maintenance_due: int
    compliance_issues: int
    pending_sync: int
    total_value: float

    model_config = {"from_attributes": True}


class BulkAlertActionRequest(BaseModel):
    action: Literal["acknowledge", "resolve", "dismiss"]
    alert_ids: list[str] = Field(..., min_length=1)


class AlertSettingsPayload(BaseModel):
    """Alert thresholds and notification switches: all fields optional on update."""

    warrantyDays: int | None = Field(None, ge=0)
    licenseDays: int | None = Field(None, ge=0)
    maintenanceDays: int | None = Field(None, ge=0)
    emailNotifications: bool | None = None
    autoResolve: bool | None = None


class ComplianceScoreResponse(BaseModel):
    score: float
    by_type: dict[str, float]
    open_violations: int
    critical_violations: int


class ConnectionStatusResponse(BaseModel):
    configured: bool
    connected: bool
    error: str | None = None
