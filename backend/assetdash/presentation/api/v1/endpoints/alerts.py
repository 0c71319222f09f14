"""Alert endpoints: filtered listing, transitions, bulk actions, settings."""

from typing import Any, Literal

from fastapi import APIRouter, Depends, HTTPException, Query, status

from assetdash.application.schemas import (
    AlertSettingsPayload,
    BulkAlertActionRequest,
    EntityResponse,
)
from assetdash.application.services import AlertService
from assetdash.domain.entities import EntityKind
from assetdash.domain.exceptions import EntityNotFoundError, InvalidStatusTransitionError
from assetdash.infrastructure.dependencies import get_alert_service

router = APIRouter(prefix="/alerts", tags=["Alerts"])


@router.get("", response_model=list[EntityResponse])
async def list_alerts(
    tab: Literal["all", "active", "acknowledged", "resolved"] = Query("all"),
    severity: str = Query("all", description="'all' or an alert severity"),
    alert_type: str = Query("all", alias="type", description="'all' or an alert type"),
    search: str = Query("", description="Matches title or message, case-insensitive"),
    service: AlertService = Depends(get_alert_service),
) -> list[EntityResponse]:
    alerts = service.filter_alerts(
        tab=tab, severity=severity, alert_type=alert_type, search=search
    )
    return [EntityResponse.from_record(a) for a in alerts]


@router.get("/summary")
async def alert_summary(service: AlertService = Depends(get_alert_service)) -> dict[str, Any]:
    return service.summary()


@router.get("/settings")
async def get_alert_settings(service: AlertService = Depends(get_alert_service)) -> dict[str, Any]:
    return service.settings


@router.put("/settings")
async def update_alert_settings(
    payload: AlertSettingsPayload,
    service: AlertService = Depends(get_alert_service),
) -> dict[str, Any]:
    """Push new settings to the remote; unchanged if the remote refuses them."""
    return await service.update_settings(payload.model_dump(exclude_none=True))


@router.post("/bulk", response_model=list[EntityResponse])
async def bulk_alert_action(
    request: BulkAlertActionRequest,
    service: AlertService = Depends(get_alert_service),
) -> list[EntityResponse]:
    updated = await service.bulk_action(request.action, request.alert_ids)
    return [EntityResponse.from_record(a) for a in updated]


@router.post("/{alert_id}/{action}", response_model=EntityResponse)
async def alert_action(
    alert_id: str,
    action: Literal["acknowledge", "resolve", "dismiss"],
    service: AlertService = Depends(get_alert_service),
) -> EntityResponse:
    try:
        record = await service.apply_action(action, alert_id)
    except InvalidStatusTransitionError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    if record is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(EntityNotFoundError(EntityKind.ALERT.label, alert_id)),
        )
    return EntityResponse.from_record(record)
