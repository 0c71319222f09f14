"""Integration endpoints: sync triggers and summary counts."""

from fastapi import APIRouter, Depends, HTTPException, status

from assetdash.application.schemas import EntityResponse
from assetdash.application.services import IntegrationService
from assetdash.domain.entities import EntityKind
from assetdash.domain.exceptions import EntityNotFoundError
from assetdash.infrastructure.dependencies import get_integration_service

router = APIRouter(prefix="/integrations", tags=["Integrations"])


def _not_found(integration_id: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=str(EntityNotFoundError(EntityKind.INTEGRATION.label, integration_id)),
    )


@router.get("/summary")
async def integration_summary(
    service: IntegrationService = Depends(get_integration_service),
) -> dict[str, int]:
    return service.type_counts()


@router.post("/{integration_id}/sync", response_model=EntityResponse)
async def sync_integration(
    integration_id: str,
    service: IntegrationService = Depends(get_integration_service),
) -> EntityResponse:
    record = await service.sync(integration_id)
    if record is None:
        raise _not_found(integration_id)
    return EntityResponse.from_record(record)


@router.post("/{integration_id}/sync/complete", response_model=EntityResponse)
async def complete_integration_sync(
    integration_id: str,
    service: IntegrationService = Depends(get_integration_service),
) -> EntityResponse:
    record = await service.complete_sync(integration_id)
    if record is None:
        raise _not_found(integration_id)
    return EntityResponse.from_record(record)
