"""Compliance endpoints."""

from fastapi import APIRouter, Depends, HTTPException, status

from assetdash.application.schemas import ComplianceScoreResponse, EntityResponse
from assetdash.application.services import ComplianceService
from assetdash.domain.entities import EntityKind
from assetdash.domain.exceptions import EntityNotFoundError
from assetdash.infrastructure.dependencies import get_compliance_service

router = APIRouter(prefix="/compliance", tags=["Compliance"])


@router.get("/score", response_model=ComplianceScoreResponse)
async def compliance_score(
    service: ComplianceService = Depends(get_compliance_service),
) -> ComplianceScoreResponse:
    return ComplianceScoreResponse(
        score=service.compliance_score(),
        by_type=service.score_by_type(),
        open_violations=len(service.open_violations()),
        critical_violations=len(service.critical_violations()),
    )


@router.post("/violations/{violation_id}/resolve", response_model=EntityResponse)
async def resolve_violation(
    violation_id: str,
    service: ComplianceService = Depends(get_compliance_service),
) -> EntityResponse:
    record = await service.resolve_violation(violation_id)
    if record is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(EntityNotFoundError(EntityKind.POLICY_VIOLATION.label, violation_id)),
        )
    return EntityResponse.from_record(record)
