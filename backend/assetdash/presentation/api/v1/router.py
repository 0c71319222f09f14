"""V1 API router: aggregates all v1 endpoint routers."""

from fastapi import APIRouter

from assetdash.presentation.api.v1.endpoints.health import router as health_router
from assetdash.presentation.api.v1.endpoints.entities import router as entities_router
from assetdash.presentation.api.v1.endpoints.editing import router as editing_router
from assetdash.presentation.api.v1.endpoints.dashboard import router as dashboard_router
from assetdash.presentation.api.v1.endpoints.alerts import router as alerts_router
from assetdash.presentation.api.v1.endpoints.compliance import router as compliance_router
from assetdash.presentation.api.v1.endpoints.integrations import router as integrations_router

router = APIRouter(prefix="/v1")
router.include_router(health_router)
router.include_router(entities_router)
router.include_router(editing_router)
router.include_router(dashboard_router)
router.include_router(alerts_router)
router.include_router(compliance_router)
router.include_router(integrations_router)
