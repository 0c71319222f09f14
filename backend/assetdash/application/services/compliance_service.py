"""Compliance use cases: scores and policy-violation resolution."""

from datetime import datetime, timezone

from assetdash.domain.entities import (
    ComplianceStatus,
    EntityKind,
    EntityRecord,
    ViolationSeverity,
    ViolationStatus,
)

from .entity_store import EntityStore
from .save_coordinator import SaveCoordinator


class ComplianceService:
    def __init__(self, store: EntityStore, coordinator: SaveCoordinator):
        self._store = store
        self._coordinator = coordinator

    def compliance_score(self) -> float:
        """Percentage of checks that are compliant; 100 with no checks."""
        return _score(self._store.list(EntityKind.COMPLIANCE_CHECK))

    def score_by_type(self) -> dict[str, float]:
        by_type: dict[str, list[EntityRecord]] = {}
        for check in self._store.list(EntityKind.COMPLIANCE_CHECK):
            by_type.setdefault(str(check.get("type", "Unknown")), []).append(check)
        return {check_type: _score(checks) for check_type, checks in by_type.items()}

    def open_violations(self) -> list[EntityRecord]:
        return [
            v for v in self._store.list(EntityKind.POLICY_VIOLATION)
            if v.get("status") == ViolationStatus.OPEN.value
        ]

    def critical_violations(self) -> list[EntityRecord]:
        return [
            v for v in self.open_violations()
            if v.get("severity") == ViolationSeverity.CRITICAL.value
        ]

    async def resolve_violation(self, violation_id: str) -> EntityRecord | None:
        """Mark a violation resolved; the local change happens even if the remote call fails."""
        return await self._coordinator.patch(
            EntityKind.POLICY_VIOLATION,
            violation_id,
            {
                "status": ViolationStatus.RESOLVED.value,
                "resolvedDate": datetime.now(timezone.utc).isoformat(),
            },
            remote_path=f"{EntityKind.POLICY_VIOLATION.remote_path}/{violation_id}/resolve",
        )


def _score(checks: list[EntityRecord]) -> float:
    if not checks:
        return 100.0
    compliant = sum(1 for c in checks if c.get("status") == ComplianceStatus.COMPLIANT.value)
    return compliant / len(checks) * 100
