"""Value objects for the dashboard summary and editing-form state."""

from dataclasses import dataclass, field, asdict

from .entity_kind import EntityKind
from .entity_record import EntityRecord


@dataclass(frozen=True)
class DashboardMetrics:
    """Aggregates shown on the summary dashboard."""

    assets: int = 0
    licenses: int = 0
    accessories: int = 0
    consumables: int = 0
    components: int = 0
    people: int = 0
    predefined_kits: int = 0
    requestable_items: int = 0
    integrations: int = 0
    alerts: int = 0
    critical_alerts: int = 0
    expiring_warranties: int = 0
    expiring_licenses: int = 0
    maintenance_due: int = 0
    compliance_issues: int = 0
    pending_sync: int = 0
    total_value: float = 0.0

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class FormState:
    """Visibility of the create/edit form for one kind and the record being edited."""

    kind: EntityKind
    visible: bool = False
    editing: EntityRecord | None = field(default=None)

    @property
    def is_editing(self) -> bool:
        return self.visible and self.editing is not None
