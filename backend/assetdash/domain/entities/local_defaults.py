"""Default attributes filled into records synthesized locally (no remote answer)."""

import copy
from typing import Any

from .entity_kind import EntityKind
from .statuses import LifecycleStage

_ASSET_DEFAULTS: dict[str, Any] = {
    "maintenanceHistory": [],
    "checkoutHistory": [],
    "auditHistory": [],
    "depreciation": {
        "method": "Straight Line",
        "usefulLifeYears": 3,
        "salvageValue": 0,
    },
    "lifecycle": {"stage": LifecycleStage.ACTIVE.value},
}

_DEFAULTS: dict[EntityKind, dict[str, Any]] = {
    EntityKind.ASSET: _ASSET_DEFAULTS,
}


def local_defaults(kind: EntityKind) -> dict[str, Any]:
    """Fresh copy of the defaults for ``kind`` (empty for most kinds)."""
    return copy.deepcopy(_DEFAULTS.get(kind, {}))


def apply_local_defaults(kind: EntityKind, draft: dict[str, Any]) -> dict[str, Any]:
    """Lay ``draft`` over the kind's defaults; values in the draft win."""
    return {**local_defaults(kind), **draft}
