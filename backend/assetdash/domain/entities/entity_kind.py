"""Entity kinds managed by the dashboard: the explicit tag carried by every record."""

from enum import Enum

from assetdash.domain.exceptions import UnknownEntityKindError


class EntityKind(str, Enum):
    """Every record type the store holds one collection for."""

    ASSET = "asset"
    LICENSE = "license"
    ACCESSORY = "accessory"
    CONSUMABLE = "consumable"
    COMPONENT = "component"
    KIT = "kit"
    REQUESTABLE_ITEM = "requestable_item"
    USER = "user"
    ALERT = "alert"
    INTEGRATION = "integration"
    COMPLIANCE_CHECK = "compliance_check"
    POLICY_VIOLATION = "policy_violation"

    @classmethod
    def parse(cls, raw: "str | EntityKind") -> "EntityKind":
        """Resolve a kind from its value (``asset``) or name (``ASSET``)."""
        if isinstance(raw, cls):
            return raw
        value = str(raw).strip().lower().replace("-", "_")
        try:
            return cls(value)
        except ValueError:
            raise UnknownEntityKindError(str(raw)) from None

    @property
    def storage_key(self) -> str:
        """Key under which the collection is mirrored to local storage."""
        return _STORAGE_KEYS[self]

    @property
    def remote_path(self) -> str:
        """Collection path on the remote API."""
        return _REMOTE_PATHS[self]

    @property
    def cost_field(self) -> str | None:
        """Field summed into the dashboard's total value, if the kind counts."""
        return _COST_FIELDS.get(self)

    @property
    def label(self) -> str:
        return self.value.replace("_", " ").title()


_STORAGE_KEYS: dict[EntityKind, str] = {
    EntityKind.ASSET: "assets",
    EntityKind.LICENSE: "licenses",
    EntityKind.ACCESSORY: "accessories",
    EntityKind.CONSUMABLE: "consumables",
    EntityKind.COMPONENT: "components",
    EntityKind.KIT: "kits",
    EntityKind.REQUESTABLE_ITEM: "requestable-items",
    EntityKind.USER: "users",
    EntityKind.ALERT: "alerts",
    EntityKind.INTEGRATION: "integrations",
    EntityKind.COMPLIANCE_CHECK: "compliance-checks",
    EntityKind.POLICY_VIOLATION: "policy-violations",
}

_REMOTE_PATHS: dict[EntityKind, str] = {
    EntityKind.ASSET: "/assets",
    EntityKind.LICENSE: "/licenses",
    EntityKind.ACCESSORY: "/accessories",
    EntityKind.CONSUMABLE: "/consumables",
    EntityKind.COMPONENT: "/components",
    EntityKind.KIT: "/kits",
    EntityKind.REQUESTABLE_ITEM: "/requestable-items",
    EntityKind.USER: "/users",
    EntityKind.ALERT: "/alerts",
    EntityKind.INTEGRATION: "/integrations",
    EntityKind.COMPLIANCE_CHECK: "/compliance/checks",
    EntityKind.POLICY_VIOLATION: "/compliance/violations",
}

# Only these kinds contribute to the dashboard's total value.
_COST_FIELDS: dict[EntityKind, str] = {
    EntityKind.ASSET: "purchaseCost",
    EntityKind.LICENSE: "cost",
    EntityKind.ACCESSORY: "purchaseCost",
    EntityKind.COMPONENT: "purchaseCost",
}
