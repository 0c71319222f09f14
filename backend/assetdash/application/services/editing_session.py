"""Per-kind create/edit form state."""

import logging

from assetdash.domain.entities import EntityKind, EntityRecord, FormState
from assetdash.domain.exceptions import EntityKindMismatchError

logger = logging.getLogger(__name__)


class EditingSession:
    """Tracks, for every kind, whether its form is open and what it edits.

    Hidden -> create -> Visible(editing=None) -> submit/cancel -> Hidden
    Hidden -> edit(R) -> Visible(editing=R)   -> submit/cancel -> Hidden

    Several kinds may have their form open at once; nothing enforces a
    single visible form.
    """

    def __init__(self) -> None:
        self._states: dict[EntityKind, FormState] = {
            kind: FormState(kind=kind) for kind in EntityKind
        }

    def state(self, kind: EntityKind) -> FormState:
        return self._states[kind]

    def editing(self, kind: EntityKind) -> EntityRecord | None:
        return self._states[kind].editing

    def request_create(self, kind: EntityKind) -> FormState:
        self._states[kind] = FormState(kind=kind, visible=True, editing=None)
        logger.debug("Create form opened for %s", kind.value)
        return self._states[kind]

    def request_edit(self, kind: EntityKind, record: EntityRecord) -> FormState:
        if record.kind is not kind:
            raise EntityKindMismatchError(kind.value, record.kind.value)
        self._states[kind] = FormState(kind=kind, visible=True, editing=record)
        logger.debug("Edit form opened for %s %s", kind.value, record.id)
        return self._states[kind]

    def close(self, kind: EntityKind) -> FormState:
        """Hide the form and forget the editing reference (submit or cancel)."""
        self._states[kind] = FormState(kind=kind)
        return self._states[kind]

    def visible_kinds(self) -> list[EntityKind]:
        return [kind for kind, state in self._states.items() if state.visible]
