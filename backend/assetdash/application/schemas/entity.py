"""Pydantic DTOs (Data Transfer Objects) for entity records and form state."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field

from assetdash.domain.entities import EntityRecord, FormState


class EntityDraft(BaseModel):
    """Fields submitted by a create/edit form. Any ``id`` key is ignored."""

    data: dict[str, Any] = Field(
        ..., examples=[{"name": "Laptop X", "purchaseCost": 1000}],
    )


class EntityResponse(BaseModel):
    """Schema returned to the client."""

    id: str
    kind: str
    data: dict[str, Any]
    pending_sync: bool
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_record(cls, record: EntityRecord) -> "EntityResponse":
        return cls(
            id=record.id,
            kind=record.kind.value,
            data=record.data,
            pending_sync=record.pending_sync,
            created_at=record.created_at,
            updated_at=record.updated_at,
        )


class FormStateResponse(BaseModel):
    kind: str
    visible: bool
    is_editing: bool = False
    editing: EntityResponse | None = None

    @classmethod
    def from_state(cls, state: FormState) -> "FormStateResponse":
        return cls(
            kind=state.kind.value,
            visible=state.visible,
            is_editing=state.is_editing,
            editing=EntityResponse.from_record(state.editing) if state.editing else None,
        )


class ReloadResponse(BaseModel):
    kind: str
    source: str
    count: int
