"""Form visibility endpoints: open a create/edit form, or cancel it."""

from fastapi import APIRouter, Depends, HTTPException, status

from assetdash.application.schemas import FormStateResponse
from assetdash.application.services import EditingSession, EntityStore
from assetdash.domain.entities import EntityKind
from assetdash.domain.exceptions import EntityNotFoundError
from assetdash.infrastructure.dependencies import get_editing_session, get_store

from ._kinds import resolve_kind

router = APIRouter(prefix="/editing", tags=["Editing"])


@router.get("", response_model=list[FormStateResponse])
async def visible_forms(
    session: EditingSession = Depends(get_editing_session),
) -> list[FormStateResponse]:
    """Forms currently open, one entry per kind."""
    return [FormStateResponse.from_state(session.state(k)) for k in session.visible_kinds()]


@router.post("/{kind}/create", response_model=FormStateResponse)
async def open_create_form(
    kind: EntityKind = Depends(resolve_kind),
    session: EditingSession = Depends(get_editing_session),
) -> FormStateResponse:
    return FormStateResponse.from_state(session.request_create(kind))


@router.post("/{kind}/edit/{record_id}", response_model=FormStateResponse)
async def open_edit_form(
    record_id: str,
    kind: EntityKind = Depends(resolve_kind),
    session: EditingSession = Depends(get_editing_session),
    store: EntityStore = Depends(get_store),
) -> FormStateResponse:
    record = store.get(kind, record_id)
    if record is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(EntityNotFoundError(kind.label, record_id)),
        )
    return FormStateResponse.from_state(session.request_edit(kind, record))


@router.post("/{kind}/cancel", response_model=FormStateResponse)
async def cancel_form(
    kind: EntityKind = Depends(resolve_kind),
    session: EditingSession = Depends(get_editing_session),
) -> FormStateResponse:
    return FormStateResponse.from_state(session.close(kind))
