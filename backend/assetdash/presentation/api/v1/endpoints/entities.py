"""Generic CRUD endpoints, one set shared by every entity kind."""

from fastapi import APIRouter, Depends, HTTPException, status

from assetdash.application.schemas import EntityDraft, EntityResponse, ReloadResponse
from assetdash.application.services import CollectionLoader, EntityStore, SaveCoordinator
from assetdash.domain.entities import EntityKind
from assetdash.domain.exceptions import EntityKindMismatchError, EntityNotFoundError
from assetdash.infrastructure.dependencies import (
    get_collection_loader,
    get_save_coordinator,
    get_store,
)

from ._kinds import resolve_kind

router = APIRouter(prefix="/entities", tags=["Entities"])


@router.get("/{kind}", response_model=list[EntityResponse])
async def list_entities(
    kind: EntityKind = Depends(resolve_kind),
    store: EntityStore = Depends(get_store),
) -> list[EntityResponse]:
    """Current records of one kind, in insertion order."""
    return [EntityResponse.from_record(r) for r in store.list(kind)]


@router.get("/{kind}/{record_id}", response_model=EntityResponse)
async def get_entity(
    record_id: str,
    kind: EntityKind = Depends(resolve_kind),
    store: EntityStore = Depends(get_store),
) -> EntityResponse:
    record = store.get(kind, record_id)
    if record is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(EntityNotFoundError(kind.label, record_id)),
        )
    return EntityResponse.from_record(record)


@router.post("/{kind}", response_model=EntityResponse, status_code=status.HTTP_201_CREATED)
async def submit_entity(
    draft: EntityDraft,
    kind: EntityKind = Depends(resolve_kind),
    coordinator: SaveCoordinator = Depends(get_save_coordinator),
) -> EntityResponse:
    """Submit the kind's form: creates a record, or updates the one being edited."""
    record = await coordinator.save_from_session(kind, draft.data)
    if record is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"The {kind.label} being edited no longer exists",
        )
    return EntityResponse.from_record(record)


@router.put("/{kind}/{record_id}", response_model=EntityResponse)
async def update_entity(
    record_id: str,
    draft: EntityDraft,
    kind: EntityKind = Depends(resolve_kind),
    store: EntityStore = Depends(get_store),
    coordinator: SaveCoordinator = Depends(get_save_coordinator),
) -> EntityResponse:
    """Merge the draft onto an existing record."""
    existing = store.get(kind, record_id)
    if existing is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(EntityNotFoundError(kind.label, record_id)),
        )
    try:
        record = await coordinator.save(kind, draft.data, editing=existing)
    except EntityKindMismatchError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    if record is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(EntityNotFoundError(kind.label, record_id)),
        )
    return EntityResponse.from_record(record)


@router.delete("/{kind}/{record_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_entity(
    record_id: str,
    kind: EntityKind = Depends(resolve_kind),
    coordinator: SaveCoordinator = Depends(get_save_coordinator),
) -> None:
    """Delete a record. Deleting an unknown id is not an error."""
    await coordinator.delete(kind, record_id)


@router.post("/{kind}/reload", response_model=ReloadResponse)
async def reload_entities(
    kind: EntityKind = Depends(resolve_kind),
    loader: CollectionLoader = Depends(get_collection_loader),
    store: EntityStore = Depends(get_store),
) -> ReloadResponse:
    """Re-fetch the collection from the remote, falling back to local data."""
    source = await loader.load(kind)
    return ReloadResponse(kind=kind.value, source=source, count=len(store.collection(kind)))
