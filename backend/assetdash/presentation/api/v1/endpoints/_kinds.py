"""Path-parameter helper shared by endpoints addressing a collection by kind."""

from fastapi import HTTPException, Path, status

from assetdash.domain.entities import EntityKind
from assetdash.domain.exceptions import UnknownEntityKindError


def resolve_kind(kind: str = Path(..., description="Entity kind, e.g. 'asset'")) -> EntityKind:
    try:
        return EntityKind.parse(kind)
    except UnknownEntityKindError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
