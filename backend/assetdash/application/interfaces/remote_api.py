"""Abstract interface (port) for the remote persistence backend."""

from abc import ABC, abstractmethod
from typing import Any

from assetdash.domain.entities import ConnectionStatus, EntityKind


class RemoteApi(ABC):
    """Port for the remote backend, implemented in the infrastructure layer.

    Implementations raise on any failure (``RemoteApiError`` for rejected or
    malformed responses, ``httpx.HTTPError`` for transport problems). Callers
    in the application layer decide how to fall back.
    """

    @abstractmethod
    async def request(
        self,
        path: str,
        *,
        method: str = "GET",
        body: Any | None = None,
    ) -> Any:
        """Send a request and return the decoded payload (``None`` when empty)."""
        ...

    async def list_entities(self, kind: EntityKind) -> Any:
        return await self.request(kind.remote_path)

    async def create_entity(self, kind: EntityKind, draft: dict[str, Any]) -> Any:
        return await self.request(kind.remote_path, method="POST", body=draft)

    async def update_entity(
        self, kind: EntityKind, entity_id: str, data: dict[str, Any]
    ) -> Any:
        return await self.request(
            f"{kind.remote_path}/{entity_id}", method="PUT", body=data
        )

    async def delete_entity(self, kind: EntityKind, entity_id: str) -> Any:
        return await self.request(f"{kind.remote_path}/{entity_id}", method="DELETE")

    @abstractmethod
    async def check_connection(self) -> ConnectionStatus:
        """Probe the backend. Never raises."""
        ...
