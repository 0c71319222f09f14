"""In-memory fakes of the application ports, shared by unit and API tests."""

import copy
from typing import Any

from assetdash.application.interfaces import KeyValueStorage, RemoteApi
from assetdash.domain.entities import ConnectionStatus, EntityKind
from assetdash.domain.exceptions import RemoteApiError

_COLLECTION_PATHS = {kind.remote_path for kind in EntityKind}


class FakeRemoteApi(RemoteApi):
    """Records every call. POSTs to a collection path echo the body with a server id.

    ``responses`` maps ``(method, path)`` to a payload, or to an exception to raise.
    ``fail=True`` makes every call raise ``RemoteApiError(503)``.
    """

    def __init__(self, *, fail: bool = False, responses: dict[tuple[str, str], Any] | None = None):
        self.fail = fail
        self.responses = responses or {}
        self.calls: list[tuple[str, str, Any]] = []
        self._next_id = 100

    async def request(self, path: str, *, method: str = "GET", body: Any | None = None) -> Any:
        self.calls.append((method, path, copy.deepcopy(body)))
        if self.fail:
            raise RemoteApiError(503, "Service unavailable", path)
        key = (method, path)
        if key in self.responses:
            response = self.responses[key]
            if isinstance(response, Exception):
                raise response
            return copy.deepcopy(response)
        if method == "POST" and path in _COLLECTION_PATHS and isinstance(body, dict):
            self._next_id += 1
            return {**body, "id": f"srv-{self._next_id}"}
        return None

    async def check_connection(self) -> ConnectionStatus:
        if self.fail:
            return ConnectionStatus(connected=False, error="Service unavailable")
        return ConnectionStatus(connected=True)

    def calls_to(self, method: str, path: str) -> list[Any]:
        return [body for m, p, body in self.calls if m == method and p == path]


class InMemoryStorage(KeyValueStorage):
    """Dict-backed key-value storage."""

    def __init__(self, initial: dict[str, Any] | None = None):
        self.data: dict[str, Any] = copy.deepcopy(initial or {})
        self.saves = 0

    async def load(self, key: str, default: Any) -> Any:
        return copy.deepcopy(self.data.get(key, default))

    async def save(self, key: str, value: Any) -> None:
        self.data[key] = copy.deepcopy(value)
        self.saves += 1
