"""HTTP client for the remote persistence backend: implements the RemoteApi port.

Every call goes through :meth:`HttpRemoteApi.request`, a thin generic wrapper
over httpx taking a path plus method/body. The entity-specific helpers on the
port (create, update, delete, list) are built on top of it.
"""

import logging
from typing import Any

import httpx

from assetdash.application.interfaces import RemoteApi
from assetdash.domain.entities import ConnectionStatus
from assetdash.domain.exceptions import RemoteApiError

logger = logging.getLogger(__name__)


class HttpRemoteApi(RemoteApi):
    """Infrastructure adapter: talks JSON to the remote backend over httpx."""

    def __init__(
        self,
        base_url: str,
        api_key: str = "",
        http_client: httpx.AsyncClient | None = None,
        timeout: float = 10.0,
    ):
        self._base_url = base_url.rstrip("/")
        self._api_key = api_key
        self._http_client = http_client
        self._timeout = timeout

    @property
    def base_url(self) -> str:
        return self._base_url

    def _get_headers(self) -> dict[str, str]:
        headers = {
            "Accept": "application/json",
            "Content-Type": "application/json",
        }
        if self._api_key:
            headers["Authorization"] = f"Bearer {self._api_key}"
        return headers

    async def _get_client(self) -> httpx.AsyncClient:
        """Return the injected client or create a new one."""
        if self._http_client is not None:
            return self._http_client
        return httpx.AsyncClient(timeout=self._timeout)

    async def request(
        self,
        path: str,
        *,
        method: str = "GET",
        body: Any | None = None,
    ) -> Any:
        """Send ``method path`` with an optional JSON body.

        Returns the decoded JSON (unwrapping a ``{"data": ...}`` envelope) or
        None for an empty response. Raises :class:`RemoteApiError` for non-2xx
        answers and bodies that are not JSON; transport failures surface as
        ``httpx.HTTPError``.
        """
        url = f"{self._base_url}/{path.lstrip('/')}"
        client = await self._get_client()
        should_close = self._http_client is None

        try:
            logger.debug("%s %s", method, url)
            response = await client.request(
                method,
                url,
                headers=self._get_headers(),
                json=body,
            )
            if not response.is_success:
                self._raise_remote_error(response, path)
            return self._decode(response, path)
        finally:
            if should_close:
                await client.aclose()

    async def check_connection(self) -> ConnectionStatus:
        try:
            await self.request("/health")
        except (RemoteApiError, httpx.HTTPError) as exc:
            return ConnectionStatus(connected=False, error=str(exc) or type(exc).__name__)
        return ConnectionStatus(connected=True)

    async def aclose(self) -> None:
        if self._http_client is not None:
            await self._http_client.aclose()

    @staticmethod
    def _decode(response: httpx.Response, path: str) -> Any:
        if response.status_code == 204 or not response.content:
            return None
        try:
            data = response.json()
        except ValueError:
            raise RemoteApiError(
                response.status_code, "Response body is not JSON", path
            ) from None
        if isinstance(data, dict) and set(data) <= {"data", "error"} and "data" in data:
            if data.get("error"):
                raise RemoteApiError(response.status_code, str(data["error"]), path)
            return data["data"]
        return data

    @staticmethod
    def _raise_remote_error(response: httpx.Response, path: str) -> None:
        """Raise RemoteApiError from a non-2xx httpx Response."""
        try:
            data = response.json()
            error = data.get("error") or data.get("detail") or response.text
            message = error.get("message", str(error)) if isinstance(error, dict) else str(error)
        except Exception:
            message = response.text
        raise RemoteApiError(response.status_code, message or response.reason_phrase, path)
