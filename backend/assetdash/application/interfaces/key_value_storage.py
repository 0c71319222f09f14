"""Abstract interface (port) for local key-value persistence of collections."""

from abc import ABC, abstractmethod
from typing import Any


class KeyValueStorage(ABC):
    """Port for local persistence: one JSON-compatible value per key."""

    @abstractmethod
    async def load(self, key: str, default: Any) -> Any:
        """Return the stored value for ``key`` or ``default`` when absent."""
        ...

    @abstractmethod
    async def save(self, key: str, value: Any) -> None:
        """Persist ``value`` under ``key``, replacing any previous value."""
        ...
