"""Value object describing reachability of the remote backend."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ConnectionStatus:
    connected: bool
    error: str | None = None
