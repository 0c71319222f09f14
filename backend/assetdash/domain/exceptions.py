"""Domain-specific exceptions: framework-independent."""


class EntityNotFoundError(Exception):
    """Raised when a requested entity does not exist."""

    def __init__(self, entity_type: str, entity_id: int | str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} with id '{entity_id}' not found")


class UnknownEntityKindError(Exception):
    """Raised when a kind name does not match any managed collection."""

    def __init__(self, kind: str):
        self.kind = kind
        super().__init__(f"Unknown entity kind '{kind}'")


class EntityKindMismatchError(Exception):
    """Raised when a record is handed to a flow for a different kind."""

    def __init__(self, expected: str, actual: str):
        self.expected = expected
        self.actual = actual
        super().__init__(f"Expected a '{expected}' record, got '{actual}'")


class InvalidStatusTransitionError(Exception):
    """Raised when a status change is not allowed from the current status."""

    def __init__(self, entity_type: str, current: str, target: str):
        self.entity_type = entity_type
        self.current = current
        self.target = target
        super().__init__(
            f"{entity_type} cannot move from '{current}' to '{target}'"
        )


class RemoteApiError(Exception):
    """Raised when the remote backend rejects a request or answers garbage."""

    def __init__(self, status_code: int, message: str, path: str = ""):
        self.status_code = status_code
        self.message = message
        self.path = path
        where = f" {path}" if path else ""
        super().__init__(f"[remote] {status_code}{where}: {message}")
