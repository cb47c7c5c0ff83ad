"""
Error types for the tracker.

NotFoundError is recoverable: the command that raised it applied no change.
ParseError and StorageIOError mean the store cannot be trusted or reached.
"""


class TrackerError(Exception):
    """Base exception for tracker operations."""
    pass


class NotFoundError(TrackerError):
    """Referenced epic or story id does not exist."""

    def __init__(self, item_id: int, kind: str = "item", context: str | None = None):
        self.item_id = item_id
        self.kind = kind
        super().__init__(f"{kind} {item_id} not found" + (f" in {context}" if context else ""))


class ParseError(TrackerError):
    """Persisted content is not a well-formed tracker state."""

    def __init__(self, message: str, path: str | None = None):
        self.path = path
        super().__init__(message + (f" at {path}" if path else ""))


class StorageIOError(TrackerError):
    """Backing store could not be read or written."""
    pass
