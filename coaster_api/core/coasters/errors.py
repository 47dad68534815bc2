"""
Errors raised by the coaster core and its stores.

Each error maps to exactly one HTTP status in ``CoasterService``:

- CoasterRequestError subclasses: the client sent something unusable (415/400)
- CoasterNotFoundError: unknown id, or nothing to pick from (404)
- StorageError: the backend failed (500)
"""


class CoasterError(Exception):
    """Base class for coaster errors."""
    pass


class CoasterRequestError(CoasterError):
    """Raised when a write request is rejected before touching the store."""
    pass


class UnsupportedMediaTypeError(CoasterRequestError):
    """Raised when a write request does not declare a JSON body."""

    def __init__(self, content_type: str | None, required: str) -> None:
        self.content_type = content_type or ""
        self.required = required
        super().__init__(
            f"Need content-type '{required}' but got '{self.content_type}'"
        )


class InvalidCoasterError(CoasterRequestError):
    """Raised when a request body cannot be parsed into a coaster."""
    pass


class CoasterNotFoundError(CoasterError):
    """Raised when a requested coaster doesn't exist."""

    def __init__(self, coaster_id: str) -> None:
        self.coaster_id = coaster_id
        super().__init__(f"Coaster {coaster_id} not found")


class StorageError(CoasterError):
    """Raised when the storage backend fails."""
    pass
