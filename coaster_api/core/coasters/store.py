"""
The storage interface the coaster service depends on.

Implementations live in ``coaster_api.infrastructure.store``. Every
operation must appear atomic to other callers: an in-process store does it
with locks, a database-backed store with one transaction per call.
"""

from __future__ import annotations

from typing import Protocol

from .models import Coaster


class CoasterStore(Protocol):
    """
    Keyed collection of coaster records.

    Failures of the backing system are raised as ``StorageError``.
    """

    def list(self) -> list[Coaster]:
        """Snapshot of every stored coaster, in no particular order."""
        ...

    def ids(self) -> list[str]:
        """Snapshot of every stored id."""
        ...

    def get(self, coaster_id: str) -> Coaster:
        """Return the coaster or raise ``CoasterNotFoundError``."""
        ...

    def put(self, coaster_id: str, coaster: Coaster) -> None:
        """Insert or fully replace the record at ``coaster_id``."""
        ...

    def replace(self, coaster_id: str, coaster: Coaster) -> None:
        """Replace an existing record; raise ``CoasterNotFoundError`` if absent."""
        ...

    def delete(self, coaster_id: str) -> bool:
        """Remove the record if present. Returns whether it existed."""
        ...
