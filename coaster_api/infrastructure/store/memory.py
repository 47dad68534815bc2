"""
In-memory coaster store.

Holds every coaster in a dict for the lifetime of the process. Reads share
a readers-writer lock, writes take it exclusively, so list and get never see
a write in progress. Records are frozen dataclasses and are handed out as-is.

Not durable, but enough for local development, tests and single-process
deployments.
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from ...core.coasters.errors import CoasterNotFoundError
from ...core.coasters.models import Coaster
from .locking import ReadWriteLock

logger = logging.getLogger(__name__)


class InMemoryCoasterStore:
    """Dict-backed ``CoasterStore``."""

    def __init__(self, initial: Optional[Iterable[Coaster]] = None) -> None:
        self._coasters: dict[str, Coaster] = {}
        self._lock = ReadWriteLock()

        for coaster in initial or ():
            self._coasters[coaster.id] = coaster

        logger.info(
            "Initialized in-memory coaster store",
            extra={"count": len(self._coasters)},
        )

    def list(self) -> list[Coaster]:
        with self._lock.read():
            return list(self._coasters.values())

    def ids(self) -> list[str]:
        with self._lock.read():
            return list(self._coasters)

    def get(self, coaster_id: str) -> Coaster:
        with self._lock.read():
            coaster = self._coasters.get(coaster_id)
        if coaster is None:
            raise CoasterNotFoundError(coaster_id)
        return coaster

    def put(self, coaster_id: str, coaster: Coaster) -> None:
        # The key is authoritative for the stored id.
        record = coaster.with_id(coaster_id)
        with self._lock.write():
            self._coasters[coaster_id] = record

    def replace(self, coaster_id: str, coaster: Coaster) -> None:
        record = coaster.with_id(coaster_id)
        with self._lock.write():
            if coaster_id not in self._coasters:
                raise CoasterNotFoundError(coaster_id)
            self._coasters[coaster_id] = record

    def delete(self, coaster_id: str) -> bool:
        with self._lock.write():
            return self._coasters.pop(coaster_id, None) is not None

    def __len__(self) -> int:
        with self._lock.read():
            return len(self._coasters)
