"""
Identifier generation for new coasters.

Ids are handed out by an injectable generator so tests can supply
deterministic values. The default generator combines a strictly increasing
nanosecond timestamp with a random suffix: two calls inside the same clock
tick still differ, and ids from a restarted process are unlikely to collide
with stored ones.
"""

import itertools
import secrets
import threading
import time
from typing import Callable, Literal, Protocol
from uuid import uuid4

IdStrategy = Literal["time", "uuid"]


class IdGenerator(Protocol):
    """Anything that can produce a fresh coaster id."""

    def next_id(self) -> str: ...


class TimeOrderedIdGenerator:
    """
    Ids of the form ``<nanoseconds>-<8 hex chars>``.

    The timestamp part never repeats within one generator: if the clock has
    not advanced (or went backwards) since the last call, the previous value
    plus one is used instead.
    """

    def __init__(self, clock: Callable[[], int] = time.time_ns) -> None:
        self._clock = clock
        self._last = 0
        self._lock = threading.Lock()

    def next_id(self) -> str:
        with self._lock:
            stamp = max(self._clock(), self._last + 1)
            self._last = stamp
        return f"{stamp}-{secrets.token_hex(4)}"


class UuidIdGenerator:
    """Random uuid4 ids, hex encoded."""

    def next_id(self) -> str:
        return uuid4().hex


class SequentialIdGenerator:
    """Predictable ids (``coaster-1``, ``coaster-2``, ...) for tests and demos."""

    def __init__(self, prefix: str = "coaster-", start: int = 1) -> None:
        self._prefix = prefix
        self._counter = itertools.count(start)
        self._lock = threading.Lock()

    def next_id(self) -> str:
        with self._lock:
            value = next(self._counter)
        return f"{self._prefix}{value}"


def create_id_generator(strategy: IdStrategy = "time") -> IdGenerator:
    """Build the generator named by the ``id_strategy`` setting."""
    if strategy == "time":
        return TimeOrderedIdGenerator()
    if strategy == "uuid":
        return UuidIdGenerator()
    raise ValueError(f"Unknown id strategy: {strategy}")
