"""
Uniform random choice of a coaster id.

One ``random.Random`` lives for the whole process, seeded once from OS
entropy, and is shared by every request behind a lock. Reseeding per call
from the wall clock would make concurrent requests pick the same coaster.
"""

import random
import threading
from typing import Optional, Sequence


class RandomSelector:
    """
    Picks one id with probability 1/n from n candidates.

    Pass a seeded ``random.Random`` to make the sequence reproducible.
    """

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self._rng = rng if rng is not None else random.Random()
        self._lock = threading.Lock()

    def choose(self, ids: Sequence[str]) -> Optional[str]:
        """Return one of ``ids``, or None when there is nothing to choose from."""
        if not ids:
            return None
        if len(ids) == 1:
            return ids[0]
        with self._lock:
            index = self._rng.randrange(len(ids))
        return ids[index]
