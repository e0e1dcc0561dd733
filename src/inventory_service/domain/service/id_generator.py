"""Domain service: identifier allocation for new items.

A millisecond timestamp alone collides when two registrations land in
the same tick, so each id also carries a per-process sequence number
and a random suffix. The sequence makes ids unique within a process,
the random part keeps separate processes (or a restart inside the same
millisecond) from reusing one.
"""

from __future__ import annotations

import secrets
import threading
import time
from collections.abc import Callable


class IdGenerator:
    """Thread-safe generator of ``<millis>-<seq>-<rand>`` identifiers.

    Ids contain only digits, hex letters and dashes, so they are safe
    to use directly as file names.
    """

    def __init__(self, clock: Callable[[], float] = time.time) -> None:
        self._clock = clock
        self._lock = threading.Lock()
        self._sequence = 0

    def new_id(self) -> str:
        with self._lock:
            self._sequence += 1
            sequence = self._sequence
        millis = int(self._clock() * 1000)
        return f"{millis}-{sequence:06d}-{secrets.token_hex(2)}"
