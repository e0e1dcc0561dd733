"""Per-item mutual exclusion.

Mutations are read-modify-write cycles over a whole document, so two
concurrent updates to the same id would otherwise lose one of the
changes. ItemLocks serializes work per id while leaving different ids
fully parallel. A lock exists only while somebody holds or waits on
it; the registry does not grow with the number of items ever touched.
"""

from __future__ import annotations

import threading
from collections.abc import Iterator
from contextlib import contextmanager


class _Entry:
    __slots__ = ("lock", "users")

    def __init__(self) -> None:
        self.lock = threading.Lock()
        self.users = 0


class ItemLocks:

    def __init__(self) -> None:
        self._guard = threading.Lock()
        self._entries: dict[str, _Entry] = {}

    @contextmanager
    def hold(self, item_id: str) -> Iterator[None]:
        """Block until no other mutation of ``item_id`` is in flight."""
        with self._guard:
            entry = self._entries.get(item_id)
            if entry is None:
                entry = self._entries[item_id] = _Entry()
            entry.users += 1

        entry.lock.acquire()
        try:
            yield
        finally:
            entry.lock.release()
            with self._guard:
                entry.users -= 1
                if entry.users == 0:
                    del self._entries[item_id]

    def __len__(self) -> int:
        with self._guard:
            return len(self._entries)
