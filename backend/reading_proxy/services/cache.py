"""In-memory TTL cache for daily readings.

Expiry is lazy: an entry older than the TTL is dropped the next time its key
is read. Nothing sweeps the store in the background, so ``size`` and
``stats()`` still count expired entries that have not been read since.
"""

import math
import threading
import time
from dataclasses import dataclass
from typing import Any, Callable

from reading_proxy.config import CACHE_TTL


@dataclass(frozen=True)
class CacheEntry:
    data: str
    timestamp: float  # creation time, never refreshed on read
    date: str


class ReadingCache:
    """Thread-safe date -> reading cache with a single fixed TTL."""

    def __init__(self, ttl: int = CACHE_TTL, clock: Callable[[], float] = time.time):
        self._store: dict[str, CacheEntry] = {}
        self._ttl = ttl
        self._clock = clock
        self._lock = threading.Lock()

    @property
    def ttl(self) -> int:
        return self._ttl

    @property
    def size(self) -> int:
        with self._lock:
            return len(self._store)

    def get(self, key: str) -> CacheEntry | None:
        with self._lock:
            entry = self._store.get(key)
            if entry is None:
                return None
            if self._clock() - entry.timestamp > self._ttl:
                del self._store[key]
                return None
            return entry

    def put(self, key: str, data: str) -> None:
        entry = CacheEntry(data=data, timestamp=self._clock(), date=key)
        with self._lock:
            self._store[key] = entry

    def clear(self) -> None:
        with self._lock:
            self._store.clear()

    def stats(self) -> dict[str, Any]:
        """Snapshot of the store. Does not evict expired entries.

        Returns {size, ttl, entries: [{key, date, age}]} with age in whole
        seconds, halves rounded up.
        """
        now = self._clock()
        with self._lock:
            entries = [
                {"key": key, "date": entry.date, "age": math.floor(now - entry.timestamp + 0.5)}
                for key, entry in self._store.items()
            ]
            return {"size": len(self._store), "ttl": self._ttl, "entries": entries}
