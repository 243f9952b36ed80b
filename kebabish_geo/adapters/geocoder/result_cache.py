"""In-memory geocoding result cache with TTL and bounded size.

Negative results ("provider found nothing") are stored the same way as
hits, with ``result=None``, so unresolvable addresses do not hammer the
provider. Staleness is checked lazily on read; stale entries are ignored
and eventually overwritten, never swept.

Eviction is insertion-ordered (oldest key first), not LRU: reads do not
refresh an entry's position.
"""

from __future__ import annotations

import time
from collections.abc import Callable
from dataclasses import dataclass

from kebabish_geo.domain.value_objects.geocoding_result import GeocodingResult


@dataclass(frozen=True)
class CacheEntry:
    result: GeocodingResult | None
    timestamp: float


class GeocodeCache:
    def __init__(
        self,
        max_size: int = 500,
        ttl_seconds: float = 24 * 60 * 60,
        clock: Callable[[], float] = time.time,
    ):
        self._max_size = max_size
        self._ttl = ttl_seconds
        self._clock = clock
        self._entries: dict[str, CacheEntry] = {}

    def get(self, key: str) -> CacheEntry | None:
        """Return the entry for ``key`` if it is still fresh."""
        entry = self._entries.get(key)
        if entry is None:
            return None
        if self._clock() - entry.timestamp >= self._ttl:
            return None
        return entry

    def put(self, key: str, result: GeocodingResult | None) -> None:
        if self._entries and len(self._entries) >= self._max_size:
            oldest_key = next(iter(self._entries))
            del self._entries[oldest_key]

        self._entries[key] = CacheEntry(result=result, timestamp=self._clock())

    def clear(self) -> None:
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries
