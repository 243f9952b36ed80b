"""Per-address rate limiter for outbound geocoding lookups."""

from __future__ import annotations

import time
from collections.abc import Callable


class AddressRateLimiter:
    """Counts lookups per normalized address inside a sliding window.

    Each address has its own quota; there is no shared budget. A counter
    expires ``window_seconds`` after its most recent increment, so steady
    traffic spaced under the window keeps the counter alive.
    """

    def __init__(
        self,
        max_requests: int = 10,
        window_seconds: float = 60.0,
        clock: Callable[[], float] = time.monotonic,
    ):
        self._max_requests = max_requests
        self._window = window_seconds
        self._clock = clock
        # key -> (count, expires_at), kept in expiry order
        self._counters: dict[str, tuple[int, float]] = {}

    def count(self, key: str) -> int:
        self._purge_expired()
        counter = self._counters.get(key)
        return counter[0] if counter is not None else 0

    def is_allowed(self, key: str) -> bool:
        return self.count(key) < self._max_requests

    def record(self, key: str) -> None:
        """Increment the counter for ``key`` and push its expiry out a full window."""
        count = self.count(key)
        # Re-inserting moves the key to the back, keeping the dict ordered by expiry
        self._counters.pop(key, None)
        self._counters[key] = (count + 1, self._clock() + self._window)

    def _purge_expired(self) -> None:
        now = self._clock()
        while self._counters:
            key, (_, expires_at) = next(iter(self._counters.items()))
            if expires_at > now:
                break
            del self._counters[key]

    def __len__(self) -> int:
        self._purge_expired()
        return len(self._counters)
