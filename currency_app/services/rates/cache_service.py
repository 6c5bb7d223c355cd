from __future__ import annotations

"""Per-base-currency rate cache.

One snapshot per base currency, valid while ``now - timestamp < ttl``.
Validity is checked on every read; expired entries stay in place until a
successful refresh overwrites them. The key space is the small set of
currencies users pick from, so there is no eviction.

The cache is an ordinary object: the application creates one at startup
(see ``currency_app.main``) and clears it on shutdown.
"""
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Callable, Dict, Mapping, Optional

DEFAULT_TTL = timedelta(hours=1)


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class RateSnapshot:
    rates: Mapping[str, float]
    timestamp: datetime


class RateCache:
    def __init__(
        self,
        ttl: timedelta = DEFAULT_TTL,
        clock: Callable[[], datetime] = utcnow,
    ):
        if ttl <= timedelta(0):
            raise ValueError("cache ttl must be positive")
        self._ttl = ttl
        self._clock = clock
        self._entries: Dict[str, RateSnapshot] = {}

    @property
    def ttl(self) -> timedelta:
        return self._ttl

    def _is_valid(self, snapshot: RateSnapshot) -> bool:
        return self._clock() - snapshot.timestamp < self._ttl

    def get(self, base: str) -> Optional[RateSnapshot]:
        """Return the snapshot for ``base`` if it is still fresh."""
        snapshot = self._entries.get(base)
        if snapshot and self._is_valid(snapshot):
            return snapshot
        return None

    def peek(self, base: str) -> Optional[RateSnapshot]:
        """Return the stored snapshot for ``base`` whether fresh or not."""
        return self._entries.get(base)

    def put(self, base: str, rates: Mapping[str, float]) -> RateSnapshot:
        snapshot = RateSnapshot(rates=rates, timestamp=self._clock())
        self._entries[base] = snapshot
        return snapshot

    def invalidate(self, base: str) -> bool:
        return self._entries.pop(base, None) is not None

    def clear(self) -> None:
        self._entries.clear()

    def __contains__(self, base: object) -> bool:
        return isinstance(base, str) and self.get(base) is not None

    def __len__(self) -> int:
        return len(self._entries)
