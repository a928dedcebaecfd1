"""
Staleness-windowed query cache for callers of the entity services.

Entries are keyed by (family, key) and served until the family's
staleness window elapses or a mutation invalidates the family. Related
families are invalidated together: a booking change also drops cached
technician data, a customer change also drops bookings.
"""

import logging
import time
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Hashable, Optional, TypeVar

from acservice.config import CacheConfig, settings

logger = logging.getLogger(__name__)

T = TypeVar("T")

FAMILIES = ("services", "bookings", "availability", "customers", "technicians", "testimonials")

RELATED_FAMILIES: dict[str, tuple[str, ...]] = {
    "bookings": ("bookings", "availability", "technicians"),
    "customers": ("customers", "bookings"),
    "testimonials": ("testimonials",),
    "technicians": ("technicians", "availability"),
    "services": ("services",),
    "availability": ("availability",),
}


@dataclass
class _Entry:
    value: Any
    stored_at: float


class QueryCache:
    def __init__(
        self,
        config: Optional[CacheConfig] = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        cfg = config or settings.cache
        self._stale_after = {
            "services": cfg.services_stale_seconds,
            "bookings": cfg.bookings_stale_seconds,
            "availability": cfg.availability_stale_seconds,
            "customers": cfg.customers_stale_seconds,
            "technicians": cfg.technicians_stale_seconds,
            "testimonials": cfg.testimonials_stale_seconds,
        }
        self._clock = clock
        self._entries: dict[tuple[str, Hashable], _Entry] = {}
        self.hits = 0
        self.misses = 0

    def _check_family(self, family: str) -> None:
        if family not in self._stale_after:
            raise ValueError(f"Unknown cache family {family!r}. Valid: {list(FAMILIES)}")

    def is_fresh(self, family: str, key: Hashable) -> bool:
        self._check_family(family)
        entry = self._entries.get((family, key))
        return entry is not None and self._clock() - entry.stored_at < self._stale_after[family]

    async def fetch(self, family: str, key: Hashable, loader: Callable[[], Awaitable[T]]) -> T:
        """Return the cached value if fresh, otherwise await ``loader`` and store it.

        Loader exceptions propagate and nothing is cached.
        """
        if self.is_fresh(family, key):
            self.hits += 1
            return self._entries[(family, key)].value
        self.misses += 1
        value = await loader()
        self._entries[(family, key)] = _Entry(value=value, stored_at=self._clock())
        return value

    def invalidate(self, family: str) -> int:
        """Drop every entry of ``family`` and of the families it affects."""
        self._check_family(family)
        targets = set(RELATED_FAMILIES[family])
        stale = [k for k in self._entries if k[0] in targets]
        for k in stale:
            del self._entries[k]
        logger.debug("Invalidated %d cache entries for %s", len(stale), sorted(targets))
        return len(stale)

    def clear(self) -> None:
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)
