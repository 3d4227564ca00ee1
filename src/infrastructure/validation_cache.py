"""In-memory TTL cache for batch validation reports."""

from collections.abc import Callable, Hashable
from dataclasses import dataclass
import time

from src.application.ports.validation_cache import ValidationCachePort
from src.domain.models.pnl import EntryValidationReport


@dataclass
class CacheMetrics:
    """Hit and miss counters of a cache instance."""

    hits: int = 0
    misses: int = 0
    evictions: int = 0

    @property
    def hit_rate(self) -> float:
        """Return the hit percentage, 0 when nothing was looked up."""
        total = self.hits + self.misses
        return self.hits / total * 100 if total else 0.0


class ValidationCache(ValidationCachePort):
    """Cache evicting entries older than ``ttl_seconds``.

    Expired entries are dropped on lookup, before every insert and by
    :meth:`cleanup`.
    """

    def __init__(
        self,
        ttl_seconds: float = 300.0,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._ttl = ttl_seconds
        self._clock = clock
        self._items: dict[Hashable, tuple[float, EntryValidationReport]] = {}
        self.metrics = CacheMetrics()

    def __len__(self) -> int:
        return len(self._items)

    def get(self, key: Hashable) -> EntryValidationReport | None:
        item = self._items.get(key)
        if item is not None and self._is_fresh(item[0]):
            self.metrics.hits += 1
            return item[1]
        if item is not None:
            del self._items[key]
            self.metrics.evictions += 1
        self.metrics.misses += 1
        return None

    def set(self, key: Hashable, report: EntryValidationReport) -> None:
        self.cleanup()
        self._items[key] = (self._clock(), report)

    def cleanup(self) -> int:
        """Drop expired entries and return how many were removed."""
        expired = [
            key
            for key, (stored_at, _) in self._items.items()
            if not self._is_fresh(stored_at)
        ]
        for key in expired:
            del self._items[key]
        self.metrics.evictions += len(expired)
        return len(expired)

    def _is_fresh(self, stored_at: float) -> bool:
        return self._clock() - stored_at < self._ttl


__all__ = ["ValidationCache", "CacheMetrics"]
