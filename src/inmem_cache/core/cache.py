"""
In-memory TTL cache with lazy expiry.
Expired entries are dropped only when read, so size() may count entries that
are already logically gone; live_size() gives the read-only alternative.
"""

import threading
import time
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

from ..config.settings import settings
from ..logging import get_logger
from .errors import InvalidTtl
from .schemas import CacheStats
from .time_units import Number, TimeUnit, milliseconds_per_unit, to_milliseconds

_LOG = get_logger(__name__)

Clock = Callable[[], float]


def _wall_clock_ms() -> float:
    return time.time() * 1000


def _ttl_ms(duration: Number, unit: TimeUnit) -> Number:
    ttl_ms = to_milliseconds(duration, unit)
    if not ttl_ms > 0:
        _LOG.warning("rejected ttl", extra={"ttl": duration, "unit": unit.name})
        raise InvalidTtl(ttl_ms)
    return ttl_ms


@dataclass
class CacheEntry:
    value: Any
    expires_at: float  # ms, same timeline as the cache clock

    def expired(self, now: float) -> bool:
        return now >= self.expires_at


class InMemoryCache:
    """Key/value store whose entries vanish once their TTL has elapsed.

    Each instance owns its own store, so tests can build isolated caches.
    Use the module-level ``initialize()`` to share one store across a process.

    Args:
        default_ttl: TTL applied when ``set`` gets no override.
        ttl_unit: unit of ``default_ttl``.
        clock: zero-argument callable returning the current time in ms.
    """

    def __init__(
        self,
        default_ttl: Number = 10,
        ttl_unit: TimeUnit = TimeUnit.MINUTE,
        clock: Optional[Clock] = None,
    ) -> None:
        self._default_ttl_ms = _ttl_ms(default_ttl, ttl_unit)
        self._clock: Clock = clock or _wall_clock_ms
        self._data: Dict[str, CacheEntry] = {}
        self._lock = threading.Lock()
        self._hits = 0
        self._misses = 0
        self._expirations = 0

    @property
    def default_ttl_ms(self) -> Number:
        return self._default_ttl_ms

    def initialize(
        self, default_ttl: Number = 10, ttl_unit: TimeUnit = TimeUnit.MINUTE
    ) -> "InMemoryCache":
        """Change the default TTL for future inserts; stored entries keep theirs."""
        ttl_ms = _ttl_ms(default_ttl, ttl_unit)
        with self._lock:
            self._default_ttl_ms = ttl_ms
            count = len(self._data)
        _LOG.info(
            "cache reconfigured", extra={"default_ttl_ms": ttl_ms, "entries": count}
        )
        return self

    def set(
        self,
        key: str,
        value: Any,
        ttl: Optional[Number] = None,
        ttl_unit: Optional[TimeUnit] = None,
    ) -> None:
        # an override needs both halves; a lone unit is still checked
        ttl_ms = None
        if ttl_unit is not None:
            milliseconds_per_unit(ttl_unit)
            if ttl is not None:
                ttl_ms = _ttl_ms(ttl, ttl_unit)
        with self._lock:
            if ttl_ms is None:
                ttl_ms = self._default_ttl_ms
            self._data[key] = CacheEntry(value, self._clock() + ttl_ms)

    def get(self, key: str) -> Optional[Any]:
        with self._lock:
            entry = self._data.get(key)
            if entry is None:
                self._misses += 1
                return None
            if entry.expired(self._clock()):
                del self._data[key]
                self._misses += 1
                self._expirations += 1
                _LOG.debug("expired entry purged", extra={"key": key})
                return None
            self._hits += 1
            return entry.value

    def clear(self) -> None:
        with self._lock:
            count = len(self._data)
            self._data.clear()
        _LOG.debug("cache cleared", extra={"entries": count})

    def size(self) -> int:
        with self._lock:
            return len(self._data)

    def live_size(self) -> int:
        with self._lock:
            return self._count_live()

    def stats(self) -> CacheStats:
        with self._lock:
            return CacheStats(
                size=len(self._data),
                live_size=self._count_live(),
                default_ttl_ms=self._default_ttl_ms,
                hits=self._hits,
                misses=self._misses,
                expirations=self._expirations,
            )

    def _count_live(self) -> int:
        now = self._clock()
        return sum(1 for entry in self._data.values() if not entry.expired(now))


_default_cache: Optional[InMemoryCache] = None
_default_lock = threading.Lock()


def initialize(
    default_ttl: Optional[Number] = None,
    ttl_unit: Optional[TimeUnit] = None,
    clock: Optional[Clock] = None,
) -> InMemoryCache:
    """Return the process-wide cache, creating it on first call.

    Later calls only update the default TTL of the same instance; ``clock`` is
    honoured on creation only. Omitted values come from settings.
    """
    global _default_cache
    if default_ttl is None:
        default_ttl = settings.cache.default_ttl
    if ttl_unit is None:
        ttl_unit = TimeUnit.parse(settings.cache.default_ttl_unit)
    with _default_lock:
        if _default_cache is None:
            _default_cache = InMemoryCache(default_ttl, ttl_unit, clock=clock)
            return _default_cache
        shared = _default_cache
    return shared.initialize(default_ttl, ttl_unit)


def reset_default_cache() -> None:
    global _default_cache
    with _default_lock:
        _default_cache = None
