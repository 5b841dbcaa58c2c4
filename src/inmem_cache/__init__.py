"""Process-local key/value cache with per-entry time-to-live."""

from .core.cache import CacheEntry, InMemoryCache, initialize, reset_default_cache
from .core.errors import CacheError, InvalidTtl, UnknownUnit
from .core.schemas import CacheStats
from .core.time_units import TimeUnit, convert, milliseconds_per_unit, to_milliseconds

__all__ = [
    "CacheEntry",
    "InMemoryCache",
    "initialize",
    "reset_default_cache",
    "CacheError",
    "InvalidTtl",
    "UnknownUnit",
    "CacheStats",
    "TimeUnit",
    "convert",
    "milliseconds_per_unit",
    "to_milliseconds",
]
