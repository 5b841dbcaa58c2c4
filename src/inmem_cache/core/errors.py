"""
Cache error types.
Raised synchronously at configuration or insertion time; misses are never errors.
"""


class CacheError(Exception):
    """Base class for cache errors."""


class InvalidTtl(CacheError, ValueError):
    def __init__(self, ttl_ms: float) -> None:
        super().__init__(f"TTL must be positive, got {ttl_ms} ms")
        self.ttl_ms = ttl_ms


class UnknownUnit(CacheError, ValueError):
    def __init__(self, unit: object) -> None:
        super().__init__(f"Unknown time unit: {unit!r}")
        self.unit = unit
