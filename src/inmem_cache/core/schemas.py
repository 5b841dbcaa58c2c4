"""
Pydantic models for cache introspection.
"""

from pydantic import BaseModel, Field


class CacheStats(BaseModel):
    size: int = Field(ge=0)
    live_size: int = Field(ge=0)
    default_ttl_ms: float = Field(gt=0)
    hits: int = Field(default=0, ge=0)
    misses: int = Field(default=0, ge=0)
    expirations: int = Field(default=0, ge=0)
