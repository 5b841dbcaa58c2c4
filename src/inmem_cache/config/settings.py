"""Configuration settings for the cache."""
import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()


@dataclass
class CacheSettings:
    default_ttl: float = float(os.getenv("CACHE_DEFAULT_TTL", 10))
    # unit name, resolved with TimeUnit.parse
    default_ttl_unit: str = os.getenv("CACHE_DEFAULT_TTL_UNIT", "minute")
    log_level: str = os.getenv("CACHE_LOG_LEVEL", "INFO")


class Settings:
    cache = CacheSettings()


settings = Settings()
