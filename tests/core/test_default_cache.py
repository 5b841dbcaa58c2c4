"""Tests for the process-wide shared cache."""

import pytest

from inmem_cache import initialize
from inmem_cache.config.settings import CacheSettings
from inmem_cache.core import cache as cache_module
from inmem_cache.core.errors import InvalidTtl
from inmem_cache.core.time_units import TimeUnit


def test_initialize_returns_single_instance():
    """Test that repeated initialize calls share one store."""
    first = initialize()
    second = initialize()
    assert first is second

    first.set("user1", "John")
    assert second.get("user1") == "John"


def test_reinitialize_updates_default_only(clock):
    """Test that re-initializing keeps entries and their expiry."""
    shared = initialize(10, TimeUnit.MINUTE, clock=clock)
    shared.set("old", "v")

    again = initialize(5, TimeUnit.SECOND)
    assert again is shared
    assert again.default_ttl_ms == 5000
    again.set("new", "v")

    clock.advance(6000)
    assert shared.get("new") is None
    assert shared.get("old") == "v"


def test_invalid_initialize_does_not_create_instance():
    """Test that a rejected first initialize leaves no shared cache."""
    with pytest.raises(InvalidTtl):
        initialize(0, TimeUnit.MINUTE)
    assert cache_module._default_cache is None


def test_invalid_reinitialize_keeps_config():
    """Test that a rejected reconfiguration keeps the previous default."""
    shared = initialize(2, TimeUnit.SECOND)
    with pytest.raises(InvalidTtl):
        initialize(-1, TimeUnit.SECOND)
    assert shared.default_ttl_ms == 2000


def test_initialize_defaults_from_settings(monkeypatch):
    """Test that omitted arguments come from settings."""
    monkeypatch.setattr(
        cache_module.settings,
        "cache",
        CacheSettings(default_ttl=30, default_ttl_unit="second"),
    )
    shared = initialize()
    assert shared.default_ttl_ms == 30000


def test_reset_default_cache():
    """Test that reset gives the next initialize a fresh store."""
    first = initialize()
    first.set("key", "value")
    cache_module.reset_default_cache()
    second = initialize()
    assert second is not first
    assert second.get("key") is None
