import pytest

from inmem_cache.core.cache import reset_default_cache


class FakeClock:
    """Manually advanced millisecond clock."""

    def __init__(self, start_ms: float = 1_700_000_000_000) -> None:
        self.now = start_ms

    def __call__(self) -> float:
        return self.now

    def advance(self, ms: float) -> None:
        self.now += ms


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture(autouse=True)
def _fresh_default_cache():
    reset_default_cache()
    yield
    reset_default_cache()
