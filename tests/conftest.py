"""Shared test fixtures and configuration."""

import sys
from pathlib import Path

import pytest

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))


# =============================================================================
# Fake Clock
# =============================================================================

class FakeClock:
    """Manually advanced millisecond clock."""

    def __init__(self, now: float = 1000.0):
        self.now = now
        self.reads = 0

    def __call__(self) -> float:
        self.reads += 1
        return self.now

    def advance(self, ms: float) -> None:
        self.now += ms


@pytest.fixture
def clock():
    """Deterministic clock starting at 1000ms."""
    return FakeClock()


@pytest.fixture
def timer(clock):
    """PerformanceTimer driven by the fake clock."""
    from perf_timer.timer import PerformanceTimer

    return PerformanceTimer(clock=clock)


# =============================================================================
# Environment Variable Fixtures
# =============================================================================

TIMER_ENV_VARS = (
    "PERF_TIMER_CLOCK_SOURCE",
    "PERF_TIMER_LOG_ON_FINALIZE",
    "PERF_TIMER_LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Clear timer environment variables."""
    for key in TIMER_ENV_VARS:
        monkeypatch.delenv(key, raising=False)


# =============================================================================
# Singleton Reset
# =============================================================================

@pytest.fixture(autouse=True)
def reset_singletons():
    """Reset config singleton and current timer before and after each test."""
    from perf_timer.config import reset_timer_config
    from perf_timer.context import clear_current_timer

    reset_timer_config()
    clear_current_timer()

    yield

    reset_timer_config()
    clear_current_timer()
