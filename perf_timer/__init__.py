"""
Hierarchical performance timer.

Records named durations within a single operation, with child contexts
for attributing time to sub-operations and a nested snapshot for
console inspection or embedding in a larger trace payload.
"""

from .clock import Clock, elapsed_ms, get_clock, monotonic_ms, perf_counter_ms
from .config import TimerConfig, get_timer_config, reset_timer_config
from .context import (
    child_context,
    clear_current_timer,
    get_current_timer,
    set_current_timer,
    timer_context,
)
from .decorators import timed
from .report import format_snapshot, log_snapshot
from .schemas import Measure, NestedMeasures
from .timer import PerformanceTimer

__version__ = "1.0.0"

__all__ = [
    # Timer
    "PerformanceTimer",
    # Schemas
    "Measure",
    "NestedMeasures",
    # Clock
    "Clock",
    "elapsed_ms",
    "get_clock",
    "monotonic_ms",
    "perf_counter_ms",
    # Config
    "TimerConfig",
    "get_timer_config",
    "reset_timer_config",
    # Context
    "child_context",
    "clear_current_timer",
    "get_current_timer",
    "set_current_timer",
    "timer_context",
    # Decorators
    "timed",
    # Report
    "format_snapshot",
    "log_snapshot",
]
