"""Time sources for performance timers.

A clock is any zero-argument callable returning a monotonic reading in
milliseconds. Timers take the clock as a constructor argument so tests
can substitute a deterministic fake.
"""

import time
from typing import Callable, Dict, Optional

Clock = Callable[[], float]


def perf_counter_ms() -> float:
    """Return the high-resolution performance counter in milliseconds."""
    return time.perf_counter() * 1000


def monotonic_ms() -> float:
    """Return the system monotonic clock in milliseconds."""
    return time.monotonic() * 1000


CLOCK_SOURCES: Dict[str, Clock] = {
    "perf_counter": perf_counter_ms,
    "monotonic": monotonic_ms,
}


def get_clock(source: str) -> Clock:
    """
    Resolve a clock by its configured name.

    Args:
        source: One of the keys of ``CLOCK_SOURCES``

    Returns:
        The clock callable

    Raises:
        ValueError: If the source name is unknown
    """
    try:
        return CLOCK_SOURCES[source]
    except KeyError:
        known = ", ".join(sorted(CLOCK_SOURCES))
        raise ValueError(f"Unknown clock source '{source}' (expected one of: {known})") from None


def elapsed_ms(start_ms: float, clock: Optional[Clock] = None) -> float:
    """
    Calculate elapsed milliseconds since a reading of the same clock.

    Args:
        start_ms: Earlier reading taken from ``clock``
        clock: Clock to read now; defaults to ``perf_counter_ms``

    Returns:
        Elapsed time in milliseconds

    Example:
        >>> start = perf_counter_ms()
        >>> # ... do some work ...
        >>> print(f"Took {elapsed_ms(start):.2f}ms")
    """
    clock = clock or perf_counter_ms
    return clock() - start_ms
