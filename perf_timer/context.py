"""
Context-local "current timer" for code that cannot pass a timer around.

Each thread and each asyncio task sees its own current timer, so tasks
running concurrently inside child_context() do not see each other's child.

Entirely opt-in: timers work without it, and nothing is recorded unless
a caller installs a timer first.

Usage:
    from perf_timer.context import timer_context, child_context

    with timer_context() as timer:
        with child_context("parse"):
            parse(document)      # @timed functions record into "parse"
        timer.finalize()
"""

import logging
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Iterator, Optional

from .timer import PerformanceTimer

logger = logging.getLogger(__name__)

# Context-local storage for the active timer
_current_timer: ContextVar[Optional[PerformanceTimer]] = ContextVar(
    'current_timer',
    default=None
)


def get_current_timer() -> Optional[PerformanceTimer]:
    """
    Get the timer installed for the current context.

    Returns:
        PerformanceTimer if set, None otherwise
    """
    return _current_timer.get()


def set_current_timer(timer: Optional[PerformanceTimer]) -> None:
    """
    Install a timer for the current context.

    Args:
        timer: Timer to install, or None to clear
    """
    _current_timer.set(timer)


def clear_current_timer() -> None:
    """Clear the timer installed for the current context."""
    _current_timer.set(None)


@contextmanager
def timer_context(timer: Optional[PerformanceTimer] = None) -> Iterator[PerformanceTimer]:
    """
    Install a timer as current for the duration of the block.

    The previously installed timer, if any, is restored on exit.

    Args:
        timer: Timer to install; a new one is created when omitted

    Yields:
        PerformanceTimer: The installed timer
    """
    timer = timer if timer is not None else PerformanceTimer()
    token = _current_timer.set(timer)
    try:
        yield timer
    finally:
        _current_timer.reset(token)


@contextmanager
def child_context(name: str) -> Iterator[PerformanceTimer]:
    """
    Install a child of the current timer for the duration of the block.

    Without a current timer the block gets a detached timer so callers
    can use it unconditionally.

    Args:
        name: Label for the sub-operation

    Yields:
        PerformanceTimer: The child timer
    """
    parent = get_current_timer()
    if parent is None:
        logger.debug(f"No current timer, child context '{name}' is detached")
        child = PerformanceTimer()
    else:
        child = parent.with_context(name)

    with timer_context(child):
        yield child


__all__ = [
    "get_current_timer",
    "set_current_timer",
    "clear_current_timer",
    "timer_context",
    "child_context",
]
