"""
Decorator for recording function calls into the current timer.

Provides:
- @timed: Measure each call as a span of the thread's current timer
"""

import functools
import inspect
import logging
from typing import Callable, Optional

from .context import get_current_timer

logger = logging.getLogger(__name__)


def timed(name: Optional[str] = None):
    """
    Decorator to measure a function call into the current timer.

    Works for both sync and async functions. When no timer is installed
    (see ``perf_timer.context``) the function runs untimed.

    Args:
        name: Measure name; defaults to the function's qualified name

    Usage:
        @timed()
        def parse(document):
            ...

        @timed("fetch")
        async def fetch_document(uri):
            ...
    """

    def decorator(func: Callable) -> Callable:
        measure_name = name or func.__qualname__

        if inspect.iscoroutinefunction(func):
            @functools.wraps(func)
            async def async_wrapper(*args, **kwargs):
                timer = get_current_timer()
                if timer is None:
                    logger.debug(f"No current timer, running {measure_name} untimed")
                    return await func(*args, **kwargs)
                with timer.span(measure_name):
                    return await func(*args, **kwargs)

            return async_wrapper

        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            timer = get_current_timer()
            if timer is None:
                logger.debug(f"No current timer, running {measure_name} untimed")
                return func(*args, **kwargs)
            with timer.span(measure_name):
                return func(*args, **kwargs)

        return wrapper

    return decorator


__all__ = [
    "timed",
]
