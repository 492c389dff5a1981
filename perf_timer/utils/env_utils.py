"""Environment variable utilities.

Typed readers for the ``PERF_TIMER_*`` settings with default fallbacks.
"""

import os
from typing import Optional


def parse_bool_env(key: str, default: bool = False) -> bool:
    """Parse a boolean value from an environment variable.

    Args:
        key: The environment variable name.
        default: Value used when the variable is unset or blank.

    Returns:
        True for '1', 'true', 'yes' or 'on' (case-insensitive), False for
        any other non-blank value, the default otherwise.

    Examples:
        >>> os.environ["PERF_TIMER_LOG_ON_FINALIZE"] = "yes"
        >>> parse_bool_env("PERF_TIMER_LOG_ON_FINALIZE")
        True
        >>> parse_bool_env("UNSET_VAR", default=True)
        True
    """
    value = os.getenv(key)
    if value is None or not value.strip():
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


def parse_str_env(key: str, default: Optional[str] = None) -> Optional[str]:
    """Parse a string value from an environment variable.

    Blank values fall back to the default so that ``FOO=`` in a ``.env``
    file does not override a built-in setting.
    """
    value = os.getenv(key)
    if value is None or not value.strip():
        return default
    return value.strip()
