"""
Performance timer configuration.

All settings are configurable via environment variables with PERF_TIMER_ prefix.
"""

import logging
from typing import Optional
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

from perf_timer.clock import CLOCK_SOURCES
from perf_timer.utils.env_utils import parse_bool_env, parse_str_env


class TimerConfig(BaseSettings):
    """Configuration for performance timers."""

    clock_source: str = Field(
        default="perf_counter",
        description="Clock used by timers created without an explicit clock",
    )

    @field_validator('clock_source')
    @classmethod
    def validate_clock_source(cls, v: str) -> str:
        """Validate the clock source is a known clock."""
        if v not in CLOCK_SOURCES:
            known = ", ".join(sorted(CLOCK_SOURCES))
            raise ValueError(f"clock_source must be one of: {known}")
        return v

    log_on_finalize: bool = Field(
        default=False,
        description="Log the formatted snapshot when finalize() is called",
    )

    log_level: str = Field(
        default="DEBUG",
        description="Level used when logging snapshots on finalize",
    )

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate the log level is a standard logging level name."""
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Invalid log level: {v}")
        return level

    @property
    def log_level_value(self) -> int:
        """Numeric logging level for ``log_level``."""
        return logging.getLevelName(self.log_level)

    class Config:
        env_prefix = "PERF_TIMER_"
        case_sensitive = False

    @classmethod
    def from_env(cls) -> "TimerConfig":
        """Create config from environment variables."""
        return cls(
            clock_source=parse_str_env("PERF_TIMER_CLOCK_SOURCE", "perf_counter"),
            log_on_finalize=parse_bool_env("PERF_TIMER_LOG_ON_FINALIZE", False),
            log_level=parse_str_env("PERF_TIMER_LOG_LEVEL", "DEBUG"),
        )


# Singleton config instance
_config: Optional[TimerConfig] = None


def get_timer_config() -> TimerConfig:
    """Get the timer config singleton."""
    global _config
    if _config is None:
        _config = TimerConfig.from_env()
    return _config


def reset_timer_config() -> None:
    """Reset the config singleton (for testing)."""
    global _config
    _config = None
