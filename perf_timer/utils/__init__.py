"""Utility modules for the performance timer package."""

from .env_utils import parse_bool_env, parse_str_env

__all__ = [
    "parse_bool_env",
    "parse_str_env",
]
