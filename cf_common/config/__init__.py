"""Configuration helpers for cf_common."""

from .env import parse_bool_env, parse_str_env

__all__ = [
    "parse_bool_env",
    "parse_str_env",
]
