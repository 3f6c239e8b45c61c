"""Public API surface for cf_common."""

from cf_common.config import parse_bool_env, parse_str_env
from cf_common.discovery import (
    discover_entrypoints,
    load_entrypoint,
    load_pending_entrypoints,
)
from cf_common.errors import (
    CFError,
    FormatConfigError,
    ParseError,
    ReferenceLookupError,
    RenderError,
    SelectionError,
    error_to_payload,
    wrap_error,
)
from cf_common.logging import configure_logging

__all__ = [
    "CFError",
    "FormatConfigError",
    "ParseError",
    "ReferenceLookupError",
    "RenderError",
    "SelectionError",
    "configure_logging",
    "discover_entrypoints",
    "error_to_payload",
    "load_entrypoint",
    "load_pending_entrypoints",
    "parse_bool_env",
    "parse_str_env",
    "wrap_error",
]
