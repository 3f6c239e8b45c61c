"""Shared helpers for cellfmt."""

from cf_common.api import CFError, configure_logging

__all__ = ["CFError", "configure_logging"]
