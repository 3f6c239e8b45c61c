"""Single-value formatters."""

from .context import FormatContext
from .dispatch import FORMATTERS, default_text, format_value

__all__ = ["FORMATTERS", "FormatContext", "default_text", "format_value"]
