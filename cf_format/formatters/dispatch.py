"""Route a value-format config to its formatter."""

from __future__ import annotations

import datetime as dt
from typing import Any, Callable, Dict

from cf_common.api import FormatConfigError
from cf_format.formatters.context import FormatContext
from cf_format.formatters.markdown import format_markdown
from cf_format.formatters.numeric import (
    format_currency,
    format_number,
    format_percent,
    format_scientific,
)
from cf_format.formatters.temporal import format_date, format_datetime, format_time

Formatter = Callable[[Any, Any, FormatContext], str]

FORMATTERS: Dict[str, Formatter] = {
    "number": format_number,
    "integer": format_number,
    "percent": format_percent,
    "currency": format_currency,
    "scientific": format_scientific,
    "date": format_date,
    "time": format_time,
    "datetime": format_datetime,
    "markdown": format_markdown,
}


def format_value(value: Any, config: Any, context: FormatContext) -> str:
    """Format one non-missing raw value according to ``config``."""
    kind = getattr(config, "kind", None)
    formatter = FORMATTERS.get(kind)
    if formatter is None:
        raise FormatConfigError(
            f"No value formatter for kind {kind!r}", context={"kind": kind}
        )
    return formatter(value, config, context)


def default_text(value: Any) -> str:
    """Text for a cell that no format rule targets."""
    if isinstance(value, dt.datetime):
        return value.isoformat(sep=" ")
    if isinstance(value, (dt.date, dt.time)):
        return value.isoformat()
    return str(value)
