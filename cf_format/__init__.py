"""Declarative, column/row-targeted cell formatting for tabular data."""

from cf_common.api import configure_logging as _configure_logging

_configure_logging()

from cf_format.api import (  # noqa: E402,F401
    ALL,
    FormatRuleSet,
    FormatSettings,
    RenderResult,
    Selector,
    Table,
    where,
)

__all__ = [
    "ALL",
    "FormatRuleSet",
    "FormatSettings",
    "RenderResult",
    "Selector",
    "Table",
    "where",
]
