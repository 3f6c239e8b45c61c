"""Public API surface for cf_format."""

from cf_format.colors import CellColor, ColorMapper, ColorScale
from cf_format.engine import (
    CellError,
    FormatRule,
    FormatRuleSet,
    RenderedCell,
    RenderResult,
    ResolvedFormat,
    RuleKind,
)
from cf_format.formatters import FormatContext, default_text, format_value
from cf_format.models import (
    ColorFormat,
    CurrencyFormat,
    DateFormat,
    DatetimeFormat,
    FormatSettings,
    IntegerFormat,
    MarkdownFormat,
    MissingFormat,
    NumberFormat,
    PercentFormat,
    ScientificFormat,
    TimeFormat,
    parse_format_config,
)
from cf_format.selection import (
    ALL,
    Coordinate,
    Selector,
    contains,
    ends_with,
    matches,
    resolve,
    starts_with,
    where,
)
from cf_format.table import Cell, Table

__all__ = [
    "ALL",
    "Cell",
    "CellColor",
    "CellError",
    "ColorFormat",
    "ColorMapper",
    "ColorScale",
    "Coordinate",
    "CurrencyFormat",
    "DateFormat",
    "DatetimeFormat",
    "FormatContext",
    "FormatRule",
    "FormatRuleSet",
    "FormatSettings",
    "IntegerFormat",
    "MarkdownFormat",
    "MissingFormat",
    "NumberFormat",
    "PercentFormat",
    "RenderResult",
    "RenderedCell",
    "ResolvedFormat",
    "RuleKind",
    "ScientificFormat",
    "Selector",
    "Table",
    "TimeFormat",
    "contains",
    "default_text",
    "ends_with",
    "format_value",
    "matches",
    "parse_format_config",
    "resolve",
    "starts_with",
    "where",
]
