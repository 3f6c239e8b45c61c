"""Configuration models for cf_format."""

from .config import (
    AnyFormat,
    ColorFormat,
    CurrencyFormat,
    DateFormat,
    DatetimeFormat,
    IntegerFormat,
    MarkdownFormat,
    MissingFormat,
    NumberFormat,
    PercentFormat,
    ScientificFormat,
    TimeFormat,
    build_config,
    parse_format_config,
)
from .settings import FormatSettings

__all__ = [
    "AnyFormat",
    "ColorFormat",
    "CurrencyFormat",
    "DateFormat",
    "DatetimeFormat",
    "FormatSettings",
    "IntegerFormat",
    "MarkdownFormat",
    "MissingFormat",
    "NumberFormat",
    "PercentFormat",
    "ScientificFormat",
    "TimeFormat",
    "build_config",
    "parse_format_config",
]
