"""
Date and time formatters driven by preset style patterns.

Pattern tokens (CLDR-like subset); text in single quotes is literal and
``''`` is a literal quote:

    y / yy / yyyy   year, two-digit year, zero-padded year
    Y               ISO week-numbering year
    M / MM          month number, zero-padded
    MMM / MMMM      abbreviated / full month name
    d / dd          day of month
    E..EEE / EEEE   abbreviated / full weekday name
    w / ww          ISO week number
    Q               quarter
    H / HH          hour (0-23)
    h / hh          hour (1-12)
    m / mm          minute
    s / ss          second
    a               day period (AM/PM)
"""

from __future__ import annotations

import datetime as dt
from dataclasses import dataclass
from functools import lru_cache
from typing import Any

import numpy as np
import pandas as pd

from cf_common.api import FormatConfigError, ParseError
from cf_format.formatters.context import FormatContext
from cf_format.formatters.numeric import apply_pattern
from cf_format.models.config import DateFormat, DatetimeFormat, TimeFormat
from cf_locale.api import CalendarNames

DATE_TOKENS = frozenset(
    {"y", "yy", "yyyy", "Y", "M", "MM", "MMM", "MMMM", "d", "dd",
     "E", "EE", "EEE", "EEEE", "w", "ww", "Q"}
)
TIME_TOKENS = frozenset({"H", "HH", "h", "hh", "m", "mm", "s", "ss", "a"})


@dataclass(frozen=True)
class CompiledPattern:
    source: str
    parts: tuple[tuple[bool, str], ...]

    @property
    def tokens(self) -> frozenset[str]:
        return frozenset(text for is_token, text in self.parts if is_token)

    @property
    def uses_date(self) -> bool:
        return bool(self.tokens & DATE_TOKENS)

    @property
    def uses_time(self) -> bool:
        return bool(self.tokens & TIME_TOKENS)


@lru_cache(maxsize=128)
def compile_pattern(pattern: str) -> CompiledPattern:
    """Split a style pattern into literal and token parts."""
    parts: list[tuple[bool, str]] = []
    literal: list[str] = []

    def flush() -> None:
        if literal:
            parts.append((False, "".join(literal)))
            literal.clear()

    pos = 0
    while pos < len(pattern):
        char = pattern[pos]
        if char == "'":
            if pattern.startswith("''", pos):
                literal.append("'")
                pos += 2
                continue
            end = pattern.find("'", pos + 1)
            if end == -1:
                raise FormatConfigError(
                    "Unterminated quote in date/time pattern", context={"pattern": pattern}
                )
            literal.append(pattern[pos + 1:end])
            pos = end + 1
            continue
        if char.isascii() and char.isalpha():
            end = pos
            while end < len(pattern) and pattern[end] == char:
                end += 1
            token = pattern[pos:end]
            if token not in DATE_TOKENS and token not in TIME_TOKENS:
                raise FormatConfigError(
                    f"Unsupported date/time token: {token!r}",
                    context={"pattern": pattern, "token": token},
                )
            flush()
            parts.append((True, token))
            pos = end
            continue
        literal.append(char)
        pos += 1
    flush()
    return CompiledPattern(source=pattern, parts=tuple(parts))


def _render_token(token: str, value: Any, names: CalendarNames) -> str:
    lead = token[0]
    width = len(token)
    if lead == "y":
        if width == 2:
            return f"{value.year % 100:02d}"
        if width == 4:
            return f"{value.year:04d}"
        return str(value.year)
    if lead == "Y":
        return str(value.isocalendar()[0])
    if lead == "M":
        if width == 1:
            return str(value.month)
        if width == 2:
            return f"{value.month:02d}"
        if width == 3:
            return names.months_abbr[value.month - 1]
        return names.months[value.month - 1]
    if lead == "d":
        return f"{value.day:02d}" if width == 2 else str(value.day)
    if lead == "E":
        if width == 4:
            return names.weekdays[value.weekday()]
        return names.weekdays_abbr[value.weekday()]
    if lead == "w":
        week = value.isocalendar()[1]
        return f"{week:02d}" if width == 2 else str(week)
    if lead == "Q":
        return str((value.month - 1) // 3 + 1)
    if lead == "H":
        return f"{value.hour:02d}" if width == 2 else str(value.hour)
    if lead == "h":
        hour = value.hour % 12 or 12
        return f"{hour:02d}" if width == 2 else str(hour)
    if lead == "m":
        return f"{value.minute:02d}" if width == 2 else str(value.minute)
    if lead == "s":
        return f"{value.second:02d}" if width == 2 else str(value.second)
    if lead == "a":
        return names.periods[0 if value.hour < 12 else 1]
    raise FormatConfigError(f"Unsupported date/time token: {token!r}")


def render_pattern(compiled: CompiledPattern, value: Any, names: CalendarNames) -> str:
    return "".join(
        _render_token(text, value, names) if is_token else text
        for is_token, text in compiled.parts
    )


def _native(value: Any) -> Any:
    if isinstance(value, np.datetime64):
        return pd.Timestamp(value).to_pydatetime()
    return value


def _parse_failure(value: Any, kind: str, exc: Exception | None = None) -> ParseError:
    return ParseError(
        f"Cannot parse {value!r} as an ISO {kind}",
        context={"value": value, "expected": kind},
        cause=exc,
    )


def parse_date(value: Any) -> dt.date:
    value = _native(value)
    if isinstance(value, dt.datetime):
        return value.date()
    if isinstance(value, dt.date):
        return value
    if isinstance(value, str):
        text = value.strip()
        try:
            return dt.date.fromisoformat(text)
        except ValueError:
            pass
        try:
            return dt.datetime.fromisoformat(text).date()
        except ValueError as exc:
            raise _parse_failure(value, "date", exc) from exc
    raise _parse_failure(value, "date")


def parse_time(value: Any) -> dt.time:
    value = _native(value)
    if isinstance(value, dt.datetime):
        return value.time()
    if isinstance(value, dt.time):
        return value
    if isinstance(value, str):
        text = value.strip()
        try:
            return dt.time.fromisoformat(text)
        except ValueError:
            pass
        try:
            return dt.datetime.fromisoformat(text).time()
        except ValueError as exc:
            raise _parse_failure(value, "time", exc) from exc
    raise _parse_failure(value, "time")


def parse_datetime(value: Any) -> dt.datetime:
    value = _native(value)
    if isinstance(value, dt.datetime):
        return value
    if isinstance(value, dt.date):
        return dt.datetime.combine(value, dt.time())
    if isinstance(value, str):
        try:
            return dt.datetime.fromisoformat(value.strip())
        except ValueError as exc:
            raise _parse_failure(value, "datetime", exc) from exc
    raise _parse_failure(value, "datetime")


def date_pattern(style: int | str, context: FormatContext) -> CompiledPattern:
    compiled = compile_pattern(context.locale_provider.get_date_style(style))
    if compiled.uses_time:
        raise FormatConfigError(
            f"Date style {style!r} uses time tokens", context={"style": style}
        )
    return compiled


def time_pattern(style: int | str, context: FormatContext) -> CompiledPattern:
    compiled = compile_pattern(context.locale_provider.get_time_style(style))
    if compiled.uses_date:
        raise FormatConfigError(
            f"Time style {style!r} uses date tokens", context={"style": style}
        )
    return compiled


def _names(locale: str | None, context: FormatContext) -> CalendarNames:
    return context.locale_provider.get_calendar_names(context.resolve_locale(locale))


def format_date(value: Any, config: DateFormat, context: FormatContext) -> str:
    compiled = date_pattern(config.date_style, context)
    text = render_pattern(compiled, parse_date(value), _names(config.locale, context))
    return apply_pattern(config.pattern, text)


def format_time(value: Any, config: TimeFormat, context: FormatContext) -> str:
    compiled = time_pattern(config.time_style, context)
    text = render_pattern(compiled, parse_time(value), _names(config.locale, context))
    return apply_pattern(config.pattern, text)


def format_datetime(value: Any, config: DatetimeFormat, context: FormatContext) -> str:
    date_part = date_pattern(config.date_style, context)
    time_part = time_pattern(config.time_style, context)
    moment = parse_datetime(value)
    names = _names(config.locale, context)
    text = (
        render_pattern(date_part, moment, names)
        + config.sep
        + render_pattern(time_part, moment, names)
    )
    return apply_pattern(config.pattern, text)
