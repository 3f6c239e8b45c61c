"""Tests for date and time formatters."""

from __future__ import annotations

import datetime as dt

import numpy as np
import pandas as pd
import pytest

from cf_common.api import FormatConfigError, ParseError, ReferenceLookupError
from cf_format.formatters import FormatContext
from cf_format.formatters.temporal import (
    compile_pattern,
    format_date,
    format_datetime,
    format_time,
    parse_date,
    parse_datetime,
    parse_time,
)
from cf_format.models import DateFormat, DatetimeFormat, TimeFormat
from cf_locale.api import BuiltinLocaleProvider


pytestmark = pytest.mark.unit_format


@pytest.fixture
def context() -> FormatContext:
    return FormatContext(BuiltinLocaleProvider())


def test_compile_pattern_handles_quotes() -> None:
    compiled = compile_pattern("y-'W'ww 'at' ''")
    assert compiled.parts == (
        (True, "y"),
        (False, "-W"),
        (True, "ww"),
        (False, " at '"),
    )
    assert compiled.uses_date
    assert not compiled.uses_time


@pytest.mark.parametrize("pattern", ["yyyy-'MM", "yyyy-MM-DD"])
def test_compile_pattern_rejects_bad_patterns(pattern: str) -> None:
    with pytest.raises(FormatConfigError):
        compile_pattern(pattern)


@pytest.mark.parametrize(
    ("style", "expected"),
    [
        (1, "2000-02-29"),
        (2, "Tuesday, February 29, 2000"),
        (3, "Tue, Feb 29, 2000"),
        (7, "29 Feb 2000"),
        (11, "2000"),
        (15, "00/02/29"),
        (16, "2000-W09"),
        (17, "2000-Q1"),
        ("iso", "2000-02-29"),
    ],
)
def test_format_date_styles(context: FormatContext, style, expected: str) -> None:
    assert format_date("2000-02-29", DateFormat(date_style=style), context) == expected


def test_format_date_localized_names(context: FormatContext) -> None:
    config = DateFormat(date_style=8, locale="de")
    assert format_date(dt.date(2021, 3, 4), config, context) == "4 März 2021"


def test_format_date_accepts_native_values(context: FormatContext) -> None:
    config = DateFormat(date_style=1)
    assert format_date(dt.datetime(2021, 3, 4, 12, 0), config, context) == "2021-03-04"
    assert format_date(pd.Timestamp("2021-03-04"), config, context) == "2021-03-04"
    assert format_date(np.datetime64("2021-03-04"), config, context) == "2021-03-04"


def test_format_date_rejects_unparseable_text(context: FormatContext) -> None:
    with pytest.raises(ParseError) as excinfo:
        format_date("29/02/2000", DateFormat(), context)
    assert excinfo.value.context["expected"] == "date"
    with pytest.raises(ParseError):
        format_date(20000229, DateFormat(), context)


def test_format_date_unknown_style(context: FormatContext) -> None:
    with pytest.raises(ReferenceLookupError):
        format_date("2000-02-29", DateFormat(date_style=99), context)


@pytest.mark.parametrize(
    ("style", "expected"),
    [
        (1, "13:05:09"),
        (2, "13:05"),
        (3, "1:05:09 PM"),
        (4, "1:05 PM"),
        (5, "1 PM"),
    ],
)
def test_format_time_styles(context: FormatContext, style: int, expected: str) -> None:
    assert format_time("13:05:09", TimeFormat(time_style=style), context) == expected


def test_format_time_midnight_is_twelve_am(context: FormatContext) -> None:
    assert format_time(dt.time(0, 30), TimeFormat(time_style=4), context) == "12:30 AM"


def test_format_time_from_datetime_text(context: FormatContext) -> None:
    assert format_time("2020-01-01T08:15:00", TimeFormat(time_style=2), context) == "08:15"


def test_format_datetime(context: FormatContext) -> None:
    config = DatetimeFormat(date_style=6, time_style=4, sep=" at ")
    assert format_datetime("2021-12-25T18:30:00", config, context) == "Dec 25, 2021 at 6:30 PM"
    assert format_datetime(dt.date(2021, 12, 25), DatetimeFormat(), context) == "2021-12-25 00:00:00"


def test_format_datetime_pattern(context: FormatContext) -> None:
    config = DateFormat(date_style=11, pattern="FY{x}")
    assert format_date("2021-06-01", config, context) == "FY2021"


def test_parsers() -> None:
    assert parse_date("2021-06-01T10:00:00") == dt.date(2021, 6, 1)
    assert parse_time(dt.datetime(2021, 6, 1, 10, 0)) == dt.time(10, 0)
    assert parse_datetime("2021-06-01") == dt.datetime(2021, 6, 1)
    with pytest.raises(ParseError):
        parse_time("noon")
    with pytest.raises(ParseError):
        parse_datetime(3.5)
