"""Tests for numeric value formatters."""

from __future__ import annotations

from decimal import Decimal

import numpy as np
import pytest

from cf_common.api import ParseError, ReferenceLookupError
from cf_format.formatters import FormatContext
from cf_format.formatters.numeric import (
    choose_suffix,
    format_currency,
    format_number,
    format_percent,
    format_scientific,
    group_digits,
    round_decimal,
    to_decimal,
)
from cf_format.models import (
    CurrencyFormat,
    IntegerFormat,
    NumberFormat,
    PercentFormat,
    ScientificFormat,
)
from cf_locale.api import BuiltinLocaleProvider
from cf_locale.locales import NARROW_NBSP


pytestmark = pytest.mark.unit_format


@pytest.fixture
def context() -> FormatContext:
    return FormatContext(BuiltinLocaleProvider())


def test_to_decimal_uses_shortest_repr() -> None:
    assert to_decimal(2.675) == Decimal("2.675")
    assert to_decimal(np.float32(0.5)) == Decimal("0.5")
    assert to_decimal(" 12.5 ") == Decimal("12.5")


@pytest.mark.parametrize("value", [True, "abc", float("inf"), float("nan"), object()])
def test_to_decimal_rejects_non_numeric(value) -> None:
    with pytest.raises(ParseError):
        to_decimal(value)


def test_round_decimal_half_up() -> None:
    assert round_decimal(Decimal("2.675"), 2) == (Decimal("2.68"), 2)
    assert round_decimal(Decimal("-0.5"), 0)[0] == Decimal("-1")


def test_round_decimal_significant_figures() -> None:
    assert round_decimal(Decimal("0.012345"), 2, 3) == (Decimal("0.0123"), 4)
    value, places = round_decimal(Decimal("9.996"), 2, 3)
    assert value == Decimal("10.0")
    assert places == 1


def test_group_digits() -> None:
    assert group_digits("123", ",") == "123"
    assert group_digits("1234567", ".") == "1.234.567"


def test_choose_suffix_picks_largest_power() -> None:
    assert choose_suffix(Decimal("999"), ("K", "M")) == (Decimal("999"), "")
    value, label = choose_suffix(Decimal("2500000"), ("K", "M"))
    assert (value, label) == (Decimal("2.5"), "M")
    value, label = choose_suffix(Decimal("2500000"), ("K", None))
    assert (value, label) == (Decimal("2500"), "K")


@pytest.mark.parametrize(
    ("value", "options", "expected"),
    [
        (1234.5, {}, "1,234.50"),
        (-1234.5, {"accounting": True}, "(1,234.50)"),
        (0.001, {}, "0.00"),
        (-0.001, {}, "0.00"),
        (5, {"force_sign": True}, "+5.00"),
        (0, {"force_sign": True}, "0.00"),
        (1234.5, {"use_seps": False, "decimals": 1}, "1234.5"),
        (1.5, {"decimals": 3, "drop_trailing_zeros": True}, "1.5"),
        (2.0, {"drop_trailing_zeros": True}, "2"),
        (2.0, {"drop_trailing_zeros": True, "drop_trailing_dec_mark": False}, "2."),
        (750, {"scale_by": 1 / 1000, "decimals": 1, "pattern": "{x}K"}, "0.8K"),
        (1_234_567, {"suffixing": True}, "1.23M"),
        (999, {"suffixing": True, "decimals": 0}, "999"),
        (999_999, {"suffixing": True}, "1.00M"),
        (-999_999, {"suffixing": True}, "-1.00M"),
        (999_499, {"suffixing": True, "decimals": 0}, "999K"),
        (999_999, {"suffixing": ["K", None]}, "1,000.00K"),
        (12345, {"n_sigfig": 2}, "12,000"),
        (0.012345, {"n_sigfig": 3}, "0.0123"),
        (42, {"pattern": "[{x}]", "decimals": 0}, "[42]"),
        (1234.5, {"sep_mark": ".", "dec_mark": ","}, "1.234,50"),
    ],
)
def test_format_number(context: FormatContext, value, options, expected) -> None:
    assert format_number(value, NumberFormat(**options), context) == expected


def test_format_number_uses_locale_marks(context: FormatContext) -> None:
    assert format_number(1234.5, NumberFormat(locale="de"), context) == "1.234,50"
    assert format_number(1234.5, NumberFormat(locale="fr"), context) == f"1{NARROW_NBSP}234,50"
    fallback = FormatContext(BuiltinLocaleProvider(), locale="de")
    assert format_number(1234.5, NumberFormat(), fallback) == "1.234,50"


def test_format_number_unknown_locale(context: FormatContext) -> None:
    with pytest.raises(ReferenceLookupError):
        format_number(1, NumberFormat(locale="xx"), context)


def test_format_number_rejects_text(context: FormatContext) -> None:
    with pytest.raises(ParseError):
        format_number("twelve", NumberFormat(), context)


def test_format_integer(context: FormatContext) -> None:
    assert format_number(1234.5, IntegerFormat(), context) == "1,235"


@pytest.mark.parametrize(
    ("value", "options", "expected"),
    [
        (0.15, {}, "15.00%"),
        (0.15, {"decimals": 0, "incl_space": True}, "15 %"),
        (15, {"scale_values": False, "decimals": 1}, "15.0%"),
        (-0.5, {"decimals": 0, "placement": "left"}, "-%50"),
        (0.123, {"decimals": 1, "force_sign": True}, "+12.3%"),
    ],
)
def test_format_percent(context: FormatContext, value, options, expected) -> None:
    assert format_percent(value, PercentFormat(**options), context) == expected


@pytest.mark.parametrize(
    ("value", "options", "expected"),
    [
        (10, {"currency": "EUR"}, "€10.00"),
        (1234.567, {}, "$1,234.57"),
        (-5, {}, "-$5.00"),
        (-5, {"accounting": True}, "($5.00)"),
        (1234, {"currency": "JPY"}, "¥1,234"),
        (1.5, {"currency": "KWD"}, "KD1.500"),
        (10, {"currency": "EUR", "use_code": True, "incl_space": True}, "EUR 10.00"),
        (10, {"currency": "EUR", "placement": "right", "incl_space": True}, "10.00 €"),
        (10.4, {"use_subunits": False}, "$10"),
        (10, {"symbol": "CHF ", "decimals": 1}, "CHF 10.0"),
    ],
)
def test_format_currency(context: FormatContext, value, options, expected) -> None:
    assert format_currency(value, CurrencyFormat(**options), context) == expected


def test_format_currency_with_locale(context: FormatContext) -> None:
    config = CurrencyFormat(currency="EUR", locale="de", placement="right", incl_space=True)
    assert format_currency(1234.5, config, context) == "1.234,50 €"


def test_format_currency_unknown_code(context: FormatContext) -> None:
    with pytest.raises(ReferenceLookupError):
        format_currency(1, CurrencyFormat(currency="ZZZ"), context)


@pytest.mark.parametrize(
    ("value", "options", "expected"),
    [
        (123456, {}, "1.23 × 10⁵"),
        (123456, {"exp_style": "e"}, "1.23e+05"),
        (0.00012, {"exp_style": "E", "decimals": 1}, "1.2E-04"),
        (9.999, {}, "1.00 × 10¹"),
        (0.00012, {}, "1.20 × 10⁻⁴"),
        (0.00012, {"target": "html"}, "1.20 &times; 10<sup>&minus;4</sup>"),
        (5, {"decimals": 1}, "5.0"),
        (0, {}, "0.00"),
        (-123456, {"decimals": 1}, "-1.2 × 10⁵"),
        (150, {"drop_trailing_zeros": True, "decimals": 3}, "1.5 × 10²"),
        (150, {"force_sign_m": True, "force_sign_n": True}, "+1.50 × 10⁺²"),
    ],
)
def test_format_scientific(context: FormatContext, value, options, expected) -> None:
    assert format_scientific(value, ScientificFormat(**options), context) == expected


def test_format_scientific_locale_dec_mark(context: FormatContext) -> None:
    assert format_scientific(123456, ScientificFormat(locale="de"), context) == "1,23 × 10⁵"
