"""
Numeric value formatters: number, integer, percent, currency, scientific.

All arithmetic runs on ``Decimal`` built from the shortest repr of the input,
so ``2.675`` rounds half-up to ``2.68`` the way a reader expects rather than
following its binary float expansion.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation, localcontext
from typing import Any, Optional, Sequence

from cf_common.api import ParseError
from cf_format.formatters.context import FormatContext
from cf_format.models.config import (
    PATTERN_PLACEHOLDER,
    CurrencyFormat,
    NumberFormat,
    PercentFormat,
    ScientificFormat,
)

_PRECISION = 80
_SUPERSCRIPTS = str.maketrans("0123456789-+", "⁰¹²³⁴⁵⁶⁷⁸⁹⁻⁺")


def to_decimal(value: Any) -> Decimal:
    """Convert a raw numeric value (or numeric text) to a finite Decimal."""
    if isinstance(value, bool):
        raise ParseError("Boolean values are not numeric", context={"value": value})
    try:
        if isinstance(value, Decimal):
            result = value
        elif isinstance(value, int):
            result = Decimal(value)
        elif isinstance(value, float):
            result = Decimal(repr(value))
        elif isinstance(value, str):
            result = Decimal(value.strip())
        else:
            result = Decimal(repr(float(value)))
    except (InvalidOperation, TypeError, ValueError) as exc:
        raise ParseError(
            f"Value is not numeric: {value!r}", context={"value": value}, cause=exc
        ) from exc
    if not result.is_finite():
        raise ParseError(f"Value is not finite: {value!r}", context={"value": value})
    return result


def scale(value: Decimal, factor: float) -> Decimal:
    if factor == 1:
        return value
    with localcontext() as ctx:
        ctx.prec = _PRECISION
        return value * Decimal(repr(factor))


def _shift(value: Decimal, power: int) -> Decimal:
    """Multiply by 1000 ** power without losing digits."""
    if not power:
        return value
    with localcontext() as ctx:
        ctx.prec = _PRECISION
        return value.scaleb(3 * power)


def _quantum(places: int) -> Decimal:
    return Decimal(1).scaleb(-places)


def round_decimal(
    value: Decimal, decimals: int, n_sigfig: Optional[int] = None
) -> tuple[Decimal, int]:
    """Round half-up; return the rounded value and the fraction digits to show."""
    with localcontext() as ctx:
        ctx.prec = _PRECISION
        if n_sigfig is None:
            return value.quantize(_quantum(decimals), rounding=ROUND_HALF_UP), decimals
        if value.is_zero():
            places = n_sigfig - 1
            return Decimal(0).quantize(_quantum(places)), places
        exponent = value.adjusted()
        places = n_sigfig - 1 - exponent
        rounded = value.quantize(_quantum(places), rounding=ROUND_HALF_UP)
        if rounded.adjusted() > exponent:
            # 9.99 -> 10.0 gained a digit; keep the significant-figure count.
            places -= 1
            rounded = value.quantize(_quantum(places), rounding=ROUND_HALF_UP)
        return rounded, max(places, 0)


def group_digits(digits: str, sep_mark: str) -> str:
    if len(digits) <= 3:
        return digits
    head = len(digits) % 3 or 3
    groups = [digits[:head]]
    groups.extend(digits[pos:pos + 3] for pos in range(head, len(digits), 3))
    return sep_mark.join(groups)


def suffix_step(value: Decimal, labels: Sequence[Optional[str]]) -> tuple[int, str]:
    """Largest labelled power of 1000 not exceeding |value|, or ``(0, "")``."""
    magnitude = abs(value)
    chosen: tuple[int, str] = (0, "")
    for power, label in enumerate(labels, start=1):
        if label and magnitude >= Decimal(1000) ** power:
            chosen = (power, label)
    return chosen


def choose_suffix(value: Decimal, labels: Sequence[Optional[str]]) -> tuple[Decimal, str]:
    """Divide by the largest labelled power of 1000 not exceeding |value|."""
    power, label = suffix_step(value, labels)
    if not power:
        return value, ""
    return _shift(value, -power), label


@dataclass(frozen=True)
class Numeral:
    """Unsigned numeral text plus the sign facts needed to decorate it."""

    body: str
    negative: bool
    zero: bool


def format_numeral(
    value: Decimal,
    *,
    decimals: int,
    n_sigfig: Optional[int] = None,
    drop_trailing_zeros: bool = False,
    drop_trailing_dec_mark: bool = True,
    use_seps: bool = True,
    sep_mark: str = ",",
    dec_mark: str = ".",
    suffix_labels: Sequence[Optional[str]] = (),
) -> Numeral:
    power, suffix = suffix_step(value, suffix_labels)
    rounded, places = round_decimal(_shift(value, -power), decimals, n_sigfig)
    if suffix_labels:
        # 999_999 rounds to 1000K; move up to the next labelled step.
        promoted, label = suffix_step(_shift(rounded, power), suffix_labels)
        if promoted > power:
            power, suffix = promoted, label
            rounded, places = round_decimal(_shift(value, -power), decimals, n_sigfig)
    int_part, _, frac = format(abs(rounded), "f").partition(".")
    frac = frac[:places] if places else ""
    if use_seps:
        int_part = group_digits(int_part, sep_mark)
    if drop_trailing_zeros:
        frac = frac.rstrip("0")
    body = int_part
    if frac:
        body += dec_mark + frac
    elif not drop_trailing_dec_mark:
        body += dec_mark
    return Numeral(
        body=body + suffix,
        negative=rounded < 0 and not rounded.is_zero(),
        zero=rounded.is_zero(),
    )


def apply_sign(body: str, numeral: Numeral, *, accounting: bool, force_sign: bool) -> str:
    if numeral.negative:
        return f"({body})" if accounting else f"-{body}"
    if force_sign and not numeral.zero:
        return f"+{body}"
    return body


def apply_pattern(pattern: str, text: str) -> str:
    return pattern.replace(PATTERN_PLACEHOLDER, text)


def _numeral_for(value: Decimal, config: NumberFormat, context: FormatContext, decimals: int) -> Numeral:
    sep_mark, dec_mark = context.marks(config.locale, config.sep_mark, config.dec_mark)
    return format_numeral(
        value,
        decimals=decimals,
        n_sigfig=config.n_sigfig,
        drop_trailing_zeros=config.drop_trailing_zeros,
        drop_trailing_dec_mark=config.drop_trailing_dec_mark,
        use_seps=config.use_seps,
        sep_mark=sep_mark,
        dec_mark=dec_mark,
        suffix_labels=config.suffix_labels,
    )


def format_number(value: Any, config: NumberFormat, context: FormatContext) -> str:
    """Format with grouping, fixed decimals or significant figures, and suffixes."""
    scaled = scale(to_decimal(value), config.scale_by)
    numeral = _numeral_for(scaled, config, context, config.decimals)
    text = apply_sign(
        numeral.body, numeral, accounting=config.accounting, force_sign=config.force_sign
    )
    return apply_pattern(config.pattern, text)


def format_percent(value: Any, config: PercentFormat, context: FormatContext) -> str:
    number = to_decimal(value)
    if config.scale_values:
        number = number * 100
    numeral = _numeral_for(scale(number, config.scale_by), config, context, config.decimals)
    space = " " if config.incl_space else ""
    if config.placement == "left":
        body = f"%{space}{numeral.body}"
    else:
        body = f"{numeral.body}{space}%"
    text = apply_sign(body, numeral, accounting=config.accounting, force_sign=config.force_sign)
    return apply_pattern(config.pattern, text)


def resolve_currency(config: CurrencyFormat, context: FormatContext) -> tuple[str, int]:
    """Return the (symbol, decimals) a currency rule renders with."""
    explicit_decimals = config.decimals
    if config.symbol is not None and explicit_decimals is not None:
        return config.symbol, explicit_decimals
    spec = context.locale_provider.get_currency(config.currency)
    if config.symbol is not None:
        symbol = config.symbol
    elif config.use_code:
        symbol = spec.code
    else:
        symbol = spec.symbol
    if explicit_decimals is not None:
        decimals = explicit_decimals
    else:
        decimals = spec.digits if config.use_subunits else 0
    return symbol, decimals


def format_currency(value: Any, config: CurrencyFormat, context: FormatContext) -> str:
    symbol, decimals = resolve_currency(config, context)
    scaled = scale(to_decimal(value), config.scale_by)
    numeral = _numeral_for(scaled, config, context, decimals)
    space = " " if config.incl_space else ""
    if config.placement == "left":
        body = f"{symbol}{space}{numeral.body}"
    else:
        body = f"{numeral.body}{space}{symbol}"
    text = apply_sign(body, numeral, accounting=config.accounting, force_sign=config.force_sign)
    return apply_pattern(config.pattern, text)


def format_scientific(value: Any, config: ScientificFormat, context: FormatContext) -> str:
    """Render ``mantissa x 10^n`` (or e-notation) with a rounded mantissa."""
    number = scale(to_decimal(value), config.scale_by)
    _, dec_mark = context.marks(config.locale, ",", config.dec_mark)

    with localcontext() as ctx:
        ctx.prec = _PRECISION
        if number.is_zero():
            exponent = 0
            mantissa = Decimal(0).quantize(_quantum(config.decimals))
        else:
            exponent = number.adjusted()
            mantissa = number.scaleb(-exponent).quantize(
                _quantum(config.decimals), rounding=ROUND_HALF_UP
            )
            if abs(mantissa) >= 10:
                exponent += 1
                mantissa = number.scaleb(-exponent).quantize(
                    _quantum(config.decimals), rounding=ROUND_HALF_UP
                )

    int_part, _, frac = format(abs(mantissa), "f").partition(".")
    if config.drop_trailing_zeros:
        frac = frac.rstrip("0")
    m_text = int_part + (dec_mark + frac if frac else "")
    if mantissa < 0 and not mantissa.is_zero():
        m_text = f"-{m_text}"
    elif config.force_sign_m and not mantissa.is_zero():
        m_text = f"+{m_text}"

    if config.exp_style in ("e", "E"):
        exp_sign = "-" if exponent < 0 else "+"
        text = f"{m_text}{config.exp_style}{exp_sign}{abs(exponent):02d}"
    elif exponent == 0:
        text = m_text
    else:
        exp_text = str(exponent)
        if config.force_sign_n and exponent > 0:
            exp_text = f"+{exp_text}"
        if config.target == "html":
            exp_text = exp_text.replace("-", "&minus;")
            text = f"{m_text} &times; 10<sup>{exp_text}</sup>"
        else:
            text = f"{m_text} × 10{exp_text.translate(_SUPERSCRIPTS)}"
    return apply_pattern(config.pattern, text)
