"""Typed formatter and colorizer configurations.

Each formatter kind has its own model, discriminated by ``kind``. Models are
frozen and validated on construction; the rule set turns validation failures
into ``FormatConfigError`` at registration time.
"""

from __future__ import annotations

import math
from typing import Annotated, Any, List, Literal, Mapping, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError, model_validator

from cf_common.api import FormatConfigError

DEFAULT_SUFFIXES: tuple[str, ...] = ("K", "M", "B", "T")
PATTERN_PLACEHOLDER = "{x}"


class _FormatModel(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")


class NumberFormat(_FormatModel):
    """Fixed-decimal or significant-figure numeric formatting."""

    kind: Literal["number"] = "number"
    decimals: int = Field(default=2, ge=0, le=20, description="Digits after the decimal mark")
    n_sigfig: Optional[int] = Field(
        default=None, ge=1, le=30, description="Significant figures; overrides decimals"
    )
    drop_trailing_zeros: bool = Field(default=False, description="Strip trailing fractional zeros")
    drop_trailing_dec_mark: bool = Field(
        default=True, description="Drop a decimal mark left with no digits after it"
    )
    use_seps: bool = Field(default=True, description="Group integer digits with sep_mark")
    accounting: bool = Field(default=False, description="Parenthesize negative values")
    scale_by: float = Field(default=1.0, description="Linear factor applied before rounding")
    suffixing: Union[bool, List[Optional[str]]] = Field(
        default=False,
        description="True for K/M/B/T, or explicit labels per power of 1000 (None skips)",
    )
    pattern: str = Field(default=PATTERN_PLACEHOLDER, description="Template around the numeral")
    sep_mark: str = Field(default=",", description="Digit grouping mark")
    dec_mark: str = Field(default=".", description="Decimal mark")
    force_sign: bool = Field(default=False, description="Prefix positive values with '+'")
    locale: Optional[str] = Field(
        default=None, description="Locale code; its marks override sep_mark/dec_mark"
    )

    @model_validator(mode="after")
    def validate_number_options(self) -> "NumberFormat":
        if self.pattern.count(PATTERN_PLACEHOLDER) != 1:
            raise ValueError("pattern must contain exactly one '{x}' placeholder")
        if not math.isfinite(self.scale_by) or self.scale_by == 0:
            raise ValueError("scale_by must be a finite, non-zero number")
        if self.use_seps and self.locale is None and self.sep_mark == self.dec_mark:
            raise ValueError("sep_mark and dec_mark must differ")
        if isinstance(self.suffixing, list):
            if not any(label for label in self.suffixing):
                raise ValueError("suffixing needs at least one non-empty label")
        return self

    @property
    def suffix_labels(self) -> tuple[Optional[str], ...]:
        if self.suffixing is True:
            return DEFAULT_SUFFIXES
        if self.suffixing is False:
            return ()
        return tuple(self.suffixing)


class IntegerFormat(NumberFormat):
    """Numbers rounded to whole values."""

    kind: Literal["integer"] = "integer"
    decimals: int = Field(default=0, ge=0, le=0)


class PercentFormat(NumberFormat):
    kind: Literal["percent"] = "percent"
    scale_values: bool = Field(default=True, description="Multiply values by 100")
    placement: Literal["left", "right"] = "right"
    incl_space: bool = False


class CurrencyFormat(NumberFormat):
    """Currency amounts with a symbol and the currency's subunit precision."""

    kind: Literal["currency"] = "currency"
    currency: str = Field(default="USD", description="ISO 4217 currency code")
    use_subunits: bool = Field(default=True, description="Show the currency's minor units")
    decimals: Optional[int] = Field(
        default=None, ge=0, le=20, description="Explicit precision; overrides the subunit digits"
    )
    symbol: Optional[str] = Field(default=None, description="Explicit symbol override")
    use_code: bool = Field(default=False, description="Show the currency code instead of the symbol")
    placement: Literal["left", "right"] = "left"
    incl_space: bool = False

    @model_validator(mode="after")
    def validate_currency(self) -> "CurrencyFormat":
        if not self.currency.strip():
            raise ValueError("currency must be a non-empty code")
        if self.symbol is not None and self.use_code:
            raise ValueError("symbol and use_code are mutually exclusive")
        return self


class ScientificFormat(_FormatModel):
    """Mantissa x 10^exponent notation."""

    kind: Literal["scientific"] = "scientific"
    decimals: int = Field(default=2, ge=0, le=20)
    drop_trailing_zeros: bool = False
    scale_by: float = 1.0
    exp_style: Literal["x10n", "e", "E"] = "x10n"
    target: Literal["text", "html"] = "text"
    force_sign_m: bool = False
    force_sign_n: bool = False
    dec_mark: str = "."
    pattern: str = PATTERN_PLACEHOLDER
    locale: Optional[str] = None

    @model_validator(mode="after")
    def validate_scientific(self) -> "ScientificFormat":
        if self.pattern.count(PATTERN_PLACEHOLDER) != 1:
            raise ValueError("pattern must contain exactly one '{x}' placeholder")
        if not math.isfinite(self.scale_by) or self.scale_by == 0:
            raise ValueError("scale_by must be a finite, non-zero number")
        return self


class _TemporalFormat(_FormatModel):
    pattern: str = PATTERN_PLACEHOLDER
    locale: Optional[str] = None

    @model_validator(mode="after")
    def validate_pattern(self) -> "_TemporalFormat":
        if self.pattern.count(PATTERN_PLACEHOLDER) != 1:
            raise ValueError("pattern must contain exactly one '{x}' placeholder")
        return self


class DateFormat(_TemporalFormat):
    kind: Literal["date"] = "date"
    date_style: Union[int, str] = Field(default=1, description="Preset date style id or name")


class TimeFormat(_TemporalFormat):
    kind: Literal["time"] = "time"
    time_style: Union[int, str] = Field(default=1, description="Preset time style id or name")


class DatetimeFormat(_TemporalFormat):
    kind: Literal["datetime"] = "datetime"
    date_style: Union[int, str] = 1
    time_style: Union[int, str] = 1
    sep: str = " "


class MarkdownFormat(_FormatModel):
    kind: Literal["markdown"] = "markdown"
    target: Literal["html", "text"] = "html"
    width: int = Field(default=80, gt=0, description="Wrap width for the text target")


class MissingFormat(_FormatModel):
    """Replacement text for missing cells."""

    kind: Literal["missing"] = "missing"
    missing_text: str = "—"


class ColorFormat(_FormatModel):
    """Value-driven cell coloring."""

    kind: Literal["color"] = "color"
    palette: Optional[Union[str, List[str]]] = Field(
        default=None, description="Palette name or explicit colors; defaults to the settings palette"
    )
    method: Literal["numeric", "bin", "quantile", "factor"] = "numeric"
    domain: Optional[Tuple[float, float]] = Field(
        default=None, description="Numeric [lo, hi]; inferred from the selected cells when omitted"
    )
    levels: Optional[List[Any]] = Field(
        default=None, description="Explicit category order for the factor method"
    )
    bins: int = Field(default=5, ge=1)
    quantiles: int = Field(default=4, ge=1)
    reverse: bool = False
    apply_to: Literal["fill", "text", "both"] = "fill"
    autocolor_text: bool = True
    light_text: str = "#FFFFFF"
    dark_text: str = "#000000"
    alpha: Optional[float] = Field(default=None, ge=0.0, le=1.0)
    na_color: Optional[str] = None

    @model_validator(mode="after")
    def validate_color(self) -> "ColorFormat":
        if isinstance(self.palette, list) and not self.palette:
            raise ValueError("palette must contain at least one color")
        if self.domain is not None:
            lo, hi = self.domain
            if not (math.isfinite(lo) and math.isfinite(hi)):
                raise ValueError("domain bounds must be finite")
            if lo > hi:
                raise ValueError("domain lower bound exceeds upper bound")
            if self.method == "factor":
                raise ValueError("domain does not apply to the factor method; use levels")
        if self.levels is not None and self.method != "factor":
            raise ValueError("levels only apply to the factor method")
        return self


AnyFormat = Annotated[
    Union[
        NumberFormat,
        IntegerFormat,
        PercentFormat,
        CurrencyFormat,
        ScientificFormat,
        DateFormat,
        TimeFormat,
        DatetimeFormat,
        MarkdownFormat,
        MissingFormat,
        ColorFormat,
    ],
    Field(discriminator="kind"),
]

_ANY_FORMAT_ADAPTER: TypeAdapter[Any] = TypeAdapter(AnyFormat)


def _describe_validation(exc: ValidationError) -> list[dict[str, Any]]:
    return [
        {"loc": ".".join(str(part) for part in err["loc"]), "msg": err["msg"]}
        for err in exc.errors()
    ]


def build_config(model: type[_FormatModel], options: Mapping[str, Any]) -> Any:
    """Instantiate ``model`` from keyword options, raising FormatConfigError."""
    try:
        return model(**options)
    except ValidationError as exc:
        raise FormatConfigError(
            f"Invalid {model.__name__} options",
            context={"options": dict(options), "errors": _describe_validation(exc)},
            cause=exc,
        ) from exc


def parse_format_config(data: Any) -> Any:
    """Validate a config model instance or a ``{"kind": ...}`` mapping."""
    if isinstance(data, _FormatModel):
        return data
    try:
        return _ANY_FORMAT_ADAPTER.validate_python(data)
    except ValidationError as exc:
        raise FormatConfigError(
            "Invalid formatter configuration",
            context={"config": data, "errors": _describe_validation(exc)},
            cause=exc,
        ) from exc
