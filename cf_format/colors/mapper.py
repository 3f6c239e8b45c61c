"""
Map cell values to colors.

A ``ColorMapper`` is built once per color rule (palette lookups happen then,
so unknown palettes fail at registration). At render time it is fitted to the
rule's selected values, producing a ``ColorScale`` that colorizes cells.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Any, Iterable, Optional

import numpy as np

from cf_common.api import ParseError
from cf_format.colors.color import RGBA, contrast_ratio, parse_color, sample
from cf_format.models.config import ColorFormat
from cf_locale.api import PaletteProvider

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CellColor:
    """Resolved fill and/or text color for a cell (hex strings)."""

    fill: Optional[str] = None
    text: Optional[str] = None


def _to_float(value: Any) -> float:
    if isinstance(value, bool):
        raise ParseError("Boolean values are not numeric", context={"value": value})
    try:
        number = float(value)
    except (TypeError, ValueError) as exc:
        raise ParseError(
            f"Value is not numeric: {value!r}", context={"value": value}, cause=exc
        ) from exc
    if not math.isfinite(number):
        raise ParseError(f"Value is not finite: {value!r}", context={"value": value})
    return number


def _category_key(value: Any) -> Any:
    try:
        hash(value)
    except TypeError:
        return repr(value)
    return value


class ColorMapper:
    """Palette plus presentation options for one color rule."""

    def __init__(
        self,
        config: ColorFormat,
        palette_provider: PaletteProvider,
        *,
        default_palette: str = "viridis",
        default_na_color: Optional[str] = None,
    ) -> None:
        self.config = config
        source = config.palette if config.palette is not None else default_palette
        if isinstance(source, str):
            colors = list(palette_provider.get_palette(source))
        else:
            colors = list(source)
        palette = tuple(parse_color(color) for color in colors)
        if config.reverse:
            palette = tuple(reversed(palette))
        self.palette: tuple[RGBA, ...] = palette
        na_color = config.na_color if config.na_color is not None else default_na_color
        self.na_color: Optional[RGBA] = parse_color(na_color) if na_color else None
        self.light_text = parse_color(config.light_text)
        self.dark_text = parse_color(config.dark_text)

    def fit(self, values: Iterable[Any]) -> "ColorScale":
        """Prepare a scale from the rule's non-missing raw values, in cell order."""
        observed = list(values)
        if self.config.method == "factor":
            return _FactorScale(self, observed)
        numbers = []
        for value in observed:
            try:
                numbers.append(_to_float(value))
            except ParseError:
                continue
        if len(numbers) < len(observed):
            logger.debug(
                "Ignoring %d non-numeric values when fitting color domain",
                len(observed) - len(numbers),
            )
        if self.config.domain is not None:
            lo, hi = self.config.domain
        elif numbers:
            lo, hi = min(numbers), max(numbers)
        else:
            lo = hi = None
        if self.config.method == "quantile":
            return _QuantileScale(self, lo, hi, numbers)
        return _NumericScale(self, lo, hi)

    def present(self, color: RGBA) -> CellColor:
        """Apply alpha and ``apply_to`` to a resolved palette color."""
        if self.config.alpha is not None:
            color = color.with_alpha(self.config.alpha)
        hex_color = color.to_hex()
        if self.config.apply_to == "text":
            return CellColor(text=hex_color)
        if self.config.apply_to == "both":
            return CellColor(fill=hex_color, text=hex_color)
        text = self.contrasting_text(color) if self.config.autocolor_text else None
        return CellColor(fill=hex_color, text=text)

    def contrasting_text(self, fill: RGBA) -> str:
        """Light or dark text, whichever contrasts more with ``fill``."""
        opaque = fill.over()
        if contrast_ratio(opaque, self.dark_text) >= contrast_ratio(opaque, self.light_text):
            return self.dark_text.to_hex()
        return self.light_text.to_hex()


class ColorScale:
    """A fitted mapper; ``colorize`` is pure."""

    def __init__(self, mapper: ColorMapper) -> None:
        self.mapper = mapper

    def colorize(self, value: Any) -> CellColor:
        return self.mapper.present(self.resolve(value))

    def colorize_missing(self) -> Optional[CellColor]:
        if self.mapper.na_color is None:
            return None
        return self.mapper.present(self.mapper.na_color)

    def resolve(self, value: Any) -> RGBA:
        raise NotImplementedError


class _NumericScale(ColorScale):
    """Continuous (``numeric``) and equal-width ``bin`` mapping."""

    def __init__(self, mapper: ColorMapper, lo: Optional[float], hi: Optional[float]) -> None:
        super().__init__(mapper)
        self.lo = lo
        self.hi = hi

    def position(self, value: Any) -> float:
        number = _to_float(value)
        if self.lo is None or self.hi is None or self.hi <= self.lo:
            return 0.0
        clamped = min(max(number, self.lo), self.hi)
        return (clamped - self.lo) / (self.hi - self.lo)

    def resolve(self, value: Any) -> RGBA:
        t = self.position(value)
        if self.mapper.config.method == "bin":
            bins = self.mapper.config.bins
            index = min(int(t * bins), bins - 1)
            t = index / (bins - 1) if bins > 1 else 0.0
        return sample(self.mapper.palette, t)


class _QuantileScale(ColorScale):
    def __init__(
        self,
        mapper: ColorMapper,
        lo: Optional[float],
        hi: Optional[float],
        numbers: list[float],
    ) -> None:
        super().__init__(mapper)
        self.lo = lo
        self.hi = hi
        quantiles = mapper.config.quantiles
        if numbers:
            data = np.clip(np.asarray(numbers, dtype=float), lo, hi)
            breaks = np.quantile(data, np.linspace(0.0, 1.0, quantiles + 1))
        elif lo is not None and hi is not None:
            breaks = np.linspace(lo, hi, quantiles + 1)
        else:
            breaks = np.zeros(quantiles + 1)
        self.inner_breaks = breaks[1:-1]

    def resolve(self, value: Any) -> RGBA:
        number = _to_float(value)
        if self.lo is not None and self.hi is not None:
            number = min(max(number, self.lo), self.hi)
        quantiles = self.mapper.config.quantiles
        index = int(np.searchsorted(self.inner_breaks, number, side="right"))
        index = min(index, quantiles - 1)
        t = index / (quantiles - 1) if quantiles > 1 else 0.0
        return sample(self.mapper.palette, t)


class _FactorScale(ColorScale):
    """Categorical mapping; categories take palette colors in order, cycling."""

    def __init__(self, mapper: ColorMapper, observed: list[Any]) -> None:
        super().__init__(mapper)
        order: dict[Any, int] = {}
        for level in [*(mapper.config.levels or []), *observed]:
            key = _category_key(level)
            if key not in order:
                order[key] = len(order)
        self.order = order

    def resolve(self, value: Any) -> RGBA:
        key = _category_key(value)
        if key not in self.order:
            raise ParseError(
                f"Value {value!r} is not a fitted category", context={"value": value}
            )
        palette = self.mapper.palette
        return palette[self.order[key] % len(palette)]
