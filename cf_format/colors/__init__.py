"""Value-to-color mapping."""

from .color import RGBA, contrast_ratio, interpolate, parse_color
from .mapper import CellColor, ColorMapper, ColorScale

__all__ = [
    "CellColor",
    "ColorMapper",
    "ColorScale",
    "RGBA",
    "contrast_ratio",
    "interpolate",
    "parse_color",
]
