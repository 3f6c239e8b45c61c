"""RGBA color values: parsing, interpolation and contrast."""

from __future__ import annotations

from dataclasses import dataclass

import webcolors

from cf_common.api import FormatConfigError

WHITE_RGB = (255, 255, 255)


@dataclass(frozen=True)
class RGBA:
    red: int
    green: int
    blue: int
    alpha: float = 1.0

    def to_hex(self) -> str:
        base = webcolors.rgb_to_hex((self.red, self.green, self.blue))
        if self.alpha >= 1.0:
            return base
        return f"{base}{round(self.alpha * 255):02x}"

    def with_alpha(self, factor: float) -> "RGBA":
        return RGBA(self.red, self.green, self.blue, self.alpha * factor)

    def over(self, background: tuple[int, int, int] = WHITE_RGB) -> "RGBA":
        """Composite onto an opaque background."""
        if self.alpha >= 1.0:
            return self
        a = self.alpha
        return RGBA(
            round(self.red * a + background[0] * (1 - a)),
            round(self.green * a + background[1] * (1 - a)),
            round(self.blue * a + background[2] * (1 - a)),
        )

    def relative_luminance(self) -> float:
        """WCAG 2.x relative luminance of the opaque color."""

        def channel(value: int) -> float:
            c = value / 255
            return c / 12.92 if c <= 0.04045 else ((c + 0.055) / 1.055) ** 2.4

        return (
            0.2126 * channel(self.red)
            + 0.7152 * channel(self.green)
            + 0.0722 * channel(self.blue)
        )


def parse_color(value: str) -> RGBA:
    """Parse ``#rgb``, ``#rrggbb``, ``#rrggbbaa``, ``transparent`` or a CSS name."""
    text = value.strip()
    try:
        if text.lower() == "transparent":
            return RGBA(0, 0, 0, 0.0)
        if text.startswith("#") and len(text) == 9:
            alpha = int(text[7:], 16) / 255
            rgb = webcolors.hex_to_rgb(text[:7])
            return RGBA(rgb.red, rgb.green, rgb.blue, alpha)
        if text.startswith("#"):
            rgb = webcolors.hex_to_rgb(text)
        else:
            rgb = webcolors.name_to_rgb(text.lower())
    except ValueError as exc:
        raise FormatConfigError(
            f"Unrecognized color: {value!r}", context={"color": value}, cause=exc
        ) from exc
    return RGBA(rgb.red, rgb.green, rgb.blue)


def interpolate(start: RGBA, end: RGBA, t: float) -> RGBA:
    """Linear blend in RGB space; ``t`` is clamped to [0, 1]."""
    t = min(max(t, 0.0), 1.0)
    if t == 0.0:
        return start
    if t == 1.0:
        return end
    return RGBA(
        round(start.red + (end.red - start.red) * t),
        round(start.green + (end.green - start.green) * t),
        round(start.blue + (end.blue - start.blue) * t),
        start.alpha + (end.alpha - start.alpha) * t,
    )


def sample(palette: tuple[RGBA, ...], t: float) -> RGBA:
    """Color at position ``t`` along evenly spaced palette stops."""
    if len(palette) == 1:
        return palette[0]
    t = min(max(t, 0.0), 1.0)
    position = t * (len(palette) - 1)
    index = min(int(position), len(palette) - 2)
    return interpolate(palette[index], palette[index + 1], position - index)


def contrast_ratio(first: RGBA, second: RGBA) -> float:
    lighter, darker = sorted(
        (first.relative_luminance(), second.relative_luminance()), reverse=True
    )
    return (lighter + 0.05) / (darker + 0.05)
