"""HSL conversions on floating-point 0..255 channels."""

from __future__ import annotations

import colorsys

RGB = tuple[float, float, float]


def hsl_to_rgb(hue: float, sat: float, lum: float) -> RGB:
    """hue in degrees, sat/lum in 0..1 → channels in 0..255 (unrounded)."""
    h = (hue % 360.0) / 360.0
    s = max(0.0, min(1.0, sat))
    l = max(0.0, min(1.0, lum))
    # colorsys uses HLS argument order
    r, g, b = colorsys.hls_to_rgb(h, l, s)
    return r * 255.0, g * 255.0, b * 255.0


def rgb_to_hsl(r: float, g: float, b: float) -> tuple[float, float, float]:
    """Channels in 0..255 → (hue degrees, sat 0..1, lum 0..1)."""
    clip = lambda c: max(0.0, min(255.0, c)) / 255.0  # noqa: E731
    h, l, s = colorsys.rgb_to_hls(clip(r), clip(g), clip(b))
    return h * 360.0, s, l


def scale_hue(rgb: RGB, factor: float) -> RGB:
    h, s, l = rgb_to_hsl(*rgb)
    return hsl_to_rgb((h * factor) % 360.0, s, l)


def scale_saturation(rgb: RGB, factor: float) -> RGB:
    h, s, l = rgb_to_hsl(*rgb)
    return hsl_to_rgb(h, max(0.0, min(1.0, s * factor)), l)
