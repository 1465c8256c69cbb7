"""Color specifications, modifiers and the resolved RGBA value."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class DirectRGB:
    hex: str


@dataclass(frozen=True)
class PercentRGB:
    r: float  # percent, 0..100
    g: float
    b: float


@dataclass(frozen=True)
class HSL:
    hue: float  # source units, 1/100000 of the 0..360 range
    sat: float  # 0..1
    lum: float  # 0..1


@dataclass(frozen=True)
class PresetName:
    name: str


@dataclass(frozen=True)
class SystemColor:
    name: str
    last_known: str | None = None


@dataclass(frozen=True)
class SchemeColorRef:
    key: str


@dataclass(frozen=True)
class PlaceholderColor:
    pass


ColorSpec = Union[DirectRGB, PercentRGB, HSL, PresetName, SystemColor, SchemeColorRef, PlaceholderColor]


@dataclass(frozen=True)
class Alpha:
    value: float


@dataclass(frozen=True)
class HueMod:
    value: float


@dataclass(frozen=True)
class LumMod:
    value: float


@dataclass(frozen=True)
class LumOff:
    value: float


@dataclass(frozen=True)
class SatMod:
    value: float


@dataclass(frozen=True)
class Shade:
    value: float


@dataclass(frozen=True)
class Tint:
    value: float


ColorModifier = Union[Alpha, HueMod, LumMod, LumOff, SatMod, Shade, Tint]

# Element name in the source format → modifier type
MODIFIER_TYPES: dict[str, type] = {
    "alpha": Alpha,
    "hueMod": HueMod,
    "lumMod": LumMod,
    "lumOff": LumOff,
    "satMod": SatMod,
    "shade": Shade,
    "tint": Tint,
}


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def clamp_channel(value: float) -> int:
    return max(0, min(255, round_half_up(value)))


def format_alpha(a: float) -> str:
    if a == 1:
        return "1"
    text = f"{a:.3f}".rstrip("0").rstrip(".")
    return text or "0"


def normalize_hex(value: str) -> str:
    """Upper-case hex without '#'. Three-digit shorthand is expanded."""
    text = value.strip().lstrip("#").upper()
    if len(text) == 3:
        text = "".join(ch * 2 for ch in text)
    return text


@dataclass(frozen=True)
class ResolvedColor:
    r: int
    g: int
    b: int
    a: float = 1.0

    @classmethod
    def from_hex(cls, value: str) -> ResolvedColor:
        """Parse RRGGBB or RRGGBBAA (with or without '#'). Bad digits read as 0."""
        text = normalize_hex(value)

        def channel(i: int) -> int:
            try:
                return int(text[i:i + 2], 16)
            except ValueError:
                return 0

        a = channel(6) / 255 if len(text) >= 8 else 1.0
        return cls(channel(0), channel(2), channel(4), a)

    @classmethod
    def transparent(cls) -> ResolvedColor:
        return cls(0, 0, 0, 0.0)

    @property
    def hex(self) -> str:
        return f"{self.r:02X}{self.g:02X}{self.b:02X}"

    def to_css(self) -> str:
        return f"rgba({self.r},{self.g},{self.b},{format_alpha(self.a)})"

    def __str__(self) -> str:
        return self.to_css()
