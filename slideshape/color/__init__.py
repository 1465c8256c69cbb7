"""Slideshape color engine."""

from slideshape.color.palette import SchemeKey, ThemePalette
from slideshape.color.resolver import ColorResolver, apply_modifiers, create_resolver, resolve
from slideshape.color.spec import (
    HSL,
    Alpha,
    ColorModifier,
    ColorSpec,
    DirectRGB,
    HueMod,
    LumMod,
    LumOff,
    PercentRGB,
    PlaceholderColor,
    PresetName,
    ResolvedColor,
    SatMod,
    SchemeColorRef,
    Shade,
    SystemColor,
    Tint,
)

__all__ = [
    "SchemeKey",
    "ThemePalette",
    "ColorResolver",
    "apply_modifiers",
    "create_resolver",
    "resolve",
    "HSL",
    "Alpha",
    "ColorModifier",
    "ColorSpec",
    "DirectRGB",
    "HueMod",
    "LumMod",
    "LumOff",
    "PercentRGB",
    "PlaceholderColor",
    "PresetName",
    "ResolvedColor",
    "SatMod",
    "SchemeColorRef",
    "Shade",
    "SystemColor",
    "Tint",
]
