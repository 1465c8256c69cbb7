"""ColorResolver: color specifications plus modifier chains to RGBA.

Scheme references are looked up in a ThemePalette. Modifier chains are applied
in a fixed canonical order unless the config asks for encounter order. Channels
stay floating point through the chain and are rounded once at the end.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence

from slideshape.color.hsl import hsl_to_rgb, scale_hue, scale_saturation
from slideshape.color.palette import DEFAULTS, SCHEME_ALIASES, ThemePalette, normalize
from slideshape.color.presets import lookup_preset
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
    clamp_channel,
)
from slideshape.engine.config import ColorConfig, ModifierOrder
from slideshape.errors import MissingPlaceholderError, MissingThemeError

logger = logging.getLogger(__name__)

BLACK = ResolvedColor(0, 0, 0, 1.0)
WHITE = ResolvedColor(255, 255, 255, 1.0)

SYSTEM_COLORS: dict[str, str] = {
    "window": "FFFFFF",
    "windowText": "000000",
    "background": "FFFFFF",
    "text": "000000",
}

CANONICAL_ORDER: tuple[type, ...] = (HueMod, LumMod, LumOff, SatMod, Shade, Tint)

PLACEHOLDER_KEY = "phClr"


class ColorResolver:
    def __init__(self, config: ColorConfig | None = None) -> None:
        self.config = config or ColorConfig()

    # ── base colors ──────────────────────────────────────────────

    def resolve(
        self,
        spec: ColorSpec,
        palette: ThemePalette | None = None,
        placeholder: ResolvedColor | None = None,
        color_map: Mapping[str, str] | None = None,
    ) -> ResolvedColor:
        """Resolve a base color, without modifiers.

        Raises:
            MissingThemeError: scheme reference with no palette.
            MissingPlaceholderError: placeholder reference with no placeholder.
        """
        if isinstance(spec, DirectRGB):
            return ResolvedColor.from_hex(spec.hex)

        if isinstance(spec, PercentRGB):
            return ResolvedColor(
                clamp_channel(255 * spec.r / 100),
                clamp_channel(255 * spec.g / 100),
                clamp_channel(255 * spec.b / 100),
            )

        if isinstance(spec, HSL):
            r, g, b = hsl_to_rgb(spec.hue / 100000, spec.sat, spec.lum)
            return ResolvedColor(clamp_channel(r), clamp_channel(g), clamp_channel(b))

        if isinstance(spec, PresetName):
            found = lookup_preset(spec.name)
            if found is None:
                logger.warning("Unknown preset color %r, using black", spec.name)
                return BLACK
            return ResolvedColor.from_hex(found)

        if isinstance(spec, SystemColor):
            if spec.last_known:
                return ResolvedColor.from_hex(normalize(spec.last_known))
            found = SYSTEM_COLORS.get(spec.name)
            return ResolvedColor.from_hex(found) if found else WHITE

        if isinstance(spec, SchemeColorRef):
            return self._resolve_scheme(spec.key, palette, placeholder, color_map)

        if isinstance(spec, PlaceholderColor):
            if placeholder is None:
                raise MissingPlaceholderError()
            return placeholder

        raise TypeError(f"Unsupported color spec: {spec!r}")

    def _resolve_scheme(
        self,
        key: str,
        palette: ThemePalette | None,
        placeholder: ResolvedColor | None,
        color_map: Mapping[str, str] | None,
    ) -> ResolvedColor:
        if key == PLACEHOLDER_KEY:
            if placeholder is None:
                raise MissingPlaceholderError()
            return placeholder
        if palette is None:
            raise MissingThemeError(key)

        if color_map and key in color_map:
            slot = color_map[key]
        else:
            slot = SCHEME_ALIASES.get(key, key)

        if slot not in DEFAULTS:
            logger.warning("Unknown scheme color %r, using black", key)
            return BLACK
        return ResolvedColor.from_hex(palette.get(slot))

    # ── modifiers ────────────────────────────────────────────────

    def _ordered(self, chain: Sequence[ColorModifier], order: ModifierOrder) -> list[ColorModifier]:
        rgb_mods = [m for m in chain if not isinstance(m, Alpha)]
        if order == ModifierOrder.ENCOUNTER:
            return rgb_mods
        rank = {kind: i for i, kind in enumerate(CANONICAL_ORDER)}
        # sorted() is stable, so same-kind modifiers keep their relative order
        return sorted(rgb_mods, key=lambda m: rank[type(m)])

    def apply_modifiers(
        self,
        base: ResolvedColor,
        chain: Sequence[ColorModifier],
        order: ModifierOrder | None = None,
    ) -> ResolvedColor:
        if not chain:
            return base

        order = order or self.config.modifier_order
        rgb = (float(base.r), float(base.g), float(base.b))

        for mod in self._ordered(chain, order):
            v = mod.value
            if isinstance(mod, LumMod) or isinstance(mod, Shade):
                rgb = tuple(c * v for c in rgb)
            elif isinstance(mod, LumOff):
                rgb = tuple(max(0.0, min(255.0, c + v * 255)) for c in rgb)
            elif isinstance(mod, Tint):
                rgb = tuple(c + (255 - c) * (1 - v) for c in rgb)
            elif isinstance(mod, HueMod):
                if not self.config.hue_sat_passthrough:
                    rgb = scale_hue(rgb, v)
            elif isinstance(mod, SatMod):
                if not self.config.hue_sat_passthrough:
                    rgb = scale_saturation(rgb, v)

        alpha = base.a
        for mod in chain:
            if isinstance(mod, Alpha):
                alpha = mod.value

        r, g, b = rgb
        return ResolvedColor(clamp_channel(r), clamp_channel(g), clamp_channel(b), max(0.0, min(1.0, alpha)))

    def resolve_paint(
        self,
        spec: ColorSpec,
        modifiers: Sequence[ColorModifier] = (),
        palette: ThemePalette | None = None,
        placeholder: ResolvedColor | None = None,
        color_map: Mapping[str, str] | None = None,
    ) -> ResolvedColor:
        base = self.resolve(spec, palette, placeholder, color_map)
        return self.apply_modifiers(base, modifiers)


_default = ColorResolver()


def resolve(
    spec: ColorSpec,
    palette: ThemePalette | None = None,
    placeholder: ResolvedColor | None = None,
) -> ResolvedColor:
    return _default.resolve(spec, palette, placeholder)


def apply_modifiers(
    base: ResolvedColor,
    chain: Sequence[ColorModifier],
    order: ModifierOrder | None = None,
) -> ResolvedColor:
    return _default.apply_modifiers(base, chain, order)


def create_resolver(config: ColorConfig | None = None) -> ColorResolver:
    """Factory function for creating a color resolver."""
    return ColorResolver(config=config)
