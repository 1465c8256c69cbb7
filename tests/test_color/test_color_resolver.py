"""Tests for base color resolution."""

from __future__ import annotations

import pytest

from slideshape.color.palette import ThemePalette
from slideshape.color.resolver import ColorResolver, resolve
from slideshape.color.spec import (
    HSL,
    DirectRGB,
    PercentRGB,
    PlaceholderColor,
    PresetName,
    ResolvedColor,
    SchemeColorRef,
    SystemColor,
)
from slideshape.errors import ColorResolutionError, MissingPlaceholderError, MissingThemeError


def test_direct_rgb():
    assert resolve(DirectRGB("FF8000")) == ResolvedColor(255, 128, 0, 1.0)
    assert resolve(DirectRGB("#0f0")) == ResolvedColor(0, 255, 0, 1.0)


def test_direct_rgb_with_alpha_byte():
    color = resolve(DirectRGB("FF000080"))
    assert (color.r, color.g, color.b) == (255, 0, 0)
    assert color.a == pytest.approx(128 / 255)


def test_percent_rgb():
    assert resolve(PercentRGB(100, 50, 0)) == ResolvedColor(255, 128, 0, 1.0)
    assert resolve(PercentRGB(150, -10, 0)) == ResolvedColor(255, 0, 0, 1.0)


def test_hsl():
    # hue 120° in source units
    assert resolve(HSL(12000000, 1.0, 0.5)) == ResolvedColor(0, 255, 0, 1.0)
    assert resolve(HSL(0, 0.0, 1.0)) == ResolvedColor(255, 255, 255, 1.0)


def test_preset_names():
    assert resolve(PresetName("red")) == ResolvedColor(255, 0, 0, 1.0)
    assert resolve(PresetName("dkBlue")).hex == "00008B"
    assert resolve(PresetName("ltGray")).hex == "D3D3D3"
    assert resolve(PresetName("medSeaGreen")).hex == "3CB371"
    assert resolve(PresetName("rebeccaPurple")).hex == "663399"
    assert resolve(PresetName("dkSlateGrey")).hex == "2F4F4F"


def test_unknown_preset_is_black(caplog):
    with caplog.at_level("WARNING"):
        assert resolve(PresetName("ultraviolet")) == ResolvedColor(0, 0, 0, 1.0)
    assert "ultraviolet" in caplog.text


def test_system_colors():
    assert resolve(SystemColor("windowText", "123456")).hex == "123456"
    assert resolve(SystemColor("windowText")).hex == "000000"
    assert resolve(SystemColor("window")).hex == "FFFFFF"
    assert resolve(SystemColor("menuBar")).hex == "FFFFFF"


def test_system_color_hint_with_hash():
    assert resolve(SystemColor("window", "#FFFFFF")).to_css() == "rgba(255,255,255,1)"
    assert resolve(SystemColor("window", "ffffff80")).to_css() == "rgba(255,255,255,1)"


def test_scheme_accent(palette):
    assert resolve(SchemeColorRef("accent1"), palette) == ResolvedColor(68, 114, 196, 1.0)


def test_scheme_aliases(palette):
    assert resolve(SchemeColorRef("tx1"), palette).hex == "000000"
    assert resolve(SchemeColorRef("tx2"), palette).hex == "44546A"
    assert resolve(SchemeColorRef("bg1"), palette).hex == "FFFFFF"
    assert resolve(SchemeColorRef("bg2"), palette).hex == "E7E6E6"


def test_color_map_override(palette):
    resolver = ColorResolver()
    color = resolver.resolve(SchemeColorRef("bg1"), palette, color_map={"bg1": "dk2"})
    assert color.hex == "44546A"


def test_scheme_without_palette_raises():
    with pytest.raises(MissingThemeError) as excinfo:
        resolve(SchemeColorRef("accent1"))
    assert excinfo.value.key == "accent1"
    assert isinstance(excinfo.value, ColorResolutionError)


def test_absent_slot_uses_default():
    empty = ThemePalette()
    assert resolve(SchemeColorRef("hlink"), empty).hex == "0000FF"
    assert resolve(SchemeColorRef("lt1"), empty).hex == "FFFFFF"


def test_unknown_scheme_key_is_black(palette):
    assert resolve(SchemeColorRef("accent9"), palette) == ResolvedColor(0, 0, 0, 1.0)


def test_placeholder():
    ph = ResolvedColor(1, 2, 3, 1.0)
    assert resolve(PlaceholderColor(), placeholder=ph) is ph
    assert resolve(SchemeColorRef("phClr"), placeholder=ph) is ph
    with pytest.raises(MissingPlaceholderError):
        resolve(PlaceholderColor())


def test_css_output():
    assert ResolvedColor(68, 114, 196, 1.0).to_css() == "rgba(68,114,196,1)"
    assert ResolvedColor(0, 0, 0, 0.5).to_css() == "rgba(0,0,0,0.5)"
    assert ResolvedColor(0, 0, 0, 0.0).to_css() == "rgba(0,0,0,0)"
    assert str(ResolvedColor(1, 2, 3, 0.12345)) == "rgba(1,2,3,0.123)"
