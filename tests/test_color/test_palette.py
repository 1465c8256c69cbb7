"""Tests for the theme palette."""

from __future__ import annotations

import pytest

from slideshape.color.palette import SchemeKey, ThemePalette, normalize
from slideshape.color.resolver import resolve
from slideshape.color.spec import SchemeColorRef
from slideshape.tree.node import parse_xml
from tests.conftest import THEME_COLORS, THEME_XML


def test_defaults():
    palette = ThemePalette()
    assert palette.get("dk1") == "000000"
    assert palette.get("lt2") == "FFFFFF"
    assert palette.get("hlink") == "0000FF"
    assert palette.get("folHlink") == "800080"
    assert palette.get(SchemeKey.ACCENT3) == "000000"


def test_from_mapping_normalizes():
    palette = ThemePalette.from_mapping({"accent1": "#4472c4", "accent2": "ED7D31FF", "lt1": "fff"})
    assert palette.get("accent1") == "4472C4"
    assert palette.get("accent2") == "ED7D31"
    assert palette.get("lt1") == "FFFFFF"


def test_from_mapping_long_names_and_unknown_keys():
    palette = ThemePalette.from_mapping({"hyperlink": "0563C1", "followedHyperlink": "954F72", "mystery": "123456"})
    assert palette.get("hlink") == "0563C1"
    assert palette.get("folHlink") == "954F72"
    assert "mystery" not in palette.as_dict()


def test_as_dict_has_all_slots():
    slots = ThemePalette.from_mapping({"accent1": "4472C4"}).as_dict()
    assert len(slots) == 12
    assert slots["accent1"] == "4472C4"
    assert slots["dk2"] == "000000"


def test_from_tree():
    palette = ThemePalette.from_tree(parse_xml(THEME_XML))
    assert palette.as_dict() == THEME_COLORS


def test_from_tree_without_scheme():
    palette = ThemePalette.from_tree(parse_xml("<theme/>"))
    assert palette.as_dict() == ThemePalette().as_dict()


def test_normalize():
    assert normalize("#abcdef") == "ABCDEF"
    assert normalize("ABCDEF80") == "ABCDEF"
    assert normalize("abc") == "AABBCC"


def test_constructor_normalizes():
    palette = ThemePalette({"accent1": "4472C480", "accent2": "#ed7d31", SchemeKey.LT1: "fff", "mystery": "123456"})
    assert palette.get("accent1") == "4472C4"
    assert palette.get("accent2") == "ED7D31"
    assert palette.get("lt1") == "FFFFFF"
    assert "mystery" not in palette.colors


def test_alpha_byte_does_not_reach_scheme_color():
    color = resolve(SchemeColorRef("accent1"), ThemePalette({"accent1": "4472C480"}))
    assert color.to_css() == "rgba(68,114,196,1)"


def test_caller_mutation_does_not_leak():
    source = {"accent1": "4472C4"}
    palette = ThemePalette(source)
    source["accent1"] = "FF0000"
    assert palette.get("accent1") == "4472C4"


def test_colors_are_read_only():
    palette = ThemePalette.from_mapping({"accent1": "4472C4"})
    with pytest.raises(TypeError):
        palette.colors["accent1"] = "FF0000"
