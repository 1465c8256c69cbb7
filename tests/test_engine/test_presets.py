"""Tests for preset geometry formulas."""

from __future__ import annotations

import math

import pytest
from svgpathtools import parse_path

from slideshape.engine.commands import BoundingBox, Close, CubicCurveTo, LineTo, MoveTo
from slideshape.engine.geometry import GeometryResolver
from slideshape.engine.registry import get_registry


def test_rect_exact():
    path = GeometryResolver().resolve_preset("rect", BoundingBox(100, 50))
    assert path.commands == (MoveTo(0, 0), LineTo(100, 0), LineTo(100, 50), LineTo(0, 50), Close())
    assert path.view_box == (100.0, 50.0)
    assert path.path == "M 0 0 L 100 0 L 100 50 L 0 50 Z"


def test_unknown_preset_matches_rect():
    resolver = GeometryResolver()
    box = BoundingBox(80, 40)
    assert resolver.resolve_preset("noSuchShape", box) == resolver.resolve_preset("rect", box)


def test_unknown_preset_is_counted(caplog):
    resolver = GeometryResolver()
    with caplog.at_level("WARNING"):
        resolver.resolve_preset("wavyThing")
        resolver.resolve_preset("wavyThing")
    assert resolver.fallback_count == 2
    assert resolver.unknown_presets == {"wavyThing": 2}
    assert "wavyThing" in caplog.text


def test_missing_box_uses_default():
    path = GeometryResolver().resolve_preset("rect")
    assert path.view_box == (200.0, 200.0)


def test_round_rect_radius():
    path = GeometryResolver().resolve_preset("roundRect", BoundingBox(100, 50), {"adj": 0.2})
    assert path.commands[0] == MoveTo(10, 0)
    assert path.commands[1] == LineTo(90, 0)
    assert path.path.startswith("M 10 0 L 90 0 C")


def test_round_rect_default_adjustment():
    path = GeometryResolver().resolve_preset("roundRect", BoundingBox(100, 50))
    # 0.1 * min(100, 50)
    assert path.commands[0] == MoveTo(5, 0)


def test_round_rect_radius_is_capped():
    path = GeometryResolver().resolve_preset("roundRect", BoundingBox(100, 50), {"adj": 5})
    assert path.commands[0] == MoveTo(25, 0)


def test_invalid_adjustment_uses_default():
    resolver = GeometryResolver()
    box = BoundingBox(100, 50)
    bad = resolver.resolve_preset("roundRect", box, {"adj": "wide"})
    nan = resolver.resolve_preset("roundRect", box, {"adj": float("nan")})
    default = resolver.resolve_preset("roundRect", box)
    assert bad == default
    assert nan == default


def test_star_vertices():
    path = GeometryResolver().resolve_preset("star5", BoundingBox(100, 100))
    points = [(c.x, c.y) for c in path.commands if isinstance(c, (MoveTo, LineTo))]
    assert len(points) == 10

    radii = [math.hypot(x - 50, y - 50) for x, y in points]
    outer = radii[0]
    assert outer == pytest.approx(50)
    for i, r in enumerate(radii):
        expected = outer if i % 2 == 0 else 0.4 * outer
        assert r == pytest.approx(expected)


def test_ellipse_is_four_cubics():
    path = GeometryResolver().resolve_preset("ellipse", BoundingBox(120, 60))
    cubics = [c for c in path.commands if isinstance(c, CubicCurveTo)]
    assert len(cubics) == 4
    assert path.commands[0] == MoveTo(60, 0)
    assert cubics[-1].end == (60, 0)


def test_aliases_resolve_to_same_formula():
    resolver = GeometryResolver()
    box = BoundingBox(40, 40)
    assert resolver.resolve_preset("circle", box) == resolver.resolve_preset("ellipse", box)
    assert resolver.resolve_preset("oval", box) == resolver.resolve_preset("ellipse", box)


def test_pentagon_points_up():
    path = GeometryResolver().resolve_preset("pentagon", BoundingBox(100, 100))
    first = path.commands[0]
    assert first.x == pytest.approx(50)
    assert first.y == pytest.approx(0)


def test_every_preset_emits_parsable_path():
    resolver = GeometryResolver()
    box = BoundingBox(160, 90)
    for spec in get_registry().all():
        path = resolver.resolve_preset(spec.id, box)
        assert path.path.startswith("M"), spec.id
        assert len(parse_path(path.path)) > 0, spec.id


def test_every_preset_stays_in_view_box():
    resolver = GeometryResolver()
    box = BoundingBox(160, 90)
    for spec in get_registry().all():
        path = resolver.resolve_preset(spec.id, box)
        assert path.view_box[0] >= 160
        assert path.view_box[1] >= 90


def test_shape_kind_hints():
    resolver = GeometryResolver()
    assert resolver.shape_kind("star6").value == "star"
    assert resolver.shape_kind("rightArrow").value == "arrow"
    assert resolver.shape_kind("callout2").value == "callout"
    assert resolver.shape_kind("oval").value == "ellipse"
    assert resolver.shape_kind("cloudy").value == "custom"
    assert resolver.shape_kind(None).value == "custom"


def test_round_rect_keypoints():
    resolver = GeometryResolver()
    assert resolver.round_rect_keypoints() == [0.5]
    assert resolver.round_rect_keypoints({"adj": 0.3}) == [0.3]


def test_map_preset_to_shape_kind():
    from slideshape.engine import map_preset_to_shape_kind

    assert map_preset_to_shape_kind("roundRect").value == "roundRect"
    assert map_preset_to_shape_kind("callout1").value == "callout"
    assert map_preset_to_shape_kind("unknownThing").value == "custom"
