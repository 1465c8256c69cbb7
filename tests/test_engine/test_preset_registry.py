"""Tests for the preset registry."""

import pytest

from slideshape.engine.commands import Close, LineTo, MoveTo, ShapeKindHint
from slideshape.engine.registry import PresetRegistry, PresetSpec


def _line(w, h, adj):
    return [MoveTo(0, 0), LineTo(w, h), Close()]


def test_register_and_get():
    reg = PresetRegistry()
    spec = PresetSpec(id="line", fn=_line, kind=ShapeKindHint.CUSTOM)
    reg.register(spec)
    assert reg.get("line") is spec
    assert "line" in reg
    assert reg.count == 1


def test_aliases():
    reg = PresetRegistry()
    spec = PresetSpec(id="line", fn=_line, aliases=("stroke", "rule"))
    reg.register(spec)
    assert reg.get("rule") is spec
    assert reg.names() == ["line", "rule", "stroke"]
    assert reg.count == 1


def test_duplicate_id_rejected():
    reg = PresetRegistry()
    reg.register(PresetSpec(id="line", fn=_line))
    with pytest.raises(ValueError, match="Duplicate"):
        reg.register(PresetSpec(id="other", fn=_line, aliases=("line",)))


def test_missing_returns_none():
    assert PresetRegistry().get("nothing") is None


def test_all_sorted_by_id():
    reg = PresetRegistry()
    reg.register(PresetSpec(id="b", fn=_line))
    reg.register(PresetSpec(id="a", fn=_line))
    assert [s.id for s in reg.all()] == ["a", "b"]


def test_custom_registry_resolver():
    from slideshape.engine.commands import BoundingBox
    from slideshape.engine.geometry import GeometryResolver

    reg = PresetRegistry()
    reg.register(PresetSpec(id="rect", fn=_line))
    resolver = GeometryResolver(registry=reg)
    path = resolver.resolve_preset("rect", BoundingBox(10, 20))
    assert path.path == "M 0 0 L 10 20 Z"
