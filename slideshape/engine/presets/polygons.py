"""Regular polygons and the star, sampled on a circle of radius min(w, h) / 2."""

from __future__ import annotations

from collections.abc import Mapping

import numpy as np

from slideshape.engine.commands import Close, LineTo, MoveTo, PathCommand, ShapeKindHint
from slideshape.engine.registry import preset

# Inner radius of the star as a fraction of the outer radius.
STAR_INNER_RATIO = 0.4
STAR_VERTICES = 10


def _closed_polyline(xs: np.ndarray, ys: np.ndarray) -> list[PathCommand]:
    commands: list[PathCommand] = [MoveTo(float(xs[0]), float(ys[0]))]
    commands.extend(LineTo(float(x), float(y)) for x, y in zip(xs[1:], ys[1:]))
    commands.append(Close())
    return commands


def regular_polygon(w: float, h: float, sides: int, phase: float = 0.0) -> list[PathCommand]:
    """N vertices at 2*pi*i/N + phase around the box centre."""
    radius = min(w, h) / 2
    angles = 2 * np.pi * np.arange(sides) / sides + phase
    xs = w / 2 + radius * np.cos(angles)
    ys = h / 2 + radius * np.sin(angles)
    return _closed_polyline(xs, ys)


def star_path(w: float, h: float) -> list[PathCommand]:
    outer = min(w, h) / 2
    radii = np.where(np.arange(STAR_VERTICES) % 2 == 0, outer, outer * STAR_INNER_RATIO)
    angles = np.arange(STAR_VERTICES) * np.pi / 5 - np.pi / 2
    xs = w / 2 + radii * np.cos(angles)
    ys = h / 2 + radii * np.sin(angles)
    return _closed_polyline(xs, ys)


@preset(id="pentagon", kind=ShapeKindHint.PENTAGON)
def pentagon(w: float, h: float, adj: Mapping[str, float]) -> list[PathCommand]:
    # Point up
    return regular_polygon(w, h, 5, phase=-np.pi / 2)


@preset(id="hexagon", kind=ShapeKindHint.HEXAGON)
def hexagon(w: float, h: float, adj: Mapping[str, float]) -> list[PathCommand]:
    return regular_polygon(w, h, 6)


@preset(id="octagon", kind=ShapeKindHint.OCTAGON)
def octagon(w: float, h: float, adj: Mapping[str, float]) -> list[PathCommand]:
    return regular_polygon(w, h, 8)


@preset(
    id="star",
    kind=ShapeKindHint.STAR,
    aliases=("star4", "star5", "star6"),
    description="Five-pointed star; the 4/5/6-point variants share it",
)
def star(w: float, h: float, adj: Mapping[str, float]) -> list[PathCommand]:
    return star_path(w, h)
