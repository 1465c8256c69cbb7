"""Basic presets: rectangles, ellipse, triangle, diamond, parallelogram, trapezoid."""

from __future__ import annotations

from collections.abc import Mapping

from slideshape.engine.commands import (
    Close,
    CubicCurveTo,
    LineTo,
    MoveTo,
    PathCommand,
    Point,
    ShapeKindHint,
)
from slideshape.engine.config import ROUND_RECT_PATH_DEFAULT_ADJ
from slideshape.engine.registry import preset

# Control-point distance for a quarter ellipse drawn with one cubic: 4/3 * (sqrt(2) - 1).
KAPPA = 0.5522847498307936

# Parallelogram skew and trapezoid top edge, as fractions of the width.
_PARALLELOGRAM_SKEW = 0.2
_TRAPEZOID_TOP = 0.7


def quad_to_cubic(p0: Point, q: Point, p2: Point) -> CubicCurveTo:
    """Exact degree elevation of a quadratic bezier."""
    c1 = (p0[0] + 2.0 / 3.0 * (q[0] - p0[0]), p0[1] + 2.0 / 3.0 * (q[1] - p0[1]))
    c2 = (p2[0] + 2.0 / 3.0 * (q[0] - p2[0]), p2[1] + 2.0 / 3.0 * (q[1] - p2[1]))
    return CubicCurveTo(c1, c2, p2)


def rect_path(w: float, h: float) -> list[PathCommand]:
    return [MoveTo(0, 0), LineTo(w, 0), LineTo(w, h), LineTo(0, h), Close()]


def ellipse_path(w: float, h: float) -> list[PathCommand]:
    """Four cubic quarter-arcs, clockwise from the top centre."""
    cx, cy = w / 2, h / 2
    kx, ky = KAPPA * cx, KAPPA * cy
    return [
        MoveTo(cx, 0),
        CubicCurveTo((cx + kx, 0), (w, cy - ky), (w, cy)),
        CubicCurveTo((w, cy + ky), (cx + kx, h), (cx, h)),
        CubicCurveTo((cx - kx, h), (0, cy + ky), (0, cy)),
        CubicCurveTo((0, cy - ky), (cx - kx, 0), (cx, 0)),
        Close(),
    ]


def round_rect_path(w: float, h: float, ratio: float) -> list[PathCommand]:
    # Radius cannot exceed half the short side or opposite corners overlap
    r = min(min(w, h) * max(ratio, 0.0), min(w, h) / 2)
    return [
        MoveTo(r, 0),
        LineTo(w - r, 0),
        quad_to_cubic((w - r, 0), (w, 0), (w, r)),
        LineTo(w, h - r),
        quad_to_cubic((w, h - r), (w, h), (w - r, h)),
        LineTo(r, h),
        quad_to_cubic((r, h), (0, h), (0, h - r)),
        LineTo(0, r),
        quad_to_cubic((0, r), (0, 0), (r, 0)),
        Close(),
    ]


def triangle_path(w: float, h: float) -> list[PathCommand]:
    return [MoveTo(w / 2, 0), LineTo(w, h), LineTo(0, h), Close()]


def diamond_path(w: float, h: float) -> list[PathCommand]:
    return [MoveTo(w / 2, 0), LineTo(w, h / 2), LineTo(w / 2, h), LineTo(0, h / 2), Close()]


def parallelogram_path(w: float, h: float) -> list[PathCommand]:
    skew = w * _PARALLELOGRAM_SKEW
    return [MoveTo(skew, 0), LineTo(w, 0), LineTo(w - skew, h), LineTo(0, h), Close()]


@preset(id="rect", kind=ShapeKindHint.RECT, description="Rectangle")
def rect(w: float, h: float, adj: Mapping[str, float]) -> list[PathCommand]:
    return rect_path(w, h)


@preset(
    id="ellipse",
    kind=ShapeKindHint.ELLIPSE,
    aliases=("circle", "oval"),
    description="Ellipse inscribed in the box",
)
def ellipse(w: float, h: float, adj: Mapping[str, float]) -> list[PathCommand]:
    return ellipse_path(w, h)


@preset(
    id="roundRect",
    kind=ShapeKindHint.ROUND_RECT,
    defaults={"adj": ROUND_RECT_PATH_DEFAULT_ADJ},
    description="Rounded rectangle, radius = min(w, h) * adj",
)
def round_rect(w: float, h: float, adj: Mapping[str, float]) -> list[PathCommand]:
    return round_rect_path(w, h, adj.get("adj", ROUND_RECT_PATH_DEFAULT_ADJ))


@preset(id="triangle", kind=ShapeKindHint.TRIANGLE, description="Isosceles triangle")
def triangle(w: float, h: float, adj: Mapping[str, float]) -> list[PathCommand]:
    return triangle_path(w, h)


@preset(id="diamond", kind=ShapeKindHint.DIAMOND)
def diamond(w: float, h: float, adj: Mapping[str, float]) -> list[PathCommand]:
    return diamond_path(w, h)


@preset(id="parallelogram", kind=ShapeKindHint.PARALLELOGRAM)
def parallelogram(w: float, h: float, adj: Mapping[str, float]) -> list[PathCommand]:
    return parallelogram_path(w, h)


@preset(id="trapezoid", kind=ShapeKindHint.TRAPEZOID)
def trapezoid(w: float, h: float, adj: Mapping[str, float]) -> list[PathCommand]:
    top = w * _TRAPEZOID_TOP
    offset = (w - top) / 2
    return [MoveTo(offset, 0), LineTo(offset + top, 0), LineTo(w, h), LineTo(0, h), Close()]
