"""Path command value objects and the SVG path mini-language writer.

All coordinates are absolute. ``ArcTo`` carries radii and angles only; its end
point is derived from the pen position when the path is walked, the same way
the source format defines arcs.
"""

from __future__ import annotations

import enum
import math
from collections.abc import Iterator, Mapping, Sequence
from dataclasses import dataclass, field
from typing import Union

import numpy as np

Point = tuple[float, float]


@dataclass(frozen=True)
class MoveTo:
    x: float
    y: float


@dataclass(frozen=True)
class LineTo:
    x: float
    y: float


@dataclass(frozen=True)
class CubicCurveTo:
    c1: Point
    c2: Point
    end: Point


@dataclass(frozen=True)
class ArcTo:
    radius_x: float
    radius_y: float
    start_angle: float  # degrees
    sweep_angle: float  # degrees, positive = clockwise in screen space

    @property
    def large_arc(self) -> int:
        return 1 if abs(self.sweep_angle) > 180 else 0

    @property
    def sweep(self) -> int:
        return 1 if self.sweep_angle > 0 else 0

    def end_point(self, pen: Point) -> Point:
        """End point of the arc when the pen sits on the ellipse at start_angle."""
        st = math.radians(self.start_angle)
        en = math.radians(self.start_angle + self.sweep_angle)
        cx = pen[0] - self.radius_x * math.cos(st)
        cy = pen[1] - self.radius_y * math.sin(st)
        return (cx + self.radius_x * math.cos(en), cy + self.radius_y * math.sin(en))


@dataclass(frozen=True)
class Close:
    pass


PathCommand = Union[MoveTo, LineTo, CubicCurveTo, ArcTo, Close]


@dataclass(frozen=True)
class BoundingBox:
    width: float
    height: float

    def __post_init__(self) -> None:
        # Never negative
        object.__setattr__(self, "width", max(0.0, float(self.width)))
        object.__setattr__(self, "height", max(0.0, float(self.height)))

    @classmethod
    def default(cls, size: float = 200.0) -> BoundingBox:
        return cls(size, size)

    @classmethod
    def coerce(cls, width: float | None, height: float | None, default: float = 200.0) -> BoundingBox:
        """Box from possibly-missing dimensions. Zero or missing sides take the default."""
        return cls(width or default, height or default)


class ShapeKindHint(str, enum.Enum):
    """Best-effort shape kind. Advisory only, never authoritative."""

    RECT = "rect"
    ROUND_RECT = "roundRect"
    ELLIPSE = "ellipse"
    TRIANGLE = "triangle"
    DIAMOND = "diamond"
    PARALLELOGRAM = "parallelogram"
    TRAPEZOID = "trapezoid"
    PENTAGON = "pentagon"
    HEXAGON = "hexagon"
    OCTAGON = "octagon"
    STAR = "star"
    ARROW = "arrow"
    CALLOUT = "callout"
    CUSTOM = "custom"


@dataclass(frozen=True)
class ShapeGeometryRequest:
    target: BoundingBox
    preset_id: str | None = None
    custom_commands: tuple[PathCommand, ...] | None = None
    design_size: tuple[float, float] | None = None
    adjustments: Mapping[str, float] = field(default_factory=dict)


@dataclass(frozen=True)
class ResolvedPath:
    commands: tuple[PathCommand, ...]
    view_box: tuple[float, float]
    precision: int = field(default=2, compare=False)  # decimals in the path string

    @property
    def path(self) -> str:
        return to_svg_path(self.commands, self.precision)

    @classmethod
    def build(cls, commands: Sequence[PathCommand], target: BoundingBox, precision: int = 2) -> ResolvedPath:
        commands = tuple(commands)
        return cls(commands=commands, view_box=compute_view_box(commands, target), precision=precision)


def iter_points(commands: Sequence[PathCommand]) -> Iterator[Point]:
    """Every absolute coordinate the commands reference, arc end points included."""
    pen: Point = (0.0, 0.0)
    start: Point = pen
    for cmd in commands:
        if isinstance(cmd, MoveTo):
            pen = start = (cmd.x, cmd.y)
            yield pen
        elif isinstance(cmd, LineTo):
            pen = (cmd.x, cmd.y)
            yield pen
        elif isinstance(cmd, CubicCurveTo):
            yield cmd.c1
            yield cmd.c2
            pen = cmd.end
            yield pen
        elif isinstance(cmd, ArcTo):
            pen = cmd.end_point(pen)
            yield pen
        elif isinstance(cmd, Close):
            pen = start


def compute_view_box(commands: Sequence[PathCommand], target: BoundingBox) -> tuple[float, float]:
    """(max_x, max_y) covering every referenced coordinate and the target box."""
    pts = np.array(list(iter_points(commands)), dtype=np.float64)
    if len(pts) == 0:
        return (target.width, target.height)
    extent = np.abs(pts).max(axis=0)
    return (
        float(max(target.width, extent[0])),
        float(max(target.height, extent[1])),
    )


def scale_commands(commands: Sequence[PathCommand], sx: float, sy: float) -> list[PathCommand]:
    """Scale every coordinate (and arc radius) by (sx, sy). Angles are untouched."""
    out: list[PathCommand] = []
    for cmd in commands:
        if isinstance(cmd, MoveTo):
            out.append(MoveTo(cmd.x * sx, cmd.y * sy))
        elif isinstance(cmd, LineTo):
            out.append(LineTo(cmd.x * sx, cmd.y * sy))
        elif isinstance(cmd, CubicCurveTo):
            out.append(
                CubicCurveTo(
                    (cmd.c1[0] * sx, cmd.c1[1] * sy),
                    (cmd.c2[0] * sx, cmd.c2[1] * sy),
                    (cmd.end[0] * sx, cmd.end[1] * sy),
                )
            )
        elif isinstance(cmd, ArcTo):
            out.append(ArcTo(cmd.radius_x * sx, cmd.radius_y * sy, cmd.start_angle, cmd.sweep_angle))
        else:
            out.append(cmd)
    return out


def _fmt(value: float, precision: int) -> str:
    text = f"{value:.{precision}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return "0" if text in ("", "-0") else text


def to_svg_path(commands: Sequence[PathCommand], precision: int = 2) -> str:
    """Render commands as an absolute M/L/C/A/Z path string."""

    def f(v: float) -> str:
        return _fmt(v, precision)

    parts: list[str] = []
    pen: Point = (0.0, 0.0)
    start: Point = pen
    for cmd in commands:
        if isinstance(cmd, MoveTo):
            pen = start = (cmd.x, cmd.y)
            parts.append(f"M {f(cmd.x)} {f(cmd.y)}")
        elif isinstance(cmd, LineTo):
            pen = (cmd.x, cmd.y)
            parts.append(f"L {f(cmd.x)} {f(cmd.y)}")
        elif isinstance(cmd, CubicCurveTo):
            pen = cmd.end
            parts.append(
                f"C {f(cmd.c1[0])} {f(cmd.c1[1])} {f(cmd.c2[0])} {f(cmd.c2[1])} "
                f"{f(cmd.end[0])} {f(cmd.end[1])}"
            )
        elif isinstance(cmd, ArcTo):
            if cmd.radius_x <= 0 or cmd.radius_y <= 0:
                continue
            end = cmd.end_point(pen)
            pen = end
            parts.append(
                f"A {f(cmd.radius_x)} {f(cmd.radius_y)} 0 {cmd.large_arc} {cmd.sweep} "
                f"{f(end[0])} {f(end[1])}"
            )
        elif isinstance(cmd, Close):
            pen = start
            parts.append("Z")
    return " ".join(parts)
