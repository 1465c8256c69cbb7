"""Action buttons: a framed box with a centred glyph sized from ss = min(w, h)."""

from __future__ import annotations

from collections.abc import Mapping

from slideshape.engine.commands import (
    ArcTo,
    Close,
    CubicCurveTo,
    LineTo,
    MoveTo,
    PathCommand,
)
from slideshape.engine.presets.basic import rect_path
from slideshape.engine.registry import preset


def mirror_x(commands: list[PathCommand], w: float) -> list[PathCommand]:
    """Reflect commands across the vertical centre line of a box of width w."""
    out: list[PathCommand] = []
    for cmd in commands:
        if isinstance(cmd, MoveTo):
            out.append(MoveTo(w - cmd.x, cmd.y))
        elif isinstance(cmd, LineTo):
            out.append(LineTo(w - cmd.x, cmd.y))
        elif isinstance(cmd, CubicCurveTo):
            out.append(
                CubicCurveTo(
                    (w - cmd.c1[0], cmd.c1[1]),
                    (w - cmd.c2[0], cmd.c2[1]),
                    (w - cmd.end[0], cmd.end[1]),
                )
            )
        elif isinstance(cmd, ArcTo):
            out.append(ArcTo(cmd.radius_x, cmd.radius_y, 180 - cmd.start_angle, -cmd.sweep_angle))
        else:
            out.append(cmd)
    return out


def _back_glyph(w: float, h: float) -> list[PathCommand]:
    hc, vc = w / 2, h / 2
    dx2 = min(w, h) * 3 / 8
    return [
        MoveTo(hc - dx2, vc),
        LineTo(hc + dx2, vc - dx2),
        LineTo(hc + dx2, vc + dx2),
        Close(),
    ]


def _beginning_glyph(w: float, h: float) -> list[PathCommand]:
    hc, vc = w / 2, h / 2
    ss = min(w, h)
    dx2 = ss * 3 / 8
    g9, g10 = vc - dx2, vc + dx2
    g11, g12 = hc - dx2, hc + dx2
    g13 = ss * 3 / 4
    g16 = g11 + g13 / 8
    g17 = g11 + g13 / 4
    return [
        # Triangle
        MoveTo(g17, vc),
        LineTo(g12, g9),
        LineTo(g12, g10),
        Close(),
        # Bar
        MoveTo(g16, g9),
        LineTo(g11, g9),
        LineTo(g11, g10),
        LineTo(g16, g10),
        Close(),
    ]


@preset(id="actionButtonBlank")
def blank(w: float, h: float, adj: Mapping[str, float]) -> list[PathCommand]:
    return rect_path(w, h)


@preset(id="actionButtonBackPrevious")
def back_previous(w: float, h: float, adj: Mapping[str, float]) -> list[PathCommand]:
    return [*rect_path(w, h), *_back_glyph(w, h)]


@preset(id="actionButtonForwardNext")
def forward_next(w: float, h: float, adj: Mapping[str, float]) -> list[PathCommand]:
    return [*rect_path(w, h), *mirror_x(_back_glyph(w, h), w)]


@preset(id="actionButtonBeginning")
def beginning(w: float, h: float, adj: Mapping[str, float]) -> list[PathCommand]:
    return [*rect_path(w, h), *_beginning_glyph(w, h)]


@preset(id="actionButtonEnd")
def end(w: float, h: float, adj: Mapping[str, float]) -> list[PathCommand]:
    return [*rect_path(w, h), *mirror_x(_beginning_glyph(w, h), w)]


@preset(id="actionButtonDocument")
def document(w: float, h: float, adj: Mapping[str, float]) -> list[PathCommand]:
    hc, vc = w / 2, h / 2
    ss = min(w, h)
    dx2 = ss * 3 / 8
    g9, g10 = vc - dx2, vc + dx2
    dx1 = ss * 9 / 32
    g11, g12 = hc - dx1, hc + dx1
    g13 = ss * 3 / 16
    g14 = g12 - g13
    g15 = g9 + g13
    return [
        *rect_path(w, h),
        # Page with folded corner
        MoveTo(g11, g9),
        LineTo(g14, g9),
        LineTo(g12, g15),
        LineTo(g12, g10),
        LineTo(g11, g10),
        Close(),
        # Fold
        MoveTo(g14, g9),
        LineTo(g14, g15),
        LineTo(g12, g15),
        Close(),
    ]
