"""Block arrows. Head and shaft proportions are fixed formula constants."""

from __future__ import annotations

from collections.abc import Mapping

from slideshape.engine.commands import Close, LineTo, MoveTo, PathCommand, ShapeKindHint
from slideshape.engine.registry import preset

# Shaft length along the arrow axis, and shaft thickness across it.
SHAFT_LENGTH = 0.8
SHAFT_THICKNESS = 0.6


@preset(id="rightArrow", kind=ShapeKindHint.ARROW)
def right_arrow(w: float, h: float, adj: Mapping[str, float]) -> list[PathCommand]:
    neck = w * SHAFT_LENGTH
    top = (h - h * SHAFT_THICKNESS) / 2
    bottom = top + h * SHAFT_THICKNESS
    return [
        MoveTo(0, top),
        LineTo(neck, top),
        LineTo(neck, 0),
        LineTo(w, h / 2),
        LineTo(neck, h),
        LineTo(neck, bottom),
        LineTo(0, bottom),
        Close(),
    ]


@preset(id="leftArrow", kind=ShapeKindHint.ARROW)
def left_arrow(w: float, h: float, adj: Mapping[str, float]) -> list[PathCommand]:
    neck = w - w * SHAFT_LENGTH
    top = (h - h * SHAFT_THICKNESS) / 2
    bottom = top + h * SHAFT_THICKNESS
    return [
        MoveTo(neck, top),
        LineTo(w, top),
        LineTo(w, bottom),
        LineTo(neck, bottom),
        LineTo(neck, h),
        LineTo(0, h / 2),
        LineTo(neck, 0),
        Close(),
    ]


@preset(id="upArrow", kind=ShapeKindHint.ARROW)
def up_arrow(w: float, h: float, adj: Mapping[str, float]) -> list[PathCommand]:
    neck = h - h * SHAFT_LENGTH
    left = (w - w * SHAFT_THICKNESS) / 2
    right = left + w * SHAFT_THICKNESS
    return [
        MoveTo(left, neck),
        LineTo(left, h),
        LineTo(right, h),
        LineTo(right, neck),
        LineTo(w, neck),
        LineTo(w / 2, 0),
        LineTo(0, neck),
        Close(),
    ]


@preset(id="downArrow", kind=ShapeKindHint.ARROW)
def down_arrow(w: float, h: float, adj: Mapping[str, float]) -> list[PathCommand]:
    neck = h * SHAFT_LENGTH
    left = (w - w * SHAFT_THICKNESS) / 2
    right = left + w * SHAFT_THICKNESS
    return [
        MoveTo(left, 0),
        LineTo(left, neck),
        LineTo(0, neck),
        LineTo(w / 2, h),
        LineTo(w, neck),
        LineTo(right, neck),
        LineTo(right, 0),
        Close(),
    ]
