"""Flow-chart presets.

The document shapes are drawn on the 21600-unit grid the source format uses for
flow-chart guides; every guide is scaled by w / 21600 or h / 21600.
"""

from __future__ import annotations

from collections.abc import Mapping

from slideshape.engine.commands import (
    Close,
    CubicCurveTo,
    LineTo,
    MoveTo,
    PathCommand,
    ShapeKindHint,
)
from slideshape.engine.presets.basic import (
    diamond_path,
    ellipse_path,
    parallelogram_path,
    rect_path,
    round_rect_path,
    triangle_path,
)
from slideshape.engine.registry import preset

_GRID = 21600

# Corner ratio of the alternate-process box: ss / 6
_ALTERNATE_CORNER = 1 / 6


@preset(id="flowChartProcess", kind=ShapeKindHint.RECT)
def process(w: float, h: float, adj: Mapping[str, float]) -> list[PathCommand]:
    return rect_path(w, h)


@preset(id="flowChartAlternateProcess", kind=ShapeKindHint.ROUND_RECT)
def alternate_process(w: float, h: float, adj: Mapping[str, float]) -> list[PathCommand]:
    return round_rect_path(w, h, _ALTERNATE_CORNER)


@preset(id="flowChartTerminator", kind=ShapeKindHint.ROUND_RECT)
def terminator(w: float, h: float, adj: Mapping[str, float]) -> list[PathCommand]:
    # Pill: fully rounded short ends
    return round_rect_path(w, h, 0.5)


@preset(id="flowChartDecision", kind=ShapeKindHint.DIAMOND)
def decision(w: float, h: float, adj: Mapping[str, float]) -> list[PathCommand]:
    return diamond_path(w, h)


@preset(id="flowChartConnector", kind=ShapeKindHint.ELLIPSE)
def connector(w: float, h: float, adj: Mapping[str, float]) -> list[PathCommand]:
    return ellipse_path(w, h)


@preset(id="flowChartInputOutput", kind=ShapeKindHint.PARALLELOGRAM)
def input_output(w: float, h: float, adj: Mapping[str, float]) -> list[PathCommand]:
    return parallelogram_path(w, h)


@preset(id="flowChartExtract", kind=ShapeKindHint.TRIANGLE)
def extract(w: float, h: float, adj: Mapping[str, float]) -> list[PathCommand]:
    return triangle_path(w, h)


@preset(id="flowChartMerge", kind=ShapeKindHint.TRIANGLE)
def merge(w: float, h: float, adj: Mapping[str, float]) -> list[PathCommand]:
    return [MoveTo(0, 0), LineTo(w, 0), LineTo(w / 2, h), Close()]


@preset(id="flowChartPredefinedProcess", kind=ShapeKindHint.RECT)
def predefined_process(w: float, h: float, adj: Mapping[str, float]) -> list[PathCommand]:
    return [
        *rect_path(w, h),
        MoveTo(w / 8, 0),
        LineTo(w / 8, h),
        MoveTo(w * 7 / 8, 0),
        LineTo(w * 7 / 8, h),
    ]


@preset(id="flowChartInternalStorage", kind=ShapeKindHint.RECT)
def internal_storage(w: float, h: float, adj: Mapping[str, float]) -> list[PathCommand]:
    return [
        *rect_path(w, h),
        MoveTo(w / 8, 0),
        LineTo(w / 8, h),
        MoveTo(0, h / 8),
        LineTo(w, h / 8),
    ]


@preset(id="flowChartCollate")
def collate(w: float, h: float, adj: Mapping[str, float]) -> list[PathCommand]:
    # Two triangles meeting at the centre
    return [MoveTo(0, 0), LineTo(w, 0), LineTo(0, h), LineTo(w, h), Close()]


@preset(id="flowChartDocument")
def document(w: float, h: float, adj: Mapping[str, float]) -> list[PathCommand]:
    x1 = w * 10800 / _GRID
    y1 = h * 17322 / _GRID
    y2 = h * 20172 / _GRID
    y3 = h * 23922 / _GRID
    return [
        MoveTo(0, 0),
        LineTo(w, 0),
        LineTo(w, y1),
        CubicCurveTo((x1, y1), (x1, y3), (0, y2)),
        Close(),
    ]


@preset(id="flowChartMultidocument")
def multidocument(w: float, h: float, adj: Mapping[str, float]) -> list[PathCommand]:
    y1 = h * 18022 / _GRID
    y2 = h * 3675 / _GRID
    y3 = h * 23542 / _GRID
    y4 = h * 1815 / _GRID
    y5 = h * 16252 / _GRID
    y6 = h * 16352 / _GRID
    y7 = h * 14392 / _GRID
    y8 = h * 20782 / _GRID
    y9 = h * 14467 / _GRID
    x1 = w * 1532 / _GRID
    x2 = w * 20000 / _GRID
    x3 = w * 9298 / _GRID
    x4 = w * 19298 / _GRID
    x5 = w * 18595 / _GRID
    x6 = w * 2972 / _GRID
    x7 = w * 20800 / _GRID
    return [
        # Front page
        MoveTo(0, y2),
        LineTo(x5, y2),
        LineTo(x5, y1),
        CubicCurveTo((x3, y1), (x3, y3), (0, y8)),
        Close(),
        # Middle page
        MoveTo(x1, y2),
        LineTo(x1, y4),
        LineTo(x2, y4),
        LineTo(x2, y5),
        CubicCurveTo((x4, y5), (x5, y6), (x5, y6)),
        # Back page
        MoveTo(x6, y4),
        LineTo(x6, 0),
        LineTo(w, 0),
        LineTo(w, y7),
        CubicCurveTo((x7, y7), (x2, y9), (x2, y9)),
    ]
