"""Slideshape geometry engine."""

from slideshape.engine.commands import (
    ArcTo,
    BoundingBox,
    Close,
    CubicCurveTo,
    LineTo,
    MoveTo,
    PathCommand,
    ResolvedPath,
    ShapeGeometryRequest,
    ShapeKindHint,
    to_svg_path,
)
from slideshape.engine.geometry import (
    GeometryResolver,
    classify_custom_as_known_shape,
    create_resolver,
    map_preset_to_shape_kind,
)
from slideshape.engine.registry import get_registry, preset

__all__ = [
    "ArcTo",
    "BoundingBox",
    "Close",
    "CubicCurveTo",
    "LineTo",
    "MoveTo",
    "PathCommand",
    "ResolvedPath",
    "ShapeGeometryRequest",
    "ShapeKindHint",
    "to_svg_path",
    "GeometryResolver",
    "classify_custom_as_known_shape",
    "create_resolver",
    "map_preset_to_shape_kind",
    "get_registry",
    "preset",
]
