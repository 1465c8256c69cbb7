"""Shape paint: fill, gradient, outline and shadow read from a shape's property tree.

Every function takes the shape properties node (``spPr``) and a theme palette.
Scheme colors without a palette raise ``MissingThemeError``.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence
from dataclasses import dataclass, field

from slideshape.color.palette import ThemePalette
from slideshape.color.resolver import ColorResolver
from slideshape.color.spec import ResolvedColor
from slideshape.engine.commands import ShapeKindHint
from slideshape.engine.geometry import GeometryResolver, default_resolver
from slideshape.tree.node import TreeNode, find_child, find_node, find_nodes, get_attribute
from slideshape.tree.reader import (
    ANGLE_UNIT,
    emu_to_points,
    find_color_node,
    parse_number,
    read_color,
    read_geometry_request,
)

logger = logging.getLogger(__name__)

DEFAULT_OUTLINE_COLOR = ResolvedColor(0, 0, 0, 1.0)
DEFAULT_SHADOW_COLOR = ResolvedColor(0, 0, 0, 0.5)

# prstDash value → (CSS-ish border style, SVG dasharray)
DASH_STYLES: dict[str, tuple[str, str]] = {
    "solid": ("solid", "0"),
    "dash": ("dashed", "5"),
    "dashDot": ("dashed", "5, 5, 1, 5"),
    "dot": ("dotted", "1, 5"),
    "lgDash": ("dashed", "10, 5"),
    "lgDashDotDot": ("dotted", "10, 5, 1, 5, 1, 5"),
    "sysDash": ("dashed", "5, 2"),
    "sysDashDot": ("dotted", "5, 2, 1, 5"),
    "sysDashDotDot": ("dotted", "5, 2, 1, 5, 1, 5"),
    "sysDot": ("dotted", "2, 5"),
}
_SOLID = DASH_STYLES["solid"]


@dataclass(frozen=True)
class Outline:
    width: float  # points
    color: ResolvedColor
    style: str = "solid"
    dasharray: str = "0"


@dataclass(frozen=True)
class GradientFill:
    kind: str  # "linear" or "radial"
    angle: float  # degrees
    stops: list[tuple[float, ResolvedColor]]  # (position 0..100, color), sorted by position


@dataclass(frozen=True)
class Shadow:
    h: float
    v: float
    blur: float
    color: ResolvedColor = DEFAULT_SHADOW_COLOR


@dataclass(frozen=True)
class ShapeRender:
    path: str
    view_box: tuple[float, float]
    kind: ShapeKindHint
    fill: ResolvedColor | None = None
    gradient: GradientFill | None = None
    outline: Outline | None = None
    shadow: Shadow | None = None
    keypoints: list[float] = field(default_factory=list)


def _paint_from(
    parent: TreeNode | None,
    palette: ThemePalette | None,
    placeholder: ResolvedColor | None,
    colors: ColorResolver,
) -> ResolvedColor | None:
    node = find_color_node(parent)
    if node is None:
        return None
    spec, modifiers = read_color(node)
    return colors.resolve_paint(spec, modifiers, palette, placeholder)


def resolve_fill(
    sp_pr: TreeNode | None,
    palette: ThemePalette | None,
    style: TreeNode | None = None,
    placeholder: ResolvedColor | None = None,
    colors: ColorResolver | None = None,
) -> ResolvedColor | None:
    colors = colors or ColorResolver()

    if find_child(sp_pr, "noFill") is not None:
        return ResolvedColor.transparent()

    fill_ref = find_child(style, "fillRef")
    if fill_ref is not None:
        color = _paint_from(fill_ref, palette, placeholder, colors)
        if color is not None:
            return color

    solid = find_child(sp_pr, "solidFill")
    if solid is not None:
        return _paint_from(solid, palette, placeholder, colors)
    return None


def resolve_gradient(
    sp_pr: TreeNode | None,
    palette: ThemePalette | None,
    placeholder: ResolvedColor | None = None,
    colors: ColorResolver | None = None,
) -> GradientFill | None:
    grad = find_child(sp_pr, "gradFill")
    if grad is None:
        return None

    colors = colors or ColorResolver()
    lin = find_child(grad, "lin")
    kind = "radial" if lin is None and find_child(grad, "path") is not None else "linear"
    angle = 0.0
    if lin is not None and "ang" in lin.attributes:
        angle = (parse_number(lin.attributes["ang"]) / ANGLE_UNIT + 90) % 360

    stops: list[tuple[float, ResolvedColor]] = []
    for gs in find_nodes(find_child(grad, "gsLst"), "gs"):
        color = _paint_from(gs, palette, placeholder, colors)
        if color is None:
            logger.debug("Gradient stop without a color, skipped")
            continue
        stops.append((parse_number(gs.attributes.get("pos")) / 1000, color))

    if not stops:
        return None
    # Stops may be out of order in the source
    stops.sort(key=lambda stop: stop[0])
    return GradientFill(kind=kind, angle=angle, stops=stops)


def _line_node(
    sp_pr: TreeNode | None,
    ln_ref: TreeNode | None,
    line_styles: Sequence[TreeNode],
) -> TreeNode | None:
    ln = find_child(sp_pr, "ln")
    if ln is not None or ln_ref is None:
        return ln
    index = int(parse_number(ln_ref.attributes.get("idx"))) - 1
    if 0 <= index < len(line_styles):
        return line_styles[index]
    return None


def resolve_outline(
    sp_pr: TreeNode | None,
    palette: ThemePalette | None,
    style: TreeNode | None = None,
    line_styles: Sequence[TreeNode] = (),
    colors: ColorResolver | None = None,
) -> Outline | None:
    """Outline from ``spPr/ln``, or from the theme line style the shape's ``lnRef`` points at."""
    ln_ref = find_child(style, "lnRef")
    ln = _line_node(sp_pr, ln_ref, line_styles)
    if ln is None and ln_ref is None:
        return None
    if find_child(ln, "noFill") is not None:
        return None

    colors = colors or ColorResolver()
    # The lnRef color stands in for phClr inside a theme line style
    ref_color = _paint_from(ln_ref, palette, None, colors)
    width = round(emu_to_points(get_attribute(ln, "w")), 2)
    color = _paint_from(find_child(ln, "solidFill"), palette, ref_color, colors) or ref_color or DEFAULT_OUTLINE_COLOR

    dash = find_child(ln, "prstDash")
    style_name, dasharray = DASH_STYLES.get(get_attribute(dash, "val", ""), _SOLID)

    if width <= 0 and color == DEFAULT_OUTLINE_COLOR:
        return None
    return Outline(width=width, color=color, style=style_name, dasharray=dasharray)


def resolve_shadow(
    sp_pr: TreeNode | None,
    palette: ThemePalette | None,
    colors: ColorResolver | None = None,
) -> Shadow | None:
    shadow = find_node(find_child(sp_pr, "effectLst"), "outerShdw")
    if shadow is None:
        return None

    colors = colors or ColorResolver()
    blur = emu_to_points(shadow.attributes.get("blurRad"))
    dist = emu_to_points(shadow.attributes.get("dist"))
    angle = math.radians(parse_number(shadow.attributes.get("dir")) / ANGLE_UNIT)
    color = _paint_from(shadow, palette, None, colors) or DEFAULT_SHADOW_COLOR

    return Shadow(
        h=round(dist * math.cos(angle), 2),
        v=round(dist * math.sin(angle), 2),
        blur=round(blur, 2),
        color=color,
    )


def resolve_shape(
    sp: TreeNode,
    palette: ThemePalette | None,
    geometry: GeometryResolver | None = None,
    colors: ColorResolver | None = None,
    line_styles: Sequence[TreeNode] = (),
) -> ShapeRender:
    """Geometry and paint for one ``sp`` node.

    ``line_styles`` are the theme line entries an ``lnRef`` indexes into.
    """
    geometry = geometry or default_resolver()
    colors = colors or ColorResolver()

    sp_pr = find_child(sp, "spPr")
    style = find_child(sp, "style")
    request = read_geometry_request(sp_pr)
    resolved = geometry.resolve(request)

    if request.custom_commands is not None:
        kind = geometry.classify(request.custom_commands, request.design_size)
    else:
        kind = geometry.shape_kind(request.preset_id)

    keypoints: list[float] = []
    if request.preset_id == "roundRect":
        keypoints = geometry.round_rect_keypoints(request.adjustments)

    render = ShapeRender(
        path=resolved.path,
        view_box=resolved.view_box,
        kind=kind,
        fill=resolve_fill(sp_pr, palette, style, colors=colors),
        gradient=resolve_gradient(sp_pr, palette, colors=colors),
        outline=resolve_outline(sp_pr, palette, style, line_styles, colors),
        shadow=resolve_shadow(sp_pr, palette, colors),
        keypoints=keypoints,
    )
    logger.debug("Resolved shape %s as %s", sp.attributes.get("id", sp.name), kind.value)
    return render
