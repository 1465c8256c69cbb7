"""Readers that turn shape-property trees into engine inputs."""

from __future__ import annotations

import logging

from slideshape.color.spec import (
    HSL,
    MODIFIER_TYPES,
    ColorModifier,
    ColorSpec,
    DirectRGB,
    PercentRGB,
    PresetName,
    SchemeColorRef,
    SystemColor,
)
from slideshape.engine.commands import (
    ArcTo,
    BoundingBox,
    Close,
    CubicCurveTo,
    LineTo,
    MoveTo,
    PathCommand,
    Point,
    ShapeGeometryRequest,
)
from slideshape.engine.config import DEFAULT_BOX_SIZE
from slideshape.engine.presets.basic import quad_to_cubic
from slideshape.tree.node import TreeNode, find_child, find_node, get_attribute

logger = logging.getLogger(__name__)

EMU_PER_POINT = 12700
ANGLE_UNIT = 60000  # 60000ths of a degree
RATIO_UNIT = 100000

COLOR_NODE_NAMES = ("srgbClr", "scrgbClr", "hslClr", "prstClr", "sysClr", "schemeClr")


def parse_number(value: str | None, default: float = 0.0) -> float:
    if value is None:
        return default
    try:
        return float(value)
    except ValueError:
        logger.debug("Non-numeric value %r, using %s", value, default)
        return default


def parse_percent(value: str | None) -> float:
    """'50%' → 50.0; '50000' (thousandths of a percent) → 50.0."""
    if value is None:
        return 0.0
    text = value.strip()
    if text.endswith("%"):
        return parse_number(text[:-1])
    return parse_number(text) / 1000


def emu_to_points(value: str | float | None) -> float:
    if value is None:
        return 0.0
    return parse_number(str(value)) / EMU_PER_POINT


# ── colors ──────────────────────────────────────────────────────


def find_color_node(parent: TreeNode | None) -> TreeNode | None:
    if parent is None:
        return None
    return next((c for c in parent.children if c.local_name in COLOR_NODE_NAMES), None)


def read_color(node: TreeNode) -> tuple[ColorSpec, list[ColorModifier]]:
    """Color specification and its modifier chain, in document order."""
    kind = node.local_name
    attrs = node.attributes

    if kind == "srgbClr":
        spec: ColorSpec = DirectRGB(attrs.get("val", "000000"))
    elif kind == "scrgbClr":
        spec = PercentRGB(parse_percent(attrs.get("r")), parse_percent(attrs.get("g")), parse_percent(attrs.get("b")))
    elif kind == "hslClr":
        spec = HSL(
            parse_number(attrs.get("hue")),
            parse_percent(attrs.get("sat")) / 100,
            parse_percent(attrs.get("lum")) / 100,
        )
    elif kind == "prstClr":
        spec = PresetName(attrs.get("val", ""))
    elif kind == "sysClr":
        spec = SystemColor(attrs.get("val", ""), attrs.get("lastClr"))
    elif kind == "schemeClr":
        spec = SchemeColorRef(attrs.get("val", ""))
    else:
        raise ValueError(f"Not a color node: {node.name}")

    modifiers: list[ColorModifier] = []
    for child in node.children:
        mod_type = MODIFIER_TYPES.get(child.local_name)
        if mod_type is None:
            logger.debug("Skipping unsupported color modifier %s", child.name)
            continue
        try:
            value = int(child.attributes.get("val", ""))
        except ValueError:
            logger.debug("Skipping %s with unparsable value %r", child.name, child.attributes.get("val"))
            continue
        modifiers.append(mod_type(value / RATIO_UNIT))
    return spec, modifiers


# ── geometry ────────────────────────────────────────────────────


def read_adjustments(prst_geom: TreeNode | None) -> dict[str, float]:
    """avLst guides of the form ``fmla="val N"`` → {name: N / 100000}."""
    adjustments: dict[str, float] = {}
    av_lst = find_child(prst_geom, "avLst")
    if av_lst is None:
        return adjustments
    for gd in av_lst.children:
        if gd.local_name != "gd":
            continue
        name = gd.attributes.get("name")
        parts = gd.attributes.get("fmla", "").split()
        if not name or len(parts) != 2 or parts[0] != "val":
            continue
        try:
            adjustments[name] = int(parts[1]) / RATIO_UNIT
        except ValueError:
            logger.debug("Skipping guide %s with formula %r", name, gd.attributes.get("fmla"))
    return adjustments


def _point(pt: TreeNode) -> Point:
    return (parse_number(pt.attributes.get("x")), parse_number(pt.attributes.get("y")))


def read_custom_path(cust_geom: TreeNode) -> tuple[list[PathCommand], tuple[float, float]]:
    """Commands and design size of the first path in ``pathLst``.

    A missing or zero design dimension is reported as 0 so the geometry
    resolver can reject it.
    """
    path_lst = find_child(cust_geom, "pathLst")
    path = find_child(path_lst, "path")
    if path is None:
        return [], (0.0, 0.0)

    design_size = (parse_number(path.attributes.get("w")), parse_number(path.attributes.get("h")))
    commands: list[PathCommand] = []
    pen: Point = (0.0, 0.0)
    start: Point = pen

    for node in path.children:
        kind = node.local_name
        points = [_point(c) for c in node.children if c.local_name == "pt"]

        if kind == "moveTo" and points:
            pen = start = points[0]
            commands.append(MoveTo(*pen))
        elif kind == "lnTo" and points:
            pen = points[0]
            commands.append(LineTo(*pen))
        elif kind == "cubicBezTo":
            if len(points) != 3:
                logger.debug("cubicBezTo with %d points skipped", len(points))
                continue
            commands.append(CubicCurveTo(points[0], points[1], points[2]))
            pen = points[2]
        elif kind == "quadBezTo":
            if len(points) != 2:
                logger.debug("quadBezTo with %d points skipped", len(points))
                continue
            commands.append(quad_to_cubic(pen, points[0], points[1]))
            pen = points[1]
        elif kind == "arcTo":
            arc = ArcTo(
                parse_number(node.attributes.get("wR")),
                parse_number(node.attributes.get("hR")),
                parse_number(node.attributes.get("stAng")) / ANGLE_UNIT,
                parse_number(node.attributes.get("swAng")) / ANGLE_UNIT,
            )
            commands.append(arc)
            pen = arc.end_point(pen)
        elif kind == "close":
            commands.append(Close())
            pen = start
        else:
            logger.debug("Unsupported path element %s", node.name)

    return commands, design_size


def read_bounding_box(sp_pr: TreeNode | None, default: float = DEFAULT_BOX_SIZE) -> BoundingBox:
    """``xfrm/ext`` extent in points. Missing or zero sides take the default."""
    ext = find_node(find_child(sp_pr, "xfrm"), "ext")
    return BoundingBox.coerce(
        emu_to_points(get_attribute(ext, "cx")),
        emu_to_points(get_attribute(ext, "cy")),
        default,
    )


def read_geometry_request(sp_pr: TreeNode | None, target: BoundingBox | None = None) -> ShapeGeometryRequest:
    box = target or read_bounding_box(sp_pr)

    cust_geom = find_child(sp_pr, "custGeom")
    if cust_geom is not None:
        commands, design_size = read_custom_path(cust_geom)
        return ShapeGeometryRequest(
            target=box,
            custom_commands=tuple(commands),
            design_size=design_size,
        )

    prst_geom = find_child(sp_pr, "prstGeom")
    if prst_geom is not None:
        return ShapeGeometryRequest(
            target=box,
            preset_id=prst_geom.attributes.get("prst"),
            adjustments=read_adjustments(prst_geom),
        )

    return ShapeGeometryRequest(target=box)


# ── theme ───────────────────────────────────────────────────────


def read_line_styles(theme: TreeNode | None) -> list[TreeNode]:
    """Theme ``fmtScheme/lnStyleLst`` line entries, in index order (``lnRef idx`` is 1-based)."""
    styles = find_node(theme, "lnStyleLst")
    if styles is None:
        return []
    return [child for child in styles.children if child.local_name == "ln"]
