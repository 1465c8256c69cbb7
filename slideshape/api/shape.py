"""POST /api/shape, /api/shapes: geometry and paint for shape elements."""

from __future__ import annotations

import asyncio
import functools
import logging
import xml.etree.ElementTree as ET

from fastapi import APIRouter, Depends, HTTPException

from slideshape.color.palette import ThemePalette
from slideshape.color.resolver import ColorResolver
from slideshape.config import settings
from slideshape.dependencies import get_color_resolver, get_geometry_resolver
from slideshape.engine.batch import resolve_shapes
from slideshape.engine.geometry import GeometryResolver
from slideshape.errors import ColorResolutionError
from slideshape.models.requests import ShapeBatchRequest, ShapeRequest
from slideshape.models.responses import (
    GradientResponse,
    GradientStopResponse,
    OutlineResponse,
    ShadowResponse,
    ShapeBatchResponse,
    ShapeResponse,
)
from slideshape.paint import ShapeRender, resolve_shape
from slideshape.tree.node import TreeNode, parse_xml
from slideshape.tree.reader import read_line_styles

logger = logging.getLogger(__name__)

router = APIRouter()


def _parse(xml: str) -> TreeNode:
    try:
        return parse_xml(xml)
    except ET.ParseError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e


def _theme(theme: dict[str, str] | None, theme_xml: str | None) -> tuple[ThemePalette | None, list[TreeNode]]:
    """Palette and theme line styles. The slot mapping wins over the theme element's colors."""
    if theme_xml is None:
        return (ThemePalette.from_mapping(theme) if theme is not None else None), []
    node = _parse(theme_xml)
    palette = ThemePalette.from_mapping(theme) if theme is not None else ThemePalette.from_tree(node)
    return palette, read_line_styles(node)


def render_response(render: ShapeRender) -> ShapeResponse:
    outline = None
    if render.outline is not None:
        outline = OutlineResponse(
            width=render.outline.width,
            color=render.outline.color.to_css(),
            style=render.outline.style,
            dasharray=render.outline.dasharray,
        )
    gradient = None
    if render.gradient is not None:
        gradient = GradientResponse(
            kind=render.gradient.kind,
            angle=render.gradient.angle,
            stops=[GradientStopResponse(pos=pos, color=color.to_css()) for pos, color in render.gradient.stops],
        )
    shadow = None
    if render.shadow is not None:
        shadow = ShadowResponse(
            h=render.shadow.h,
            v=render.shadow.v,
            blur=render.shadow.blur,
            color=render.shadow.color.to_css(),
        )
    return ShapeResponse(
        path=render.path,
        view_box=render.view_box,
        shape_kind=render.kind.value,
        fill=render.fill.to_css() if render.fill is not None else None,
        gradient=gradient,
        outline=outline,
        shadow=shadow,
        keypoints=render.keypoints,
    )


@router.post("/shape", response_model=ShapeResponse)
async def shape(
    req: ShapeRequest,
    geometry: GeometryResolver = Depends(get_geometry_resolver),
    colors: ColorResolver = Depends(get_color_resolver),
) -> ShapeResponse:
    sp = _parse(req.xml)
    palette, line_styles = _theme(req.theme, req.theme_xml)

    try:
        render = resolve_shape(sp, palette, geometry, colors, line_styles)
    except ColorResolutionError as e:
        raise HTTPException(status_code=422, detail=str(e)) from e

    logger.info("Shape %s resolved as %s", sp.name, render.kind.value)
    return render_response(render)


@router.post("/shapes", response_model=ShapeBatchResponse)
async def shapes(
    req: ShapeBatchRequest,
    geometry: GeometryResolver = Depends(get_geometry_resolver),
    colors: ColorResolver = Depends(get_color_resolver),
) -> ShapeBatchResponse:
    nodes = [_parse(xml) for xml in req.shapes]
    palette, line_styles = _theme(req.theme, req.theme_xml)

    # Thread pool work stays off the event loop
    job = functools.partial(
        resolve_shapes,
        nodes,
        palette,
        max_workers=settings.batch_max_workers,
        resolver=geometry,
        colors=colors,
        line_styles=line_styles,
    )
    try:
        renders = await asyncio.get_running_loop().run_in_executor(None, job)
    except ColorResolutionError as e:
        raise HTTPException(status_code=422, detail=str(e)) from e

    logger.info("Resolved batch of %d shapes", len(renders))
    return ShapeBatchResponse(shapes=[render_response(r) for r in renders])
