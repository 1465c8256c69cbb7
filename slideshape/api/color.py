"""POST /api/color — a color element (with modifiers) to RGBA."""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET

from fastapi import APIRouter, Depends, HTTPException

from slideshape.color.palette import ThemePalette
from slideshape.color.resolver import ColorResolver
from slideshape.color.spec import ResolvedColor
from slideshape.dependencies import get_color_resolver
from slideshape.errors import ColorResolutionError
from slideshape.models.requests import ColorRequest
from slideshape.models.responses import ColorResponse
from slideshape.tree.node import parse_xml
from slideshape.tree.reader import read_color

logger = logging.getLogger(__name__)

router = APIRouter()


def color_response(color: ResolvedColor) -> ColorResponse:
    return ColorResponse(rgba=color.to_css(), r=color.r, g=color.g, b=color.b, a=color.a, hex=color.hex)


@router.post("/color", response_model=ColorResponse)
async def color(
    req: ColorRequest,
    resolver: ColorResolver = Depends(get_color_resolver),
) -> ColorResponse:
    try:
        node = parse_xml(req.xml)
        spec, modifiers = read_color(node)
    except (ET.ParseError, ValueError) as e:
        raise HTTPException(status_code=400, detail=str(e)) from e

    palette = ThemePalette.from_mapping(req.theme) if req.theme is not None else None
    placeholder = ResolvedColor.from_hex(req.placeholder) if req.placeholder else None

    try:
        resolved = resolver.resolve_paint(spec, modifiers, palette, placeholder)
    except ColorResolutionError as e:
        raise HTTPException(status_code=422, detail=str(e)) from e

    logger.info("Color %s → %s", node.local_name, resolved.to_css())
    return color_response(resolved)
