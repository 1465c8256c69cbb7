"""POST /api/geometry — preset or custom geometry to an SVG path."""

from __future__ import annotations

import dataclasses
import logging

from fastapi import APIRouter, Depends

from slideshape.dependencies import get_geometry_resolver
from slideshape.engine.commands import BoundingBox, PathCommand, ShapeGeometryRequest
from slideshape.engine.geometry import GeometryResolver
from slideshape.models.requests import GeometryRequest
from slideshape.models.responses import GeometryResponse

logger = logging.getLogger(__name__)

router = APIRouter()


def command_to_dict(cmd: PathCommand) -> dict:
    return {"type": type(cmd).__name__, **dataclasses.asdict(cmd)}


@router.post("/geometry", response_model=GeometryResponse)
async def geometry(
    req: GeometryRequest,
    resolver: GeometryResolver = Depends(get_geometry_resolver),
) -> GeometryResponse:
    box = BoundingBox.coerce(req.width, req.height, resolver.config.default_box_size)

    custom = None
    if req.custom_commands is not None:
        custom = tuple(c.to_command() for c in req.custom_commands)

    request = ShapeGeometryRequest(
        target=box,
        preset_id=req.preset_id,
        custom_commands=custom,
        design_size=(req.design_width, req.design_height),
        adjustments=req.adjustments,
    )
    resolved = resolver.resolve(request)

    if custom is not None:
        kind = resolver.classify(custom, request.design_size)
    else:
        kind = resolver.shape_kind(req.preset_id)

    logger.info("Geometry %s → %d commands", req.preset_id or "custom", len(resolved.commands))
    return GeometryResponse(
        path=resolved.path,
        view_box=resolved.view_box,
        commands=[command_to_dict(c) for c in resolved.commands],
        shape_kind=kind.value,
    )
