"""Health check + meta endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from slideshape.dependencies import get_geometry_resolver
from slideshape.engine.geometry import GeometryResolver
from slideshape.models.responses import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health(resolver: GeometryResolver = Depends(get_geometry_resolver)) -> HealthResponse:
    return HealthResponse(
        status="ok",
        version="0.1.0",
        presets_registered=resolver.registry.count,
    )


@router.get("/presets")
async def presets(resolver: GeometryResolver = Depends(get_geometry_resolver)) -> list[str]:
    return resolver.registry.names()
