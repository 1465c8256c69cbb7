"""Master API router — mounts all endpoint routers."""

from __future__ import annotations

from fastapi import APIRouter

from slideshape.api import color, geometry, health, shape

api_router = APIRouter(prefix="/api")

api_router.include_router(health.router)
api_router.include_router(geometry.router)
api_router.include_router(color.router)
api_router.include_router(shape.router)
