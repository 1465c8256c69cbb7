"""Shared resolver instances for the HTTP layer, configured from settings."""

from __future__ import annotations

import functools

from slideshape.color.resolver import ColorResolver, create_resolver as create_color_resolver
from slideshape.config import settings
from slideshape.engine.config import ColorConfig, GeometryConfig
from slideshape.engine.geometry import GeometryResolver, create_resolver as create_geometry_resolver


@functools.lru_cache(maxsize=1)
def get_geometry_resolver() -> GeometryResolver:
    return create_geometry_resolver(GeometryConfig.from_settings(settings))


@functools.lru_cache(maxsize=1)
def get_color_resolver() -> ColorResolver:
    return create_color_resolver(ColorConfig.from_settings(settings))
