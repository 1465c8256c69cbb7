"""Batch resolution: one task per shape on a thread pool, results in input order."""

from __future__ import annotations

import concurrent.futures
import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING

from slideshape.engine.commands import ResolvedPath, ShapeGeometryRequest
from slideshape.engine.geometry import GeometryResolver, default_resolver

if TYPE_CHECKING:
    from slideshape.color.palette import ThemePalette
    from slideshape.color.resolver import ColorResolver
    from slideshape.paint import ShapeRender
    from slideshape.tree.node import TreeNode

logger = logging.getLogger(__name__)

DEFAULT_MAX_WORKERS = 8


def resolve_paths(
    requests: Sequence[ShapeGeometryRequest],
    max_workers: int | None = None,
    resolver: GeometryResolver | None = None,
) -> list[ResolvedPath]:
    """Resolve geometry requests in parallel."""
    resolver = resolver or default_resolver()
    if not requests:
        return []
    with concurrent.futures.ThreadPoolExecutor(max_workers=max_workers or DEFAULT_MAX_WORKERS) as executor:
        futures = [executor.submit(resolver.resolve, request) for request in requests]
        # result() re-raises the first failure in input order
        paths = [future.result() for future in futures]
    logger.debug("Resolved %d paths", len(paths))
    return paths


def resolve_shapes(
    shapes: Sequence[TreeNode],
    palette: ThemePalette | None = None,
    max_workers: int | None = None,
    resolver: GeometryResolver | None = None,
    colors: ColorResolver | None = None,
    line_styles: Sequence[TreeNode] = (),
) -> list[ShapeRender]:
    """Resolve ``sp`` nodes (geometry and paint) in parallel.

    Raises:
        ColorResolutionError: from the first failing shape, in input order.
    """
    from slideshape.paint import resolve_shape

    resolver = resolver or default_resolver()
    if not shapes:
        return []
    with concurrent.futures.ThreadPoolExecutor(max_workers=max_workers or DEFAULT_MAX_WORKERS) as executor:
        futures = [executor.submit(resolve_shape, shape, palette, resolver, colors, line_styles) for shape in shapes]
        renders = [future.result() for future in futures]
    logger.info("Resolved %d shapes", len(renders))
    return renders
