"""GeometryResolver: preset formulas and custom geometry to vector paths.

Never raises for bad dimensions or unknown shapes: missing boxes take the
default size, unknown presets become rectangles, and a degenerate design space
yields ``None`` from ``resolve_custom`` so the caller can fall back.
"""

from __future__ import annotations

import functools
import importlib
import logging
import math
import pkgutil
import threading
from collections import Counter
from collections.abc import Mapping, Sequence

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
    scale_commands,
)
from slideshape.engine.config import GeometryConfig
from slideshape.engine.registry import PresetRegistry, get_registry

logger = logging.getLogger(__name__)

_FALLBACK_PRESET = "rect"

# Presets with a known display kind but no dedicated formula (rendered as rect)
_KIND_ONLY = {
    "callout1": ShapeKindHint.CALLOUT,
    "callout2": ShapeKindHint.CALLOUT,
    "callout3": ShapeKindHint.CALLOUT,
}


def load_presets() -> None:
    """Import all preset modules so @preset decorators fire."""
    package = importlib.import_module("slideshape.engine.presets")
    for _, module_name, _ in pkgutil.iter_modules(package.__path__):
        importlib.import_module(f"slideshape.engine.presets.{module_name}")


def clean_adjustments(adjustments: Mapping[str, object] | None) -> dict[str, float]:
    """Drop adjustment values that are not finite numbers."""
    clean: dict[str, float] = {}
    for name, value in (adjustments or {}).items():
        try:
            ratio = float(value)  # type: ignore[arg-type]
        except (TypeError, ValueError):
            logger.debug("Ignoring non-numeric adjustment %s=%r", name, value)
            continue
        if not math.isfinite(ratio):
            logger.debug("Ignoring non-finite adjustment %s=%r", name, value)
            continue
        clean[name] = ratio
    return clean


def classify_custom_as_known_shape(
    commands: Sequence[PathCommand],
    design_size: tuple[float, float] | None = None,
    center_tolerance: float = 0.10,
) -> ShapeKindHint:
    """Best-guess kind for a custom geometry. Advisory only.

    - arcs on a square design box → ellipse
    - square box, four cubics, first move near the horizontal centre → ellipse
    - one move, three lines, one close → rect
    - anything else → custom
    """
    counts = Counter(type(cmd) for cmd in commands)
    square = design_size is not None and design_size[0] == design_size[1]

    if counts[ArcTo] > 0 and square:
        return ShapeKindHint.ELLIPSE

    if square and counts[CubicCurveTo] == 4:
        first_move = next((c for c in commands if isinstance(c, MoveTo)), None)
        if first_move is not None:
            width = design_size[0]
            if abs(first_move.x - width / 2) < width * center_tolerance:
                return ShapeKindHint.ELLIPSE

    if counts[MoveTo] == 1 and counts[LineTo] == 3 and counts[Close] == 1:
        return ShapeKindHint.RECT

    return ShapeKindHint.CUSTOM


class GeometryResolver:
    """Resolves preset ids or literal command lists into target-space paths."""

    def __init__(
        self,
        registry: PresetRegistry | None = None,
        config: GeometryConfig | None = None,
    ) -> None:
        if registry is None:
            load_presets()
            registry = get_registry()
        self.registry = registry
        self.config = config or GeometryConfig()
        self._fallbacks: Counter[str] = Counter()
        self._lock = threading.Lock()

    @property
    def fallback_count(self) -> int:
        """How many unknown preset ids have been replaced by rectangles."""
        return sum(self._fallbacks.values())

    @property
    def unknown_presets(self) -> dict[str, int]:
        return dict(self._fallbacks)

    def _target(self, target: BoundingBox | None) -> BoundingBox:
        if target is None:
            return BoundingBox.default(self.config.default_box_size)
        return target

    def _effective_adjustments(self, preset_id: str, defaults: Mapping[str, float], adjustments) -> dict[str, float]:
        merged = dict(defaults)
        if preset_id == "roundRect":
            merged["adj"] = self.config.round_rect_path_default_adj
        merged.update(clean_adjustments(adjustments))
        return merged

    def resolve_preset(
        self,
        preset_id: str,
        target: BoundingBox | None = None,
        adjustments: Mapping[str, float] | None = None,
    ) -> ResolvedPath:
        box = self._target(target)
        spec = self.registry.get(preset_id)
        if spec is None:
            with self._lock:
                self._fallbacks[preset_id] += 1
            logger.warning("Unknown preset %r, falling back to %s", preset_id, _FALLBACK_PRESET)
            spec = self.registry.get(_FALLBACK_PRESET)

        adj = self._effective_adjustments(spec.id, spec.defaults, adjustments)
        commands = spec.fn(box.width, box.height, adj)
        return ResolvedPath.build(commands, box, self.config.path_precision)

    def resolve_custom(
        self,
        commands: Sequence[PathCommand],
        design_size: tuple[float, float],
        target: BoundingBox | None = None,
    ) -> ResolvedPath | None:
        """Rescale design-space commands into the target box.

        Returns None when the design space has a zero dimension.
        """
        box = self._target(target)
        design_w, design_h = design_size
        if design_w <= 0 or design_h <= 0:
            logger.debug("Degenerate design size %sx%s", design_w, design_h)
            return None

        sx = box.width / design_w
        sy = box.height / design_h
        kept = [cmd for cmd in commands if not (isinstance(cmd, ArcTo) and (cmd.radius_x <= 0 or cmd.radius_y <= 0))]
        return ResolvedPath.build(scale_commands(kept, sx, sy), box, self.config.path_precision)

    def classify(self, commands: Sequence[PathCommand], design_size: tuple[float, float] | None) -> ShapeKindHint:
        return classify_custom_as_known_shape(commands, design_size, self.config.ellipse_center_tolerance)

    def shape_kind(self, preset_id: str | None) -> ShapeKindHint:
        """Coarse display kind for a preset id."""
        if not preset_id:
            return ShapeKindHint.CUSTOM
        spec = self.registry.get(preset_id)
        if spec is not None:
            return spec.kind
        return _KIND_ONLY.get(preset_id, ShapeKindHint.CUSTOM)

    def round_rect_keypoints(self, adjustments: Mapping[str, float] | None = None) -> list[float]:
        """Editor handle ratios for a rounded rectangle."""
        adj = clean_adjustments(adjustments)
        return [adj.get("adj", self.config.round_rect_keypoint_default_adj)]

    def resolve(self, request: ShapeGeometryRequest) -> ResolvedPath:
        """Custom geometry first, then the preset, then a rectangle."""
        if request.custom_commands is not None:
            path = self.resolve_custom(
                request.custom_commands,
                request.design_size or (0.0, 0.0),
                request.target,
            )
            if path is not None:
                return path
            logger.info("Custom geometry unusable, falling back to preset %r", request.preset_id)

        if request.preset_id is None:
            return self.resolve_preset(_FALLBACK_PRESET, request.target)
        return self.resolve_preset(request.preset_id, request.target, request.adjustments)


def create_resolver(config: GeometryConfig | None = None) -> GeometryResolver:
    """Factory function for creating a geometry resolver."""
    return GeometryResolver(config=config)


@functools.lru_cache(maxsize=1)
def default_resolver() -> GeometryResolver:
    """Shared resolver with default config, built on first use."""
    return create_resolver()


def map_preset_to_shape_kind(preset_id: str | None) -> ShapeKindHint:
    return default_resolver().shape_kind(preset_id)
