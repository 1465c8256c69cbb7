"""Engine configuration: defaults the geometry and color resolvers fall back on."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from slideshape.config import Settings

# Fallback box when the caller does not know a shape's extent.
DEFAULT_BOX_SIZE = 200.0

# Two observed call sites disagree on the roundRect default. The path formula
# uses 0.1, the editor keypoint handle uses 0.5. Kept separate until the host
# format default is confirmed.
ROUND_RECT_PATH_DEFAULT_ADJ = 0.1
ROUND_RECT_KEYPOINT_DEFAULT_ADJ = 0.5


class ModifierOrder(str, enum.Enum):
    CANONICAL = "canonical"
    ENCOUNTER = "encounter"


@dataclass(frozen=True)
class GeometryConfig:
    """Defaults for preset formulas and custom-geometry scaling."""

    default_box_size: float = DEFAULT_BOX_SIZE
    round_rect_path_default_adj: float = ROUND_RECT_PATH_DEFAULT_ADJ
    round_rect_keypoint_default_adj: float = ROUND_RECT_KEYPOINT_DEFAULT_ADJ

    # Classifier: first move within 10% of the horizontal centre
    ellipse_center_tolerance: float = 0.10

    # Path serialization precision (decimals)
    path_precision: int = 2

    @classmethod
    def from_settings(cls, settings: Settings) -> GeometryConfig:
        return cls(
            default_box_size=settings.default_box_size,
            round_rect_path_default_adj=settings.round_rect_path_default_adj,
            round_rect_keypoint_default_adj=settings.round_rect_keypoint_default_adj,
            path_precision=settings.path_precision,
        )


@dataclass(frozen=True)
class ColorConfig:
    """Controls how modifier chains are applied."""

    modifier_order: ModifierOrder = ModifierOrder.CANONICAL
    # Reproduce the legacy no-op behavior for hueMod/satMod
    hue_sat_passthrough: bool = False

    @classmethod
    def from_settings(cls, settings: Settings) -> ColorConfig:
        return cls(
            modifier_order=ModifierOrder(settings.modifier_order.lower()),
            hue_sat_passthrough=settings.hue_sat_passthrough,
        )
