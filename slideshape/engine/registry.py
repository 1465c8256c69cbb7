"""Preset registry: every preset shape formula is a standalone function registered via decorator.

Usage:
    @preset(id="diamond", kind=ShapeKindHint.DIAMOND)
    def diamond(w: float, h: float, adj: Mapping[str, float]) -> list[PathCommand]:
        return [MoveTo(w / 2, 0), LineTo(w, h / 2), LineTo(w / 2, h), LineTo(0, h / 2), Close()]

Adding a new preset = writing one decorated function. Nothing else changes.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field

from slideshape.engine.commands import PathCommand, ShapeKindHint

logger = logging.getLogger(__name__)

Formula = Callable[[float, float, Mapping[str, float]], list[PathCommand]]


@dataclass
class PresetSpec:
    id: str
    fn: Formula
    kind: ShapeKindHint = ShapeKindHint.CUSTOM
    aliases: tuple[str, ...] = ()
    # Adjustment ratios used when the document supplies none
    defaults: dict[str, float] = field(default_factory=dict)
    description: str = ""


class PresetRegistry:
    """Registry of preset formulas, addressable by id or alias."""

    def __init__(self) -> None:
        self._presets: dict[str, PresetSpec] = {}
        self._names: dict[str, PresetSpec] = {}

    def register(self, spec: PresetSpec) -> None:
        for name in (spec.id, *spec.aliases):
            if name in self._names:
                raise ValueError(f"Duplicate preset ID: {name}")
        self._presets[spec.id] = spec
        for name in (spec.id, *spec.aliases):
            self._names[name] = spec
        logger.debug("Registered preset %s (%d aliases)", spec.id, len(spec.aliases))

    def get(self, name: str) -> PresetSpec | None:
        return self._names.get(name)

    def __contains__(self, name: str) -> bool:
        return name in self._names

    def all(self) -> list[PresetSpec]:
        return sorted(self._presets.values(), key=lambda s: s.id)

    def names(self) -> list[str]:
        return sorted(self._names)

    @property
    def count(self) -> int:
        return len(self._presets)


# Module-level singleton
_registry = PresetRegistry()


def get_registry() -> PresetRegistry:
    return _registry


def preset(
    *,
    id: str,
    kind: ShapeKindHint = ShapeKindHint.CUSTOM,
    aliases: tuple[str, ...] = (),
    defaults: dict[str, float] | None = None,
    description: str = "",
):
    """Decorator to register a preset formula."""

    def decorator(fn: Formula) -> Formula:
        spec = PresetSpec(
            id=id,
            fn=fn,
            kind=kind,
            aliases=aliases,
            defaults=defaults or {},
            description=description,
        )
        _registry.register(spec)
        return fn

    return decorator
