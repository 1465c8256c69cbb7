"""ThemePalette: the twelve theme color slots with per-slot defaults."""

from __future__ import annotations

import enum
import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING

from slideshape.color.spec import normalize_hex

if TYPE_CHECKING:
    from slideshape.tree.node import TreeNode

logger = logging.getLogger(__name__)


class SchemeKey(str, enum.Enum):
    DK1 = "dk1"
    LT1 = "lt1"
    DK2 = "dk2"
    LT2 = "lt2"
    ACCENT1 = "accent1"
    ACCENT2 = "accent2"
    ACCENT3 = "accent3"
    ACCENT4 = "accent4"
    ACCENT5 = "accent5"
    ACCENT6 = "accent6"
    HLINK = "hlink"
    FOL_HLINK = "folHlink"


DEFAULTS: dict[str, str] = {
    "dk1": "000000",
    "lt1": "FFFFFF",
    "dk2": "000000",
    "lt2": "FFFFFF",
    "accent1": "000000",
    "accent2": "000000",
    "accent3": "000000",
    "accent4": "000000",
    "accent5": "000000",
    "accent6": "000000",
    "hlink": "0000FF",
    "folHlink": "800080",
}

# Text/background aliases used by shapes, resolved before palette lookup
SCHEME_ALIASES: dict[str, str] = {
    "tx1": "dk1",
    "tx2": "dk2",
    "bg1": "lt1",
    "bg2": "lt2",
}

_LONG_NAMES = {
    "hyperlink": "hlink",
    "followedHyperlink": "folHlink",
}


def normalize(value: str) -> str:
    """Upper-case 6-digit hex. A trailing alpha byte on 8-digit values is dropped."""
    text = normalize_hex(value)
    return text[:6] if len(text) == 8 else text


@dataclass(frozen=True)
class ThemePalette:
    """Read-only slot → hex mapping. Values are normalized and unknown slots dropped on construction."""

    colors: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        colors: dict[str, str] = {}
        for raw_key, raw_value in self.colors.items():
            name = raw_key.value if isinstance(raw_key, SchemeKey) else raw_key
            key = _LONG_NAMES.get(name, name)
            if key not in DEFAULTS:
                logger.debug("Ignoring unknown theme slot %r", raw_key)
                continue
            if not raw_value:
                continue
            colors[key] = normalize(str(raw_value))
        object.__setattr__(self, "colors", MappingProxyType(colors))

    def get(self, key: str | SchemeKey) -> str:
        name = key.value if isinstance(key, SchemeKey) else key
        found = self.colors.get(name)
        if found:
            return found
        return DEFAULTS.get(name, "000000")

    def as_dict(self) -> dict[str, str]:
        return {name: self.get(name) for name in DEFAULTS}

    @classmethod
    def from_mapping(cls, values: Mapping[str, str]) -> ThemePalette:
        return cls(values)

    @classmethod
    def from_tree(cls, node: TreeNode) -> ThemePalette:
        """Read a theme (or its clrScheme) node."""
        from slideshape.tree.node import find_node

        scheme = node if node.local_name == "clrScheme" else find_node(node, "clrScheme")
        if scheme is None:
            logger.debug("No clrScheme under %s, using defaults", node.name)
            return cls()

        values: dict[str, str] = {}
        for slot in scheme.children:
            if slot.local_name not in DEFAULTS:
                continue
            for child in slot.children:
                if child.local_name == "srgbClr" and child.attributes.get("val"):
                    values[slot.local_name] = child.attributes["val"]
                    break
                if child.local_name == "sysClr":
                    hint = child.attributes.get("lastClr")
                    if hint:
                        values[slot.local_name] = hint
                        break
        return cls.from_mapping(values)
