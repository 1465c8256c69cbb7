"""Named preset colors (CSS / X11 table).

The table is matplotlib's CSS4 name set. The source format abbreviates some
names ("dkBlue", "ltGray", "medSeaGreen"); ``lookup_preset`` expands those
prefixes before the table lookup.
"""

from __future__ import annotations

import matplotlib.colors as mcolors

# lower-case name → upper-case RRGGBB
PRESET_COLORS: dict[str, str] = {
    name: value.lstrip("#").upper() for name, value in mcolors.CSS4_COLORS.items()
}


_PREFIXES = (("dk", "dark"), ("lt", "light"), ("med", "medium"))


def lookup_preset(name: str) -> str | None:
    """Hex for a preset color name, or None when the name is unknown."""
    key = name.strip()
    found = PRESET_COLORS.get(key.lower())
    if found is not None:
        return found
    for short, full in _PREFIXES:
        if key.startswith(short) and len(key) > len(short) and key[len(short)].isupper():
            return PRESET_COLORS.get((full + key[len(short):]).lower())
    return None
