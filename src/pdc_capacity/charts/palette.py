# src/pdc_capacity/charts/palette.py
"""
Group-key colours.

Keys take palette entries by position and wrap around when there are more
keys than colours.
"""

from __future__ import annotations

from typing import Dict, Sequence, Tuple

BASE_PALETTE: Tuple[str, ...] = (
    "#2563eb",
    "#16a34a",
    "#dc2626",
    "#9333ea",
    "#ea580c",
    "#0891b2",
    "#4f46e5",
    "#059669",
    "#b91c1c",
    "#7c3aed",
)

DEMAND_COLOR = "#000000"
GRID_COLOR = "#e5e7eb"
AXIS_TEXT_COLOR = "#6b7280"
LABEL_TEXT_COLOR = "#374151"
TITLE_TEXT_COLOR = "#111827"


def palette(keys: Sequence[str]) -> Dict[str, str]:
    return {k: BASE_PALETTE[i % len(BASE_PALETTE)] for i, k in enumerate(keys)}


class PaletteCache:
    """
    Holds the last mapping and only rebuilds it when the key list changes,
    so repeated renders with the same keys share one mapping.
    """

    def __init__(self):
        self._keys: Tuple[str, ...] | None = None
        self._colors: Dict[str, str] = {}

    def colors_for(self, keys: Sequence[str]) -> Dict[str, str]:
        keys = tuple(keys)
        if keys != self._keys:
            self._keys = keys
            self._colors = palette(keys)
        return self._colors
