"""
Pointer lookup for chart tooltips.

Read-only: works off a finished ChartLayout and never touches the buckets.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from pdc_capacity.charts.geometry import ChartLayout


@dataclass(frozen=True)
class Tooltip:
    index: int
    label: str
    rows: Tuple[Tuple[str, float], ...]
    total: float
    demand: Optional[float]
    # anchor in chart pixels: bar centre, top of the stack
    anchor_x: float
    anchor_y: float


def hovered_index(layout: ChartLayout, x: float, y: float) -> Optional[int]:
    """
    Bucket whose bar is under the pointer (chart pixel coordinates).

    Only the bar's own column counts; the padding between bars and the
    margins return None.
    """
    px = x - layout.margin.left
    py = y - layout.margin.top
    if py < 0 or py > layout.plot_height:
        return None
    i = layout.band.index_at(px)
    if i is None:
        return None
    bar_x = layout.band.bar_x(i)
    if not bar_x <= px < bar_x + layout.band.bar_width:
        return None
    return i


def tooltip_for(layout: ChartLayout, index: int) -> Tooltip:
    stack = layout.stacks[index]
    bucket = layout.buckets[index]
    demand = None
    if layout.overlay is not None:
        demand = layout.overlay.points[index].value
    return Tooltip(
        index=index,
        label=stack.label,
        rows=tuple((k, float(bucket.get(k, 0) or 0)) for k in layout.group_keys),
        total=stack.total,
        demand=demand,
        anchor_x=stack.center_x + layout.margin.left,
        anchor_y=stack.top_y + layout.margin.top,
    )


def tooltip_at(layout: ChartLayout, x: float, y: float) -> Optional[Tooltip]:
    i = hovered_index(layout, x, y)
    return tooltip_for(layout, i) if i is not None else None
