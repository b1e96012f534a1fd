"""
Stacked Bar Geometry

Turns buckets (plus an optional demand series) into a fully positioned
chart: grid lines, stacked segments, overlay line/points, category labels
and legend. All coordinates are pixels inside the plot area, origin at the
plot's top-left; renderers translate by the margin.

Rules:
- One vertical scale for bars and overlay: max(1, max total, max demand)
- N equal bands, bar = fixed central fraction of its band
- Segments stack bottom-up in group-key order; non-positive values get
  zero height
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, Mapping, Optional, Sequence, Tuple

from pdc_capacity.charts.palette import DEMAND_COLOR, palette
from pdc_capacity.domain.models import BucketSet
from pdc_capacity.utils.formatting import fmt_number

DEFAULT_WIDTH = 980
DEFAULT_HEIGHT = 360
DEFAULT_BAR_FRACTION = 0.8
DEFAULT_GRID_TICKS = 5
CHART_TITLE = "Capacity"
DEMAND_LEGEND = "Demand"


@dataclass(frozen=True)
class Margin:
    top: float = 24
    right: float = 16
    bottom: float = 40
    left: float = 56


@dataclass(frozen=True)
class Segment:
    key: str
    value: float
    x: float
    y: float
    width: float
    height: float
    color: str


@dataclass(frozen=True)
class Stack:
    index: int
    label: str
    x: float
    width: float
    center_x: float
    total: float
    top_y: float
    segments: Tuple[Segment, ...]


@dataclass(frozen=True)
class GridLine:
    value: float
    y: float
    label: str


@dataclass(frozen=True)
class OverlayPoint:
    index: int
    value: float
    x: float
    y: float


@dataclass(frozen=True)
class Overlay:
    points: Tuple[OverlayPoint, ...]

    @property
    def path(self) -> str:
        """SVG path data through the points, M then L commands."""
        return " ".join(
            f"{'M' if i == 0 else 'L'}{_num(p.x)},{_num(p.y)}"
            for i, p in enumerate(self.points)
        )


@dataclass(frozen=True)
class CategoryLabel:
    index: int
    text: str
    x: float
    y: float


@dataclass(frozen=True)
class LegendEntry:
    key: str
    color: str


@dataclass(frozen=True)
class BandLayout:
    plot_width: float
    count: int
    bar_fraction: float = DEFAULT_BAR_FRACTION

    @property
    def band_width(self) -> float:
        return self.plot_width / self.count if self.count else 0.0

    @property
    def bar_width(self) -> float:
        return self.band_width * self.bar_fraction

    @property
    def padding(self) -> float:
        return (self.band_width - self.bar_width) / 2

    def band_start(self, i: int) -> float:
        return i * self.plot_width / self.count if self.count else 0.0

    def bar_x(self, i: int) -> float:
        return self.band_start(i) + self.padding

    def center_x(self, i: int) -> float:
        return self.bar_x(i) + self.bar_width / 2

    def index_at(self, x: float) -> Optional[int]:
        """Band under a plot-space x, or None outside the plot."""
        if not self.count or x < 0 or x >= self.plot_width:
            return None
        return min(int(x // self.band_width), self.count - 1)


@dataclass(frozen=True)
class ChartLayout:
    width: float
    height: float
    margin: Margin
    plot_width: float
    plot_height: float
    domain_max: float
    band: BandLayout
    group_keys: Tuple[str, ...]
    buckets: Tuple[Mapping[str, float], ...]
    stacks: Tuple[Stack, ...]
    grid_lines: Tuple[GridLine, ...]
    category_labels: Tuple[CategoryLabel, ...]
    overlay: Optional[Overlay]
    legend: Tuple[LegendEntry, ...]
    colors: Mapping[str, str]
    value_label: str = ""
    title: str = CHART_TITLE

    def y_for(self, value: float) -> float:
        return scale_y(value, self.domain_max, self.plot_height)


# ----------------------------
# Scale
# ----------------------------

def _num(v: float) -> str:
    return f"{v:.2f}".rstrip("0").rstrip(".") or "0"


def _finite(v) -> float:
    try:
        v = float(v)
    except (TypeError, ValueError):
        return 0.0
    return v if math.isfinite(v) else 0.0


def bucket_totals(buckets: Sequence[Mapping[str, float]], group_keys: Sequence[str]) -> List[float]:
    return [sum(_finite(b.get(k, 0)) for k in group_keys) for b in buckets]


def derive_domain_max(totals: Sequence[float], demand: Optional[Sequence[float]] = None) -> float:
    """Shared scale maximum; never below 1 so all-zero data keeps a usable axis."""
    return max([1.0, *totals, *(_finite(v) for v in demand or [])])


def scale_y(value: float, domain_max: float, plot_height: float) -> float:
    return plot_height - (value / domain_max) * plot_height


def segment_height(value: float, domain_max: float, plot_height: float) -> float:
    value = _finite(value)
    return 0.0 if value <= 0 else (value / domain_max) * plot_height


# ----------------------------
# Layout
# ----------------------------

def layout_stacked_chart(
    buckets: Sequence[Mapping[str, float]],
    group_keys: Sequence[str],
    labels: Sequence[str],
    demand_series: Optional[Sequence[float]] = None,
    *,
    width: float = DEFAULT_WIDTH,
    height: float = DEFAULT_HEIGHT,
    value_label: str = "",
    colors: Optional[Mapping[str, str]] = None,
    bar_fraction: float = DEFAULT_BAR_FRACTION,
    grid_ticks: int = DEFAULT_GRID_TICKS,
    margin: Margin = Margin(),
) -> ChartLayout:
    plot_w = width - margin.left - margin.right
    plot_h = height - margin.top - margin.bottom
    if plot_w <= 0 or plot_h <= 0:
        raise ValueError(f"Chart {width}x{height} leaves no room for the plot area")

    group_keys = tuple(group_keys)
    colors = dict(colors) if colors is not None else palette(group_keys)
    totals = bucket_totals(buckets, group_keys)
    demand = [_finite(v) for v in demand_series] if demand_series is not None else []
    domain_max = derive_domain_max(totals, demand)
    band = BandLayout(plot_w, len(buckets), bar_fraction)

    stacks: List[Stack] = []
    for i, bucket in enumerate(buckets):
        x = band.bar_x(i)
        cursor = plot_h
        segments = []
        for key in group_keys:
            value = _finite(bucket.get(key, 0))
            h = segment_height(value, domain_max, plot_h)
            cursor -= h
            segments.append(Segment(key, value, x, cursor, band.bar_width, h, colors.get(key, "#999999")))
        stacks.append(Stack(
            index=i,
            label=labels[i] if i < len(labels) else "",
            x=x,
            width=band.bar_width,
            center_x=band.center_x(i),
            total=totals[i],
            top_y=scale_y(totals[i], domain_max, plot_h),
            segments=tuple(segments),
        ))

    grid_lines = tuple(
        GridLine(v, scale_y(v, domain_max, plot_h), fmt_number(v))
        for v in (t * domain_max / grid_ticks for t in range(1, grid_ticks + 1))
    )

    category_labels = tuple(
        CategoryLabel(i, str(text), band.center_x(i), plot_h + 18)
        for i, text in enumerate(labels[: len(buckets)])
    )

    overlay = None
    if demand and len(demand) == len(buckets):
        overlay = Overlay(tuple(
            OverlayPoint(i, v, band.center_x(i), scale_y(v, domain_max, plot_h))
            for i, v in enumerate(demand)
        ))

    legend = [LegendEntry(k, colors.get(k, "#999999")) for k in group_keys]
    if overlay is not None:
        legend.append(LegendEntry(DEMAND_LEGEND, DEMAND_COLOR))

    return ChartLayout(
        width=width,
        height=height,
        margin=margin,
        plot_width=plot_w,
        plot_height=plot_h,
        domain_max=domain_max,
        band=band,
        group_keys=group_keys,
        buckets=tuple(dict(b) for b in buckets),
        stacks=tuple(stacks),
        grid_lines=grid_lines,
        category_labels=category_labels,
        overlay=overlay,
        legend=tuple(legend),
        colors=colors,
        value_label=value_label,
    )


def layout_bucket_set(
    bucket_set: BucketSet,
    demand_series: Optional[Sequence[float]] = None,
    **kwargs,
) -> ChartLayout:
    return layout_stacked_chart(
        bucket_set.buckets,
        bucket_set.group_keys,
        bucket_set.labels,
        demand_series,
        **kwargs,
    )
