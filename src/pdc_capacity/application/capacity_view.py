"""
Capacity View Use Case

Purpose:
- Assemble everything one screen of the simulator shows for a snapshot:
  chart buckets, aligned demand, labels, utilization and summary cards
- Recomputed in full on every configuration change

Important:
- Reads the snapshot only; never mutates it
- No rendering here (see charts.* and presentation.*)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from pdc_capacity.charts.geometry import ChartLayout, layout_bucket_set
from pdc_capacity.charts.palette import PaletteCache
from pdc_capacity.domain.aggregation import compute_buckets, compute_day_total
from pdc_capacity.domain.demand import demand_series_for_view
from pdc_capacity.domain.models import BucketSet, GroupingMode, Snapshot, ViewMode
from pdc_capacity.domain.utilization import classify_status, view_utilization
from pdc_capacity.utils.config import config
from pdc_capacity.utils.logger import get_logger

logger = get_logger(__name__)

VALUE_LABELS = {
    ViewMode.HOURLY: "Per Hour Capacity",
    ViewMode.SHIFT: "Per Shift Capacity",
    ViewMode.DAY: "Per Day Capacity",
}

CAPTIONS = {
    ViewMode.HOURLY: "Per-hour capacity across enabled shifts",
    ViewMode.SHIFT: "Total capacity per enabled shift",
    ViewMode.DAY: "Total capacity for enabled shifts combined",
}


# ------------------------------------------------------------
# Result containers
# ------------------------------------------------------------
@dataclass(frozen=True)
class SummaryCards:
    total_day_capacity: float
    enabled_shifts: int
    total_shifts: int
    enabled_shift_names: Tuple[str, ...]
    enabled_station_types: int
    utilization: float

    @property
    def shift_names_text(self) -> str:
        return ", ".join(self.enabled_shift_names) or "None"


@dataclass(frozen=True)
class CapacityView:
    view: ViewMode
    grouping: GroupingMode
    buckets: BucketSet
    demand_series: Tuple[float, ...]
    value_label: str
    caption: str
    utilization: float
    status: str
    summary: SummaryCards


# ------------------------------------------------------------
# Use case
# ------------------------------------------------------------
def build_capacity_view(
    snapshot: Snapshot,
    view: ViewMode = ViewMode.HOURLY,
    grouping: GroupingMode = GroupingMode.FLOW,
) -> CapacityView:
    view = ViewMode(view)
    grouping = GroupingMode(grouping)
    filters = snapshot.filters(grouping)

    buckets = compute_buckets(view, snapshot.station_types, snapshot.shifts, filters)
    demand = demand_series_for_view(view, snapshot.demand, snapshot.flow_visibility, snapshot.shifts)
    utilization = view_utilization(demand, buckets)

    day = buckets if view == ViewMode.DAY else compute_day_total(
        snapshot.station_types, snapshot.shifts, filters
    )
    enabled_shifts = snapshot.enabled_shifts()

    summary = SummaryCards(
        total_day_capacity=day.grand_total(),
        enabled_shifts=len(enabled_shifts),
        total_shifts=len(snapshot.shifts),
        enabled_shift_names=tuple(s.name for s in enabled_shifts),
        enabled_station_types=len(snapshot.enabled_station_types()),
        utilization=utilization,
    )

    logger.info(
        "Capacity view built | view=%s grouping=%s buckets=%d keys=%d utilization=%.3f",
        view.value,
        grouping.value,
        len(buckets),
        len(buckets.group_keys),
        utilization,
    )

    return CapacityView(
        view=view,
        grouping=grouping,
        buckets=buckets,
        demand_series=tuple(demand),
        value_label=VALUE_LABELS[view],
        caption=CAPTIONS[view],
        utilization=utilization,
        status=classify_status(utilization),
        summary=summary,
    )


def layout_capacity_view(
    view: CapacityView,
    width: Optional[int] = None,
    height: Optional[int] = None,
    palette_cache: Optional[PaletteCache] = None,
) -> ChartLayout:
    """Chart layout for a view, sized from config unless overridden."""
    colors = palette_cache.colors_for(view.buckets.group_keys) if palette_cache else None
    return layout_bucket_set(
        view.buckets,
        view.demand_series,
        width=width or config.chart_width,
        height=height or config.chart_height,
        value_label=view.value_label,
        colors=colors,
        bar_fraction=config.bar_fraction,
        grid_ticks=config.grid_ticks,
    )
