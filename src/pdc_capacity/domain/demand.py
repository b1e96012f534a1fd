"""
Demand Projection

Folds per-flow hourly demand into the same periods the capacity views use.
Shift demand is bucketed with the same hour-midpoint rule as shift capacity,
so the two stay comparable.
"""

import math
from typing import Iterable, List, Mapping, Optional, Sequence, Tuple

from pdc_capacity.domain.models import FLOWS, HOURS_PER_DAY, DemandSeries, Flow, Shift, ViewMode
from pdc_capacity.domain.time_math import hour_in_shift


# ----------------------------
# Boundary coercion
# ----------------------------

def coerce_demand_value(value) -> float:
    """Finite non-negative float, or 0.0 for anything else."""
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0.0
    if not math.isfinite(number) or number < 0:
        return 0.0
    return number


def coerce_demand_row(values: Optional[Iterable]) -> Tuple[float, ...]:
    """Exactly 24 values; short rows are padded with zeros, long rows cut."""
    row = list(values or [])[:HOURS_PER_DAY]
    row += [0.0] * (HOURS_PER_DAY - len(row))
    return tuple(coerce_demand_value(v) for v in row)


def parse_demand_text(text: str) -> Tuple[float, ...]:
    """Comma-separated hourly values as typed into the demand editor."""
    parts = [p.strip() for p in str(text or "").split(",")]
    return coerce_demand_row(p or 0 for p in parts)


def zero_demand() -> DemandSeries:
    return {flow: (0.0,) * HOURS_PER_DAY for flow in FLOWS}


# ----------------------------
# Projection
# ----------------------------

def hourly_demand(demand: DemandSeries, visibility: Mapping[Flow, bool]) -> List[float]:
    """Per-hour demand summed over visible flows only."""
    totals = [0.0] * HOURS_PER_DAY
    for flow in FLOWS:
        if not visibility.get(flow, False):
            continue
        row = coerce_demand_row(demand.get(flow))
        for hour, value in enumerate(row):
            totals[hour] += value
    return totals


def shift_demand(hourly: Sequence[float], shifts: Sequence[Shift]) -> List[float]:
    """Demand per enabled shift, in configured order."""
    out = []
    for sh in shifts:
        if not sh.enabled:
            continue
        out.append(sum(
            hourly[h] for h in range(HOURS_PER_DAY) if hour_in_shift(h, sh.start, sh.end)
        ))
    return out


def day_demand(hourly: Sequence[float]) -> float:
    """Whole-day demand; independent of which shifts are enabled."""
    return sum(hourly)


def demand_series_for_view(
    view: ViewMode,
    demand: DemandSeries,
    visibility: Mapping[Flow, bool],
    shifts: Sequence[Shift],
) -> List[float]:
    """Demand aligned one-to-one with the buckets of the given view."""
    hourly = hourly_demand(demand, visibility)
    view = ViewMode(view)
    if view == ViewMode.HOURLY:
        return hourly
    if view == ViewMode.SHIFT:
        return shift_demand(hourly, shifts)
    return [day_demand(hourly)]
