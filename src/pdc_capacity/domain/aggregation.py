"""
Capacity Aggregation

One fold shared by the hourly, per-shift and day-total views. A view only
decides which periods exist and how many hours of a shift land in each
period; the rest (active station filter, group keys, mix fractions) is
common.

Contribution of one station type on one shift to one period:
    rate_per_hour * stations * mix_fraction * hours_in_period
"""

from typing import Callable, Dict, List, Sequence, Tuple

from pdc_capacity.domain.models import (
    HOURS_PER_DAY,
    BucketSet,
    Filters,
    Shift,
    StationType,
    ViewMode,
)
from pdc_capacity.domain.time_math import hour_in_shift, hour_label, hours_covered

DAY_LABEL = "Day Total"

# (shift, period) -> hours of that shift falling in the period
HoursInPeriod = Callable[[Shift, object], float]


# ----------------------------
# Group keys
# ----------------------------

def active_station_types(
    station_types: Sequence[StationType], filters: Filters
) -> List[StationType]:
    return [s for s in station_types if filters.is_active(s)]


def derive_group_keys(
    station_types: Sequence[StationType], filters: Filters
) -> Tuple[str, ...]:
    """Keys of the active station types, first-encounter order, no duplicates."""
    keys = dict.fromkeys(filters.group_key(s) for s in active_station_types(station_types, filters))
    return tuple(keys)


# ----------------------------
# Fold
# ----------------------------

def aggregate(
    station_types: Sequence[StationType],
    shifts: Sequence[Shift],
    filters: Filters,
    periods: Sequence[object],
    hours_in_period: HoursInPeriod,
) -> Tuple[Tuple[str, ...], List[Dict[str, float]]]:
    group_keys = derive_group_keys(station_types, filters)
    buckets = [dict.fromkeys(group_keys, 0.0) for _ in periods]

    for st in active_station_types(station_types, filters):
        key = filters.group_key(st)
        for sh in shifts:
            if not sh.enabled:
                continue
            frac = st.mix_for(sh.id)
            if frac <= 0:
                continue
            per_hour = st.hourly_output(frac)
            for i, period in enumerate(periods):
                hours = hours_in_period(sh, period)
                if hours:
                    buckets[i][key] += per_hour * hours

    return group_keys, buckets


def _hourly_weight(shift: Shift, hour: object) -> float:
    return 1.0 if hour_in_shift(hour, shift.start, shift.end) else 0.0


def _shift_weight(shift: Shift, period: object) -> float:
    return hours_covered(shift.start, shift.end) if shift is period else 0.0


def _day_weight(shift: Shift, _period: object) -> float:
    return hours_covered(shift.start, shift.end)


# ----------------------------
# Views
# ----------------------------

def compute_hourly(
    station_types: Sequence[StationType],
    shifts: Sequence[Shift],
    filters: Filters,
) -> BucketSet:
    hours = tuple(range(HOURS_PER_DAY))
    group_keys, buckets = aggregate(station_types, shifts, filters, hours, _hourly_weight)
    return BucketSet(
        group_keys=group_keys,
        buckets=tuple(buckets),
        labels=tuple(hour_label(h) for h in hours),
        periods=hours,
    )


def compute_by_shift(
    station_types: Sequence[StationType],
    shifts: Sequence[Shift],
    filters: Filters,
) -> BucketSet:
    """One bucket per enabled shift, configured order; disabled shifts are absent."""
    enabled = [s for s in shifts if s.enabled]
    group_keys, buckets = aggregate(station_types, enabled, filters, enabled, _shift_weight)
    return BucketSet(
        group_keys=group_keys,
        buckets=tuple(buckets),
        labels=tuple(s.name for s in enabled),
        periods=tuple(s.id for s in enabled),
    )


def compute_day_total(
    station_types: Sequence[StationType],
    shifts: Sequence[Shift],
    filters: Filters,
) -> BucketSet:
    group_keys, buckets = aggregate(station_types, shifts, filters, ("day",), _day_weight)
    return BucketSet(
        group_keys=group_keys,
        buckets=tuple(buckets),
        labels=(DAY_LABEL,),
        periods=("day",),
    )


_COMPUTATIONS = {
    ViewMode.HOURLY: compute_hourly,
    ViewMode.SHIFT: compute_by_shift,
    ViewMode.DAY: compute_day_total,
}


def compute_buckets(
    view: ViewMode,
    station_types: Sequence[StationType],
    shifts: Sequence[Shift],
    filters: Filters,
) -> BucketSet:
    return _COMPUTATIONS[ViewMode(view)](station_types, shifts, filters)
