"""
Pure edit helpers.

Each takes a Snapshot and returns a new one; nothing is mutated in place.
Numeric inputs from the editors are coerced the same way imports are.
"""

from __future__ import annotations

import math
from dataclasses import replace
from typing import Any

from pdc_capacity.domain.defaults import (
    NEW_STATION_COUNT,
    NEW_STATION_FLOW,
    NEW_STATION_MIX,
    NEW_STATION_NAME,
    NEW_STATION_RATE,
)
from pdc_capacity.domain.demand import parse_demand_text
from pdc_capacity.domain.models import Flow, Snapshot, StationType

STATION_FIELDS = {"name", "flow", "stations", "rate_per_hour", "enabled"}
SHIFT_FIELDS = {"name", "start", "end", "enabled"}


def _number(value: Any) -> float:
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0.0
    return number if math.isfinite(number) and number > 0 else 0.0


# ----------------------------
# Station types
# ----------------------------

def _next_station_id(snapshot: Snapshot) -> str:
    taken = {s.id for s in snapshot.station_types}
    n = len(snapshot.station_types) + 1
    while f"NEW-{n}" in taken:
        n += 1
    return f"NEW-{n}"


def add_station_type(snapshot: Snapshot) -> Snapshot:
    station = StationType(
        id=_next_station_id(snapshot),
        name=NEW_STATION_NAME,
        flow=NEW_STATION_FLOW,
        stations=NEW_STATION_COUNT,
        rate_per_hour=NEW_STATION_RATE,
        shift_mix=dict(NEW_STATION_MIX),
        enabled=True,
    )
    return replace(snapshot, station_types=snapshot.station_types + (station,))


def remove_station_type(snapshot: Snapshot, station_id: str) -> Snapshot:
    return replace(
        snapshot,
        station_types=tuple(s for s in snapshot.station_types if s.id != station_id),
    )


def update_station_type(snapshot: Snapshot, station_id: str, field: str, value: Any) -> Snapshot:
    if field not in STATION_FIELDS:
        raise KeyError(f"Unknown station type field: {field}")
    if field == "flow":
        value = Flow(value)
    elif field == "stations":
        value = int(_number(value))
    elif field == "rate_per_hour":
        value = _number(value)
    elif field == "enabled":
        value = bool(value)
    else:
        value = str(value)
    return replace(snapshot, station_types=tuple(
        replace(s, **{field: value}) if s.id == station_id else s
        for s in snapshot.station_types
    ))


def set_shift_mix(snapshot: Snapshot, station_id: str, shift_id: str, fraction: Any) -> Snapshot:
    fraction = min(1.0, _number(fraction))
    return replace(snapshot, station_types=tuple(
        replace(s, shift_mix={**s.shift_mix, shift_id: fraction}) if s.id == station_id else s
        for s in snapshot.station_types
    ))


# ----------------------------
# Shifts / filters / demand
# ----------------------------

def update_shift(snapshot: Snapshot, shift_id: str, field: str, value: Any) -> Snapshot:
    if field not in SHIFT_FIELDS:
        raise KeyError(f"Unknown shift field: {field}")
    value = bool(value) if field == "enabled" else str(value)
    return replace(snapshot, shifts=tuple(
        replace(sh, **{field: value}) if sh.id == shift_id else sh
        for sh in snapshot.shifts
    ))


def set_flow_visibility(snapshot: Snapshot, flow: Flow, visible: bool) -> Snapshot:
    return replace(snapshot, flow_visibility={**snapshot.flow_visibility, Flow(flow): bool(visible)})


def set_demand_text(snapshot: Snapshot, flow: Flow, text: str) -> Snapshot:
    return replace(snapshot, demand={**snapshot.demand, Flow(flow): parse_demand_text(text)})
