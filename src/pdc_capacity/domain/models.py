"""
Capacity Domain Models

Enterprise rules:
- No logic beyond trivial accessors
- No I/O
- No formatting
- Immutable containers (a new snapshot is produced on every edit)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Mapping, Optional, Tuple


class Flow(str, Enum):
    """Material-handling pipelines a station type belongs to."""
    PICK = "pick"
    PACK = "pack"
    INBOUND = "inbound"


FLOWS: Tuple[Flow, ...] = (Flow.PICK, Flow.PACK, Flow.INBOUND)

HOURS_PER_DAY = 24


class GroupingMode(str, Enum):
    """What a bucket's group key is derived from."""
    FLOW = "flow"
    STATION = "station"


class ViewMode(str, Enum):
    HOURLY = "hourly"
    SHIFT = "shift"
    DAY = "day"


# -------------------------------------------------
# Configuration records
# -------------------------------------------------

@dataclass(frozen=True)
class StationType:
    id: str
    name: str
    flow: Flow
    stations: int
    rate_per_hour: float
    shift_mix: Mapping[str, float] = field(default_factory=dict)
    enabled: bool = True

    def mix_for(self, shift_id: str) -> float:
        """Staffed fraction for a shift; shifts missing from the mix count as 0."""
        return float(self.shift_mix.get(shift_id, 0.0) or 0.0)

    def hourly_output(self, fraction: float) -> float:
        return self.rate_per_hour * self.stations * fraction


@dataclass(frozen=True)
class Shift:
    id: str
    name: str
    start: str          # "HH:MM"
    end: str            # "HH:MM"; equal to start means 24h coverage
    enabled: bool = True


@dataclass(frozen=True)
class Filters:
    flows: Mapping[Flow, bool]
    grouping: GroupingMode = GroupingMode.FLOW

    def is_visible(self, flow: Flow) -> bool:
        return bool(self.flows.get(flow, False))

    def is_active(self, station: StationType) -> bool:
        return station.enabled and self.is_visible(station.flow)

    def group_key(self, station: StationType) -> str:
        if self.grouping == GroupingMode.FLOW:
            return station.flow.value
        return station.name


# Per-flow, per-hour demand (index = hour of day)
DemandSeries = Mapping[Flow, Tuple[float, ...]]


@dataclass(frozen=True)
class Snapshot:
    """
    Whole configuration as one value.

    This is the unit that gets imported, exported and replaced.
    """
    station_types: Tuple[StationType, ...]
    shifts: Tuple[Shift, ...]
    demand: DemandSeries
    flow_visibility: Mapping[Flow, bool]

    def filters(self, grouping: GroupingMode = GroupingMode.FLOW) -> Filters:
        return Filters(flows=dict(self.flow_visibility), grouping=grouping)

    def enabled_shifts(self) -> List[Shift]:
        return [s for s in self.shifts if s.enabled]

    def enabled_station_types(self) -> List[StationType]:
        return [s for s in self.station_types if s.enabled]

    def station(self, station_id: str) -> Optional[StationType]:
        return next((s for s in self.station_types if s.id == station_id), None)


# -------------------------------------------------
# Aggregation result
# -------------------------------------------------

Bucket = Dict[str, float]


@dataclass(frozen=True)
class BucketSet:
    """
    Aggregated values for one granularity.

    Every bucket carries exactly the keys in group_keys, in that order.
    periods identifies what each bucket covers (hour index, shift id or "day").
    """
    group_keys: Tuple[str, ...]
    buckets: Tuple[Bucket, ...]
    labels: Tuple[str, ...]
    periods: Tuple[object, ...]

    def __len__(self) -> int:
        return len(self.buckets)

    def totals(self) -> List[float]:
        return [sum(b.get(k, 0.0) for k in self.group_keys) for b in self.buckets]

    def grand_total(self) -> float:
        return sum(self.totals())
