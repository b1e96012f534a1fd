"""
Snapshot wire schema.

JSON keys follow the exported config file: stationTypes, shiftCfg,
demandData, flowOn (camelCase inside records). Parsing rules:
- missing top-level keys fall back to the seed configuration
- unknown keys are ignored
- bad numbers are coerced to 0, fractions clamped to [0, 1]
- structurally wrong input (wrong types, unknown flow, missing id)
  fails validation as a whole
"""

from __future__ import annotations

import math
from typing import Any, Dict, List, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from pdc_capacity.domain.defaults import DEFAULT_SHIFTS, DEFAULT_STATION_TYPES, default_visibility
from pdc_capacity.domain.demand import coerce_demand_row
from pdc_capacity.domain.models import FLOWS, Flow, Shift, Snapshot, StationType


def _finite_non_negative(value: Any) -> float:
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0.0
    if not math.isfinite(number) or number < 0:
        return 0.0
    return number


class _WireModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class StationTypeModel(_WireModel):
    id: str
    name: Optional[str] = None
    flow: Flow
    stations: int = 0
    rate_per_hour: float = Field(0.0, alias="ratePerHour")
    shift_mix: Dict[str, float] = Field(default_factory=dict, alias="shiftMix")
    enabled: bool = True

    @field_validator("stations", mode="before")
    @classmethod
    def _coerce_stations(cls, v):
        return int(_finite_non_negative(v))

    @field_validator("rate_per_hour", mode="before")
    @classmethod
    def _coerce_rate(cls, v):
        return _finite_non_negative(v)

    @field_validator("shift_mix", mode="before")
    @classmethod
    def _coerce_mix(cls, v):
        if v is None:
            return {}
        if not isinstance(v, dict):
            raise ValueError("shiftMix must be an object of shift id -> fraction")
        return {str(k): min(1.0, _finite_non_negative(f)) for k, f in v.items()}

    def to_domain(self) -> StationType:
        return StationType(
            id=self.id,
            name=self.name if self.name is not None else self.id,
            flow=self.flow,
            stations=self.stations,
            rate_per_hour=self.rate_per_hour,
            shift_mix=dict(self.shift_mix),
            enabled=self.enabled,
        )

    @classmethod
    def from_domain(cls, st: StationType) -> "StationTypeModel":
        return cls(
            id=st.id,
            name=st.name,
            flow=st.flow,
            stations=st.stations,
            rate_per_hour=st.rate_per_hour,
            shift_mix=dict(st.shift_mix),
            enabled=st.enabled,
        )


class ShiftModel(_WireModel):
    id: str
    name: Optional[str] = None
    start: str
    end: str
    enabled: bool = True

    def to_domain(self) -> Shift:
        return Shift(
            id=self.id,
            name=self.name if self.name is not None else self.id,
            start=self.start,
            end=self.end,
            enabled=self.enabled,
        )

    @classmethod
    def from_domain(cls, sh: Shift) -> "ShiftModel":
        return cls(id=sh.id, name=sh.name, start=sh.start, end=sh.end, enabled=sh.enabled)


class SnapshotModel(_WireModel):
    station_types: Optional[List[StationTypeModel]] = Field(None, alias="stationTypes")
    shifts: Optional[List[ShiftModel]] = Field(
        None,
        validation_alias=AliasChoices("shiftCfg", "shifts"),
        serialization_alias="shiftCfg",
    )
    demand_data: Optional[Dict[str, Optional[List[Any]]]] = Field(None, alias="demandData")
    flow_on: Optional[Dict[str, bool]] = Field(
        None,
        validation_alias=AliasChoices("flowOn", "flowVisibility"),
        serialization_alias="flowOn",
    )

    def to_domain(self) -> Snapshot:
        station_types = (
            tuple(s.to_domain() for s in self.station_types)
            if self.station_types is not None
            else DEFAULT_STATION_TYPES
        )
        shifts = (
            tuple(s.to_domain() for s in self.shifts)
            if self.shifts is not None
            else DEFAULT_SHIFTS
        )

        raw_demand = self.demand_data or {}
        demand = {flow: coerce_demand_row(raw_demand.get(flow.value)) for flow in FLOWS}

        visibility = default_visibility()
        for key, on in (self.flow_on or {}).items():
            if key in {f.value for f in FLOWS}:
                visibility[Flow(key)] = on

        return Snapshot(
            station_types=station_types,
            shifts=shifts,
            demand=demand,
            flow_visibility=visibility,
        )

    @classmethod
    def from_domain(cls, snapshot: Snapshot) -> "SnapshotModel":
        return cls(
            station_types=[StationTypeModel.from_domain(s) for s in snapshot.station_types],
            shifts=[ShiftModel.from_domain(s) for s in snapshot.shifts],
            demand_data={f.value: list(snapshot.demand.get(f, ())) for f in FLOWS},
            flow_on={f.value: bool(snapshot.flow_visibility.get(f, False)) for f in FLOWS},
        )


def snapshot_to_dict(snapshot: Snapshot) -> Dict[str, Any]:
    return SnapshotModel.from_domain(snapshot).model_dump(mode="json", by_alias=True)
