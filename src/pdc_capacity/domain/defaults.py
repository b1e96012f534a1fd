"""
Seed configuration used when nothing has been imported, and as the
fallback for any key an imported snapshot leaves out.
"""

from typing import Dict, Tuple

from pdc_capacity.domain.demand import zero_demand
from pdc_capacity.domain.models import FLOWS, Flow, Shift, Snapshot, StationType

DEFAULT_SHIFTS: Tuple[Shift, ...] = (
    Shift(id="A", name="A", start="06:00", end="14:00", enabled=True),
    Shift(id="B", name="B", start="14:00", end="22:00", enabled=True),
    Shift(id="C", name="C", start="22:00", end="06:00", enabled=False),
)

_DAY_MIX = {"A": 1.0, "B": 1.0, "C": 0.0}
_INBOUND_MIX = {"A": 1.0, "B": 1.0, "C": 0.3}

DEFAULT_STATION_TYPES: Tuple[StationType, ...] = (
    StationType("TE", "TE", Flow.PICK, 10, 120, dict(_DAY_MIX)),
    StationType("OSR", "OSR Standard", Flow.PICK, 154, 33, dict(_DAY_MIX)),
    StationType("DKR", "DKR", Flow.PICK, 48, 19, dict(_DAY_MIX)),
    StationType("MSL", "Pick", Flow.PICK, 36, 22, dict(_DAY_MIX)),
    StationType("LPK", "Large Pack", Flow.PACK, 10, 60, dict(_DAY_MIX)),
    StationType("INB-PAL", "Inbound Pallet", Flow.INBOUND, 6, 30, dict(_INBOUND_MIX)),
    StationType("INB-SM", "Inbound Small Pack", Flow.INBOUND, 8, 70, dict(_INBOUND_MIX)),
)

# Template for a freshly added station type
NEW_STATION_NAME = "New Station"
NEW_STATION_FLOW = Flow.PICK
NEW_STATION_COUNT = 1
NEW_STATION_RATE = 60.0
NEW_STATION_MIX = {"A": 1.0, "B": 0.0, "C": 0.0}


def default_visibility() -> Dict[Flow, bool]:
    return {flow: True for flow in FLOWS}


def default_snapshot() -> Snapshot:
    return Snapshot(
        station_types=DEFAULT_STATION_TYPES,
        shifts=DEFAULT_SHIFTS,
        demand=zero_demand(),
        flow_visibility=default_visibility(),
    )
