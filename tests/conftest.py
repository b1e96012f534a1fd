import os
import tempfile

# keep test runs from writing logs into the working tree / needing a display
os.environ.setdefault("LOG_FILE", os.path.join(tempfile.gettempdir(), "pdc_capacity_tests.log"))
os.environ.setdefault("MPLBACKEND", "Agg")

import pytest

from pdc_capacity.domain.models import FLOWS, Filters, Flow, GroupingMode, Shift, StationType


@pytest.fixture
def all_flows():
    return {flow: True for flow in FLOWS}


@pytest.fixture
def flow_filters(all_flows):
    return Filters(flows=all_flows, grouping=GroupingMode.FLOW)


@pytest.fixture
def station_filters(all_flows):
    return Filters(flows=all_flows, grouping=GroupingMode.STATION)


@pytest.fixture
def day_shifts():
    return [
        Shift("A", "A", "06:00", "14:00", True),
        Shift("B", "B", "14:00", "22:00", True),
        Shift("C", "C", "22:00", "06:00", True),
    ]


@pytest.fixture
def mixed_stations():
    return [
        StationType("TE", "TE", Flow.PICK, 10, 120, {"A": 1, "B": 0.5, "C": 0}),
        StationType("OSR", "OSR Standard", Flow.PICK, 20, 30, {"A": 1, "B": 1, "C": 0.25}),
        StationType("LPK", "Large Pack", Flow.PACK, 4, 60, {"A": 1, "B": 1, "C": 0}),
        StationType("INB", "Inbound Pallet", Flow.INBOUND, 6, 30, {"A": 0, "B": 1, "C": 1}),
    ]
