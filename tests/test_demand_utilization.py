import math

import pytest

from pdc_capacity.domain.aggregation import compute_by_shift, compute_day_total, compute_hourly
from pdc_capacity.domain.demand import (
    coerce_demand_row,
    day_demand,
    demand_series_for_view,
    hourly_demand,
    parse_demand_text,
    shift_demand,
)
from pdc_capacity.domain.models import FLOWS, Flow, Shift, StationType, ViewMode
from pdc_capacity.domain.utilization import (
    bucket_utilization,
    calculate_utilization,
    classify_status,
    view_utilization,
)


def _row(value):
    return tuple(float(value) for _ in range(24))


def test_coerce_demand_row_pads_truncates_and_zeroes():
    row = coerce_demand_row([1, "2", None, float("nan"), float("inf"), -3, "x"])
    assert len(row) == 24
    assert row[:7] == (1.0, 2.0, 0.0, 0.0, 0.0, 0.0, 0.0)
    assert all(v == 0.0 for v in row[7:])
    assert len(coerce_demand_row(range(40))) == 24
    assert coerce_demand_row(None) == (0.0,) * 24


def test_parse_demand_text():
    row = parse_demand_text("10, 20,,abc, 5")
    assert row[:5] == (10.0, 20.0, 0.0, 0.0, 5.0)
    assert len(row) == 24
    assert parse_demand_text("") == (0.0,) * 24


def test_hourly_demand_only_counts_visible_flows():
    demand = {Flow.PICK: _row(3), Flow.PACK: _row(5), Flow.INBOUND: _row(7)}
    visibility = {Flow.PICK: True, Flow.PACK: False, Flow.INBOUND: True}
    assert hourly_demand(demand, visibility) == [10.0] * 24


def test_hourly_demand_missing_flow_row():
    assert hourly_demand({Flow.PICK: _row(1)}, {f: True for f in FLOWS}) == [1.0] * 24


def test_shift_demand_uses_midpoint_buckets():
    hourly = [float(h) for h in range(24)]
    shifts = [
        Shift("A", "A", "06:00", "14:00"),
        Shift("B", "B", "14:00", "22:00", enabled=False),
        Shift("C", "C", "22:00", "06:00"),
    ]
    assert shift_demand(hourly, shifts) == [
        sum(range(6, 14)),
        sum([22, 23, 0, 1, 2, 3, 4, 5]),
    ]


def test_day_demand_ignores_shift_enablement():
    demand = {Flow.PICK: _row(2), Flow.PACK: _row(0), Flow.INBOUND: _row(0)}
    shifts = [Shift("A", "A", "06:00", "14:00", enabled=False)]
    visibility = {f: True for f in FLOWS}
    assert demand_series_for_view(ViewMode.DAY, demand, visibility, shifts) == [48.0]
    assert demand_series_for_view(ViewMode.SHIFT, demand, visibility, shifts) == []
    assert day_demand([1.0] * 24) == 24.0


@pytest.mark.parametrize(
    "demand, capacity, expected",
    [(50, 100, 0.5), (0, 100, 0.0), (100, 0, 0.0), (100, -5, 0.0), (0, 0, 0.0), (150, 100, 1.5)],
)
def test_calculate_utilization(demand, capacity, expected):
    assert calculate_utilization(demand, capacity) == expected


def test_utilization_never_nan_or_infinite():
    for demand, capacity in [(float("inf"), 1.0), (float("nan"), 1.0), (1.0, float("nan"))]:
        result = calculate_utilization(demand, capacity)
        assert math.isfinite(result) and result >= 0


def _capacity_setup():
    stations = [StationType("TE", "TE", Flow.PICK, 10, 120, {"A": 1})]
    shifts = [Shift("A", "A", "06:00", "14:00")]
    visibility = {f: True for f in FLOWS}
    return stations, shifts, visibility


def test_zero_demand_gives_zero_utilization(flow_filters):
    stations, shifts, visibility = _capacity_setup()
    buckets = compute_hourly(stations, shifts, flow_filters)
    demand = hourly_demand({f: _row(0) for f in FLOWS}, visibility)
    assert view_utilization(demand, buckets) == 0.0


def test_demand_equal_to_capacity_is_exactly_one(flow_filters):
    stations, shifts, visibility = _capacity_setup()
    buckets = compute_hourly(stations, shifts, flow_filters)
    demand_rows = {Flow.PICK: tuple(buckets.totals()), Flow.PACK: _row(0), Flow.INBOUND: _row(0)}

    hourly = hourly_demand(demand_rows, visibility)
    assert view_utilization(hourly, buckets) == 1.0

    by_shift = compute_by_shift(stations, shifts, flow_filters)
    assert view_utilization(shift_demand(hourly, shifts), by_shift) == 1.0

    day = compute_day_total(stations, shifts, flow_filters)
    assert view_utilization([day_demand(hourly)], day) == 1.0


def test_zero_capacity_view_is_zero_regardless_of_demand(flow_filters):
    stations = [StationType("TE", "TE", Flow.PICK, 0, 120, {"A": 1})]
    shifts = [Shift("A", "A", "06:00", "14:00")]
    buckets = compute_hourly(stations, shifts, flow_filters)
    assert view_utilization([500.0] * 24, buckets) == 0.0


def test_bucket_utilization_requires_alignment(flow_filters):
    stations, shifts, _ = _capacity_setup()
    buckets = compute_by_shift(stations, shifts, flow_filters)
    assert bucket_utilization([4800.0], buckets) == [0.5]
    assert bucket_utilization([1.0, 2.0], buckets) == []


@pytest.mark.parametrize("value, status", [(0.0, "OK"), (0.89, "OK"), (0.9, "WARNING"), (1.0, "OVER"), (2.5, "OVER")])
def test_classify_status(value, status):
    assert classify_status(value) == status
