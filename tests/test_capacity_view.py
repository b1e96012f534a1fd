import pytest

from pdc_capacity.application.capacity_view import build_capacity_view, layout_capacity_view
from pdc_capacity.charts.palette import PaletteCache
from pdc_capacity.domain.defaults import default_snapshot
from pdc_capacity.domain.models import Flow, GroupingMode, ViewMode
from pdc_capacity.snapshot.edits import set_demand_text, set_flow_visibility, update_shift

# per-hour output of the seed station types, A and B staffed 16 hours in total
SEED_HOURLY = 10 * 120 + 154 * 33 + 48 * 19 + 36 * 22 + 10 * 60 + 6 * 30 + 8 * 70
SEED_DAY = SEED_HOURLY * 16


@pytest.mark.parametrize(
    "view, count, label",
    [
        (ViewMode.HOURLY, 24, "Per Hour Capacity"),
        (ViewMode.SHIFT, 2, "Per Shift Capacity"),
        (ViewMode.DAY, 1, "Per Day Capacity"),
    ],
)
def test_views_over_seed_configuration(view, count, label):
    result = build_capacity_view(default_snapshot(), view)
    assert len(result.buckets) == count
    assert len(result.demand_series) == count
    assert result.value_label == label
    assert result.summary.total_day_capacity == SEED_DAY
    assert result.utilization == 0.0
    assert result.status == "OK"


def test_summary_cards():
    summary = build_capacity_view(default_snapshot(), ViewMode.SHIFT).summary
    assert (summary.enabled_shifts, summary.total_shifts) == (2, 3)
    assert summary.shift_names_text == "A, B"
    assert summary.enabled_station_types == 7


def test_summary_with_no_enabled_shifts():
    snap = default_snapshot()
    for shift_id in ("A", "B"):
        snap = update_shift(snap, shift_id, "enabled", False)
    result = build_capacity_view(snap, ViewMode.SHIFT)
    assert len(result.buckets) == 0
    assert result.summary.shift_names_text == "None"
    assert result.summary.total_day_capacity == 0.0
    assert result.utilization == 0.0


def test_station_grouping_uses_names():
    result = build_capacity_view(default_snapshot(), ViewMode.DAY, GroupingMode.STATION)
    assert result.buckets.group_keys[:2] == ("TE", "OSR Standard")


def test_utilization_tracks_visible_demand():
    snap = default_snapshot()
    snap = set_demand_text(snap, Flow.PICK, ",".join([str(SEED_HOURLY)] * 24))
    result = build_capacity_view(snap, ViewMode.DAY)
    assert result.utilization == pytest.approx(24 / 16)
    assert result.status == "OVER"

    hidden = set_flow_visibility(snap, Flow.PICK, False)
    assert build_capacity_view(hidden, ViewMode.DAY).utilization == 0.0


def test_layout_uses_config_size_and_palette_cache():
    result = build_capacity_view(default_snapshot(), ViewMode.SHIFT)
    cache = PaletteCache()
    layout = layout_capacity_view(result, palette_cache=cache)
    assert (layout.width, layout.height) == (980, 360)
    assert layout.colors == cache.colors_for(result.buckets.group_keys)
    assert layout.overlay is not None
    assert layout.value_label == "Per Shift Capacity"
