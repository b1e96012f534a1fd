import pytest

from pdc_capacity.domain.time_math import (
    hour_in_shift,
    hour_label,
    hours_covered,
    is_overnight,
    to_minutes,
)

WHOLE_HOURS = [f"{h:02d}:00" for h in range(24)]


@pytest.mark.parametrize(
    "value, expected",
    [
        ("00:00", 0),
        ("06:30", 390),
        ("6:05", 365),
        ("23:59", 1439),
        ("24:00", 0),
        ("25:15", 75),
        ("07", 420),
        ("07:xx", 420),
        ("23:90", 1380),
        ("06:60", 360),
        ("06:-5", 360),
        ("", 0),
        ("garbage", 0),
    ],
)
def test_to_minutes(value, expected):
    assert to_minutes(value) == expected


@pytest.mark.parametrize("t", WHOLE_HOURS + ["07:30", "13:45"])
def test_equal_start_end_is_full_day(t):
    assert hours_covered(t, t) == 24
    assert all(hour_in_shift(h, t, t) for h in range(24))


def test_midnight_to_midnight_encoding_is_full_day():
    assert hours_covered("00:00", "24:00") == 24
    assert all(hour_in_shift(h, "00:00", "24:00") for h in range(24))


@pytest.mark.parametrize(
    "start, end",
    [(s, e) for s in range(24) for e in range(24) if s < e],
)
def test_day_window_hour_count_matches_duration(start, end):
    s, e = f"{start:02d}:00", f"{end:02d}:00"
    assert hours_covered(s, e) == (end - start)
    assert sum(hour_in_shift(h, s, e) for h in range(24)) == round(hours_covered(s, e))


def test_overnight_shift_hours():
    covered = [h for h in range(24) if hour_in_shift(h, "22:00", "06:00")]
    assert covered == [0, 1, 2, 3, 4, 5, 22, 23]
    assert hours_covered("22:00", "06:00") == 8
    assert is_overnight("22:00", "06:00")
    assert not is_overnight("06:00", "14:00")


def test_fractional_duration():
    assert hours_covered("06:15", "14:45") == pytest.approx(8.5)
    assert hours_covered("23:30", "00:15") == pytest.approx(0.75)


def test_midpoint_tie_break():
    # 06:30 boundary: the :30 mark of hour 6 belongs to the shift starting at 06:30
    assert hour_in_shift(6, "06:30", "14:00")
    assert not hour_in_shift(6, "06:31", "14:00")
    # ends at 14:30: hour 14's midpoint is excluded ([start, end))
    assert not hour_in_shift(14, "06:00", "14:30")
    assert hour_in_shift(13, "06:00", "14:30")


def test_hour_label():
    assert hour_label(0) == "00:00"
    assert hour_label(13) == "13:00"


@pytest.mark.parametrize("start, end", [("23:90", "00:00"), ("05:75", "05:00"), ("22:00", "06:99")])
def test_out_of_range_minutes_never_give_negative_duration(start, end):
    assert 0 < hours_covered(start, end) <= 24
