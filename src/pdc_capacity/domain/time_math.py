"""
Clock and shift-window arithmetic.

Times are "H:MM" / "HH:MM" strings. Everything is computed in minutes since
midnight, with the hour taken mod 24 so "24:00" and "00:00" are the same
instant.

Hour membership uses the midpoint of the hour (minute 30). A shift boundary
that is not on :30 therefore assigns each straddled hour wholly to whichever
side holds the :30 mark; partial hours are never apportioned.
"""

from typing import Optional

MINUTES_PER_DAY = 24 * 60


def _to_int(part: str) -> Optional[int]:
    try:
        return int(part.strip())
    except (TypeError, ValueError):
        return None


def to_minutes(hhmm: str) -> int:
    """
    Minute offset of a clock time within the day.

    Unparsable or out-of-range (not 0..59) minutes count as 0; an
    unparsable hour degrades the whole value to 0 rather than raising.
    """
    parts = str(hhmm).split(":")
    hours = _to_int(parts[0])
    if hours is None:
        return 0
    minutes = _to_int(parts[1]) if len(parts) > 1 else None
    if minutes is None or not 0 <= minutes < 60:
        minutes = 0
    return (hours % 24) * 60 + minutes


def hour_in_shift(hour: int, start: str, end: str) -> bool:
    """True if the midpoint of `hour` falls inside the [start, end) window."""
    mid = hour * 60 + 30
    s = to_minutes(start)
    e = to_minutes(end)
    if s == e:
        return True
    if s < e:
        return s <= mid < e
    # overnight: wraps past midnight
    return mid >= s or mid < e


def hours_covered(start: str, end: str) -> float:
    s = to_minutes(start)
    e = to_minutes(end)
    if s == e:
        return 24.0
    if s < e:
        return (e - s) / 60
    return (MINUTES_PER_DAY - s + e) / 60


def is_overnight(start: str, end: str) -> bool:
    return to_minutes(start) > to_minutes(end)


def hour_label(hour: int) -> str:
    return f"{hour:02d}:00"
