"""
Utilization

demand / capacity for a view, guarded so the display layer never sees
NaN or infinity.
"""

import math
from typing import Sequence

from pdc_capacity.domain.models import BucketSet

OVER = "OVER"
WARNING = "WARNING"
OK = "OK"


def calculate_utilization(demand: float, capacity: float) -> float:
    """
    Utilization ratio; 0.0 whenever capacity is not strictly positive.
    """
    if not capacity or capacity <= 0:
        return 0.0
    ratio = demand / capacity
    return ratio if math.isfinite(ratio) and ratio > 0 else 0.0


def view_utilization(demand_series: Sequence[float], buckets: BucketSet) -> float:
    return calculate_utilization(sum(demand_series), sum(buckets.totals()))


def bucket_utilization(demand_series: Sequence[float], buckets: BucketSet) -> list:
    """Per-bucket ratios; empty when the series does not line up with the buckets."""
    if len(demand_series) != len(buckets):
        return []
    return [calculate_utilization(d, c) for d, c in zip(demand_series, buckets.totals())]


def classify_status(utilization: float) -> str:
    """
    - OVER >= 100%
    - WARNING >= 90%
    - OK otherwise
    """
    if utilization >= 1.0:
        return OVER
    if utilization >= 0.9:
        return WARNING
    return OK
