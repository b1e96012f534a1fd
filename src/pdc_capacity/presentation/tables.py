# src/pdc_capacity/presentation/tables.py
"""
Tabular form of a CapacityView (pandas).

One row per bucket: a column per group key, then Total, Demand and
Utilization.
"""

from __future__ import annotations

from pathlib import Path

import pandas as pd

from pdc_capacity.application.capacity_view import CapacityView
from pdc_capacity.domain.utilization import bucket_utilization
from pdc_capacity.utils.logger import get_logger

log = get_logger(__name__)

TOTAL_COL = "Total"
DEMAND_COL = "Demand"
UTIL_COL = "Utilization"


def view_to_frame(view: CapacityView) -> pd.DataFrame:
    b = view.buckets
    df = pd.DataFrame(
        {k: [bucket.get(k, 0.0) for bucket in b.buckets] for k in b.group_keys},
        index=pd.Index(list(b.labels), name="Period"),
        dtype=float,
    )
    df[TOTAL_COL] = b.totals()

    utilization = bucket_utilization(view.demand_series, b)
    if utilization:
        df[DEMAND_COL] = list(view.demand_series)
        df[UTIL_COL] = utilization
    return df


def export_csv(view: CapacityView, output_path: Path | str) -> Path:
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    view_to_frame(view).to_csv(output_path, float_format="%.2f")
    log.info("Capacity table exported: %s", output_path)
    return output_path
