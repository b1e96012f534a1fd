from __future__ import annotations

import io
from typing import List, Sequence

from pdc_capacity.application.capacity_view import CapacityView
from pdc_capacity.presentation.tables import UTIL_COL, view_to_frame
from pdc_capacity.utils.formatting import fmt_number, fmt_percent


def _format_table(rows: Sequence[Sequence[object]], headers: List[str]) -> str:
    output = io.StringIO()
    rows = list(rows)

    widths = [len(h) for h in headers]
    for row in rows:
        for i, v in enumerate(row):
            widths[i] = max(widths[i], len(str(v)))

    def fmt(r):
        return " ".join(str(r[i]).rjust(widths[i]) if i else str(r[i]).ljust(widths[i]) for i in range(len(headers)))

    print(fmt(headers), file=output)
    print(" ".join("-" * w for w in widths), file=output)
    for row in rows:
        print(fmt(row), file=output)

    return output.getvalue()


def render_capacity_view(view: CapacityView) -> str:
    s = view.summary

    out = io.StringIO()

    print("=" * 80, file=out)
    print(f"PDC CAPACITY - {view.value_label.upper()}", file=out)
    print("=" * 80, file=out)
    print(f"Grouping: {view.grouping.value}", file=out)
    print(view.caption, file=out)
    print(file=out)

    print(f"Day Capacity (All Visible): {fmt_number(s.total_day_capacity)}", file=out)
    print(f"Enabled Shifts:             {s.enabled_shifts} / {s.total_shifts} ({s.shift_names_text})", file=out)
    print(f"Enabled Station Types:      {s.enabled_station_types}", file=out)
    print(f"Utilization:                {fmt_percent(view.utilization)} → {view.status}", file=out)
    print(file=out)

    df = view_to_frame(view)
    headers = [df.index.name] + [str(c) for c in df.columns]
    rows = []
    for label, row in df.iterrows():
        cells = [label]
        for col, value in row.items():
            cells.append(fmt_percent(value) if col == UTIL_COL else fmt_number(value))
        rows.append(cells)

    if rows:
        print(_format_table(rows, headers), file=out, end="")
    else:
        print("No enabled shifts or visible station types.", file=out)

    print("=" * 80, file=out)
    return out.getvalue()
