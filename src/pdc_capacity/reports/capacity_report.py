# src/pdc_capacity/reports/capacity_report.py
"""
Capacity Report: one landscape page per view

Sections:
- Summary cards (day capacity, shifts, station types, utilization)
- Stacked capacity chart with demand overlay (matplotlib PNG)
- Bucket table (group keys, total, demand, utilization)
"""

from __future__ import annotations

from datetime import date
from pathlib import Path

import pandas as pd
from reportlab.lib import colors
from reportlab.lib.pagesizes import LETTER, landscape
from reportlab.lib.units import inch
from reportlab.platypus import Image, Paragraph, Spacer, Table, TableStyle

from pdc_capacity.application.capacity_view import CapacityView, layout_capacity_view
from pdc_capacity.charts.renderer import render_png
from pdc_capacity.presentation.tables import UTIL_COL, view_to_frame
from pdc_capacity.reports.builder import PageFrame, build_pdf
from pdc_capacity.reports.styles import (
    CAPTION,
    PDC_BLUE,
    PDC_LIGHT,
    SECTION_HEADER,
    STATUS_COLORS,
)
from pdc_capacity.utils.formatting import fmt_number, fmt_percent
from pdc_capacity.utils.logger import get_logger

log = get_logger(__name__)

PAGESIZE = landscape(LETTER)
USABLE_WIDTH = PAGESIZE[0] - 1.0 * inch


# ============================================================
# SECTIONS
# ============================================================

def build_summary_table(view: CapacityView) -> Table:
    s = view.summary
    data = [
        ["Day Capacity (All Visible)", "Enabled Shifts", "Enabled Station Types", "Utilization"],
        [
            fmt_number(s.total_day_capacity),
            f"{s.enabled_shifts} / {s.total_shifts}",
            str(s.enabled_station_types),
            fmt_percent(view.utilization),
        ],
        [
            "Enabled flows/stations across enabled shifts",
            s.shift_names_text,
            "Across Pick / Pack / Inbound",
            view.status,
        ],
    ]
    table = Table(data, colWidths=[USABLE_WIDTH / 4] * 4)
    table.setStyle(TableStyle([
        ("FONTNAME", (0, 0), (-1, 0), "Helvetica"),
        ("FONTSIZE", (0, 0), (-1, 0), 8),
        ("TEXTCOLOR", (0, 0), (-1, 0), colors.grey),
        ("FONTNAME", (0, 1), (-1, 1), "Helvetica-Bold"),
        ("FONTSIZE", (0, 1), (-1, 1), 16),
        ("TOPPADDING", (0, 1), (-1, 1), 6),
        ("BOTTOMPADDING", (0, 1), (-1, 1), 8),
        ("FONTSIZE", (0, 2), (-1, 2), 7),
        ("TEXTCOLOR", (0, 2), (-1, 2), colors.grey),
        ("TEXTCOLOR", (3, 2), (3, 2), colors.HexColor(STATUS_COLORS.get(view.status, "#000000"))),
        ("BOX", (0, 0), (0, -1), 0.5, colors.lightgrey),
        ("BOX", (1, 0), (1, -1), 0.5, colors.lightgrey),
        ("BOX", (2, 0), (2, -1), 0.5, colors.lightgrey),
        ("BOX", (3, 0), (3, -1), 0.5, colors.lightgrey),
        ("VALIGN", (0, 0), (-1, -1), "MIDDLE"),
    ]))
    return table


def build_bucket_table(df: pd.DataFrame) -> Table:
    """
    Period x group-key table; numbers right-aligned, zebra rows.
    """
    data = [[df.index.name] + [str(c) for c in df.columns]]
    for idx, row in df.iterrows():
        data.append([str(idx)] + [
            fmt_percent(v) if col == UTIL_COL else fmt_number(v)
            for col, v in row.items()
        ])

    num_cols = len(data[0])
    first_col_width = 1.2 * inch
    other_col_width = (USABLE_WIDTH - first_col_width) / max(num_cols - 1, 1)

    table = Table(
        data,
        colWidths=[first_col_width] + [other_col_width] * (num_cols - 1),
        repeatRows=1,
    )
    table.setStyle(TableStyle([
        # Header
        ("BACKGROUND", (0, 0), (-1, 0), colors.HexColor(PDC_BLUE)),
        ("TEXTCOLOR", (0, 0), (-1, 0), colors.white),
        ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
        ("FONTSIZE", (0, 0), (-1, 0), 8),
        ("ALIGN", (0, 0), (-1, 0), "CENTER"),

        # Body
        ("FONTNAME", (0, 1), (-1, -1), "Helvetica"),
        ("FONTSIZE", (0, 1), (-1, -1), 8),
        ("ALIGN", (1, 1), (-1, -1), "RIGHT"),

        # Zebra striping
        ("ROWBACKGROUNDS", (0, 1), (-1, -1), [colors.white, colors.HexColor(PDC_LIGHT)]),

        # Grid
        ("GRID", (0, 0), (-1, -1), 0.25, colors.lightgrey),
    ]))
    return table


# ============================================================
# RUNNER
# ============================================================

def run_capacity_pdf(view: CapacityView, output_path: Path | str, report_date: date | None = None) -> Path:
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    report_date = report_date or date.today()

    layout = layout_capacity_view(view)
    chart_path = render_png(layout, output_path.with_name(f"{output_path.stem}_chart.png"), dpi=150)
    chart_height = USABLE_WIDTH * layout.height / layout.width

    elements = [
        build_summary_table(view),
        Spacer(1, 0.2 * inch),
        Paragraph(view.value_label, SECTION_HEADER),
        Image(str(chart_path), width=USABLE_WIDTH, height=chart_height),
        Paragraph(view.caption, CAPTION),
        Spacer(1, 0.2 * inch),
        Paragraph("Capacity by Period", SECTION_HEADER),
        build_bucket_table(view_to_frame(view)),
    ]

    frame = PageFrame(
        title=f"PDC Capacity - {view.value_label}",
        report_date=report_date.isoformat(),
        status=view.status,
    )
    build_pdf(output_path, elements, frame, pagesize=PAGESIZE)
    log.info("Capacity PDF written: %s", output_path)
    return output_path
