# src/pdc_capacity/reports/builder.py
"""
Page frame shared by capacity PDFs: header band with title, date and
utilization status badge; footer rule with product name and page number.
"""

from dataclasses import dataclass
from functools import partial
from pathlib import Path
from typing import Optional

from reportlab.lib import colors
from reportlab.lib.pagesizes import LETTER
from reportlab.lib.units import inch
from reportlab.platypus import SimpleDocTemplate

from pdc_capacity.reports.styles import PDC_BLUE, PDC_GRAY, STATUS_COLORS

FOOTER_TEXT = "PDC Capacity Simulator"
HEADER_HEIGHT = 0.9 * inch
SIDE_MARGIN = 0.5 * inch


@dataclass(frozen=True)
class PageFrame:
    title: str
    report_date: str
    status: Optional[str] = None


def _draw_status_badge(canvas, status: str, right: float, baseline: float):
    label = f"  {status}  "
    w = canvas.stringWidth(label, "Helvetica-Bold", 9)
    canvas.setFillColor(colors.HexColor(STATUS_COLORS.get(status, PDC_GRAY)))
    canvas.roundRect(right - w, baseline - 4, w, 15, 4, fill=1, stroke=0)
    canvas.setFillColor(colors.white)
    canvas.setFont("Helvetica-Bold", 9)
    canvas.drawRightString(right, baseline, label)
    return w


def draw_page_frame(canvas, doc, frame: PageFrame):
    canvas.saveState()
    width, height = doc.pagesize
    text_y = height - 0.52 * inch

    canvas.setFillColor(colors.HexColor(PDC_BLUE))
    canvas.rect(0, height - HEADER_HEIGHT, width, HEADER_HEIGHT, fill=1, stroke=0)

    canvas.setFillColor(colors.white)
    canvas.setFont("Helvetica-Bold", 15)
    canvas.drawString(SIDE_MARGIN, text_y, frame.title)

    right = width - SIDE_MARGIN
    if frame.status:
        right -= _draw_status_badge(canvas, frame.status, right, text_y) + 8
    canvas.setFillColor(colors.white)
    canvas.setFont("Helvetica", 10)
    canvas.drawRightString(right, text_y, frame.report_date)

    canvas.setStrokeColor(colors.HexColor(PDC_GRAY))
    canvas.line(SIDE_MARGIN, 0.75 * inch, width - SIDE_MARGIN, 0.75 * inch)

    canvas.setFont("Helvetica", 8)
    canvas.setFillColor(colors.HexColor(PDC_GRAY))
    canvas.drawString(SIDE_MARGIN, 0.5 * inch, FOOTER_TEXT)
    canvas.drawRightString(width - SIDE_MARGIN, 0.5 * inch, f"Page {doc.page}")

    canvas.restoreState()


def build_pdf(output_path: Path | str, elements: list, frame: PageFrame, pagesize=LETTER) -> Path:
    """Lay out the flowables with the page frame on every page."""
    output_path = Path(output_path)
    doc = SimpleDocTemplate(
        str(output_path),
        pagesize=pagesize,
        leftMargin=SIDE_MARGIN,
        rightMargin=SIDE_MARGIN,
        topMargin=1.15 * inch,
        bottomMargin=1.0 * inch,
        title=frame.title,
    )
    hook = partial(draw_page_frame, frame=frame)
    doc.build(elements, onFirstPage=hook, onLaterPages=hook)
    return output_path
