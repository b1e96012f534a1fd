# src/pdc_capacity/reports/styles.py
"""
Centralized styling for capacity PDFs
"""
from reportlab.lib import colors
from reportlab.lib.styles import ParagraphStyle
from reportlab.lib.enums import TA_CENTER, TA_LEFT

PDC_BLUE = "#2563EB"    # Header bar / table headers
PDC_GRAY = "#A7A9AC"    # Footer rule and text
PDC_DARK = "#111827"    # Neutral dark (text only)
PDC_LIGHT = "#F5F7FA"   # Table zebra

STATUS_COLORS = {
    "OK": "#2E7D32",
    "WARNING": "#F9A825",
    "OVER": "#C62828",
}

SECTION_HEADER = ParagraphStyle(
    "SectionHeader",
    fontName="Helvetica-Bold",
    fontSize=12,
    leading=15,
    alignment=TA_LEFT,
    textColor=colors.HexColor(PDC_DARK),
    spaceBefore=10,
    spaceAfter=6,
)
CAPTION = ParagraphStyle(
    "Caption",
    fontName="Helvetica",
    fontSize=9,
    leading=11,
    alignment=TA_CENTER,
    textColor=colors.HexColor(PDC_GRAY),
)
