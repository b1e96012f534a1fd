# src/pdc_capacity/charts/renderer.py
"""
Chart Renderer: draws a ChartLayout with matplotlib and saves it as SVG
or PNG.

The layout is already in pixels, so the axes are a 1:1 pixel canvas
(y pointing down) and shapes are placed exactly where the layout says.
Bar segments carry ids ("stack-<index>-<key>") and the demand line is
"demand", so the SVG output can be wired to the hit-test tooltips.
"""

from __future__ import annotations

import io
from pathlib import Path

import matplotlib.pyplot as plt
from matplotlib.patches import FancyBboxPatch, Patch

from pdc_capacity.charts.geometry import ChartLayout
from pdc_capacity.charts.palette import (
    AXIS_TEXT_COLOR,
    DEMAND_COLOR,
    GRID_COLOR,
    LABEL_TEXT_COLOR,
    TITLE_TEXT_COLOR,
)
from pdc_capacity.utils.logger import get_logger

log = get_logger(__name__)

FORMATS = ("svg", "png")
CORNER_RADIUS = 4

# keep SVG text as <text> elements instead of glyph paths
SVG_RC = {"svg.fonttype": "none"}


def segment_id(index: int, key: str) -> str:
    return f"stack-{index}-{key}"


def _draw(layout: ChartLayout, dpi: int):
    fig = plt.figure(figsize=(layout.width / dpi, layout.height / dpi), dpi=dpi)
    ax = fig.add_axes([0, 0, 1, 1])
    ax.set_xlim(0, layout.width)
    ax.set_ylim(layout.height, 0)
    ax.axis("off")

    ox, oy = layout.margin.left, layout.margin.top
    w, h = layout.plot_width, layout.plot_height

    for line in layout.grid_lines:
        ax.plot([ox, ox + w], [oy + line.y, oy + line.y], color=GRID_COLOR, linewidth=1, zorder=1)
        ax.text(ox - 8, oy + line.y, line.label, ha="right", va="center", fontsize=8, color=AXIS_TEXT_COLOR)

    for stack in layout.stacks:
        for seg in stack.segments:
            if seg.height <= 0:
                continue
            radius = min(CORNER_RADIUS, seg.width / 2, seg.height / 2)
            patch = FancyBboxPatch(
                (ox + seg.x, oy + seg.y),
                seg.width,
                seg.height,
                boxstyle=f"round,pad=0,rounding_size={radius}",
                facecolor=seg.color,
                edgecolor="none",
                zorder=2,
            )
            patch.set_gid(segment_id(stack.index, seg.key))
            ax.add_patch(patch)

    if layout.overlay is not None:
        xs = [ox + p.x for p in layout.overlay.points]
        ys = [oy + p.y for p in layout.overlay.points]
        (demand_line,) = ax.plot(xs, ys, color=DEMAND_COLOR, linewidth=2, marker="o", markersize=4, zorder=3)
        demand_line.set_gid("demand")

    for lab in layout.category_labels:
        ax.text(ox + lab.x, oy + lab.y, lab.text, ha="center", va="baseline", fontsize=8, color=LABEL_TEXT_COLOR)

    ax.text(8, oy - 8, layout.title, fontsize=10, fontweight="bold", color=TITLE_TEXT_COLOR)
    if layout.value_label:
        ax.text(ox + w / 2, oy + h + 34, layout.value_label, ha="center", fontsize=9, color=TITLE_TEXT_COLOR)

    if layout.legend:
        ax.legend(
            handles=[Patch(color=e.color, label=e.key) for e in layout.legend],
            loc="upper right",
            ncol=len(layout.legend),
            frameon=False,
            fontsize=7,
        )
    return fig


def _save(layout: ChartLayout, target, fmt: str, dpi: int) -> None:
    if fmt not in FORMATS:
        raise ValueError(f"Unsupported chart format: {fmt!r} (expected one of {FORMATS})")
    with plt.rc_context(SVG_RC):
        fig = _draw(layout, dpi)
        try:
            fig.savefig(target, format=fmt, dpi=dpi, facecolor="white")
        finally:
            plt.close(fig)


def render_chart(layout: ChartLayout, output_path: Path | str, fmt: str | None = None, dpi: int = 100) -> Path:
    """Save the chart; the format defaults to the file suffix."""
    output_path = Path(output_path)
    fmt = (fmt or output_path.suffix.lstrip(".") or "png").lower()
    output_path.parent.mkdir(parents=True, exist_ok=True)
    _save(layout, output_path, fmt, dpi)
    log.info("%s chart written: %s", fmt.upper(), output_path)
    return output_path


def render_svg(layout: ChartLayout) -> str:
    buf = io.BytesIO()
    _save(layout, buf, "svg", 100)
    return buf.getvalue().decode("utf-8")


def write_svg(layout: ChartLayout, output_path: Path | str) -> Path:
    return render_chart(layout, output_path, fmt="svg")


def render_png(layout: ChartLayout, output_path: Path | str, dpi: int = 100) -> Path:
    return render_chart(layout, output_path, fmt="png", dpi=dpi)
