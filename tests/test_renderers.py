import pytest

from pdc_capacity.charts.geometry import layout_stacked_chart
from pdc_capacity.charts.renderer import render_chart, render_png, render_svg, write_svg

BUCKETS = [{"pick": 120.0, "pack": 0.0}, {"pick": 60.0, "pack": 30.0}]


def _layout(demand=None):
    return layout_stacked_chart(
        BUCKETS, ["pick", "pack"], ["A", "B"], demand, value_label="Per Shift Capacity"
    )


def test_svg_document_contents():
    svg = render_svg(_layout([100.0, 200.0]))
    assert "<svg" in svg
    assert svg.rstrip().endswith("</svg>")
    assert 'id="stack-0-pick"' in svg
    assert 'id="stack-1-pick"' in svg
    assert 'id="stack-1-pack"' in svg
    # zero-height pack segment in the first bucket is not drawn
    assert 'id="stack-0-pack"' not in svg
    assert 'id="demand"' in svg
    assert "Per Shift Capacity" in svg
    assert ">Capacity<" in svg
    assert ">Demand<" in svg


def test_svg_without_overlay():
    svg = render_svg(_layout([1.0]))
    assert 'id="demand"' not in svg
    assert ">Demand<" not in svg


def test_svg_escapes_labels():
    layout = layout_stacked_chart([{"R&D <x>": 5.0}], ["R&D <x>"], ["Day Total"])
    assert "R&amp;D &lt;x&gt;" in render_svg(layout)


def test_write_svg(tmp_path):
    out = write_svg(_layout(), tmp_path / "charts" / "capacity.svg")
    assert out.exists()
    assert "<svg" in out.read_text(encoding="utf-8")


def test_render_png(tmp_path):
    out = render_png(_layout([100.0, 200.0]), tmp_path / "capacity.png")
    assert out.read_bytes()[:8] == b"\x89PNG\r\n\x1a\n"


def test_render_chart_format_from_suffix(tmp_path):
    out = render_chart(_layout(), tmp_path / "chart.svg")
    assert "<svg" in out.read_text(encoding="utf-8")


def test_render_chart_rejects_unknown_format(tmp_path):
    with pytest.raises(ValueError):
        render_chart(_layout(), tmp_path / "chart.gif")
