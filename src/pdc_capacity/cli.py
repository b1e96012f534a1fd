import argparse
import sys
from typing import List, Optional

from pdc_capacity.application.capacity_view import build_capacity_view, layout_capacity_view
from pdc_capacity.charts.renderer import render_png, write_svg
from pdc_capacity.domain.models import FLOWS, GroupingMode, ViewMode
from pdc_capacity.presentation.console import render_capacity_view
from pdc_capacity.presentation.tables import export_csv
from pdc_capacity.reports.capacity_report import run_capacity_pdf
from pdc_capacity.snapshot.edits import set_flow_visibility
from pdc_capacity.snapshot.store import SnapshotError, SnapshotStore
from pdc_capacity.utils.config import config
from pdc_capacity.utils.logger import get_logger

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="PDC Capacity Simulator – capacity by hour, shift or day"
    )

    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="JSON configuration snapshot. Defaults to the built-in seed configuration.",
    )

    parser.add_argument(
        "--view",
        choices=[v.value for v in ViewMode],
        default=config.default_view.value,
        help="Time granularity of the chart",
    )

    parser.add_argument(
        "--group",
        choices=[g.value for g in GroupingMode],
        default=config.default_grouping.value,
        help="Stack bars by flow or by station type",
    )

    parser.add_argument(
        "--hide-flow",
        action="append",
        choices=[f.value for f in FLOWS],
        default=[],
        help="Hide a flow (repeatable)",
    )

    parser.add_argument("--svg", type=str, default=None, help="Write the chart as SVG")
    parser.add_argument("--png", type=str, default=None, help="Write the chart as PNG")
    parser.add_argument("--pdf", type=str, default=None, help="Write a one-page PDF report")
    parser.add_argument("--csv", type=str, default=None, help="Write the bucket table as CSV")
    parser.add_argument(
        "--export-config",
        type=str,
        default=None,
        help="Write the effective configuration snapshot as JSON",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    store = SnapshotStore()
    if args.config:
        try:
            store.load_file(args.config)
        except SnapshotError as exc:
            print(f"Could not load configuration: {exc}", file=sys.stderr)
            return 2

    for flow in args.hide_flow:
        store.apply(lambda snap, f=flow: set_flow_visibility(snap, f, False))

    view = build_capacity_view(store.current, ViewMode(args.view), GroupingMode(args.group))
    print(render_capacity_view(view))

    if args.svg or args.png:
        layout = layout_capacity_view(view)
        if args.svg:
            write_svg(layout, args.svg)
        if args.png:
            render_png(layout, args.png)

    if args.csv:
        export_csv(view, args.csv)

    if args.pdf:
        run_capacity_pdf(view, args.pdf)

    if args.export_config:
        store.save_file(args.export_config)

    return 0


if __name__ == "__main__":
    sys.exit(main())
